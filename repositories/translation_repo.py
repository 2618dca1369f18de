from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from models.translation import ClipboardTranslation


class TranslationRepository:
    """Storage access for clipboard translations.

    Every read and write that targets an existing row carries the owner in
    its WHERE clause, so the ownership check and the mutation are one
    statement.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, record: ClipboardTranslation) -> ClipboardTranslation:
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    # Read-only lookup; update and delete fold this predicate into their own statement
    def find_by_id(self, translation_id: str, user_id: str) -> ClipboardTranslation | None:
        stmt = select(ClipboardTranslation).where(
            ClipboardTranslation.id == translation_id,
            ClipboardTranslation.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def update_fields(self, translation_id: str, user_id: str, changes: dict) -> ClipboardTranslation | None:
        if not changes:
            raise ValueError("No fields to update")
        stmt = (
            update(ClipboardTranslation)
            .where(
                ClipboardTranslation.id == translation_id,
                ClipboardTranslation.user_id == user_id,
            )
            .values(**changes)
            .returning(ClipboardTranslation)
            .execution_options(synchronize_session="fetch")
        )
        translation = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if translation is not None:
            self.db.refresh(translation)
        return translation

    def delete_by_id(self, translation_id: str, user_id: str) -> bool:
        result = self.db.execute(
            delete(ClipboardTranslation).where(
                ClipboardTranslation.id == translation_id,
                ClipboardTranslation.user_id == user_id,
            )
        )
        self.db.commit()
        return result.rowcount > 0

    def list_by_owner(self, user_id: str, *, favorites_only: bool = False) -> list[ClipboardTranslation]:
        stmt = select(ClipboardTranslation).where(ClipboardTranslation.user_id == user_id)
        if favorites_only:
            stmt = stmt.where(ClipboardTranslation.is_favorite.is_(True))
        return list(self.db.execute(stmt).scalars())
