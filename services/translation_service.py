import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from core.errors import NotFound, ValidationFailed
from models.translation import ClipboardTranslation
from repositories.translation_repo import TranslationRepository
from schemas.auth import CurrentUser
from schemas.translation import TranslationCreateIn
from services.auth_services import require_user

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = frozenset(
    {
        "source_language",
        "target_language",
        "original_text",
        "translated_text",
        "context_hint",
        "is_favorite",
    }
)


class TranslationService:
    def __init__(self, db: Session):
        self.repo = TranslationRepository(db)

    def create_translation(self, user: CurrentUser | None, data: TranslationCreateIn) -> ClipboardTranslation:
        user = require_user(user)
        record = ClipboardTranslation(
            id=str(uuid.uuid4()),
            user_id=user.id,
            source_language=data.source_language,
            target_language=data.target_language,
            original_text=data.original_text,
            translated_text=data.translated_text,
            context_hint=data.context_hint,
            is_favorite=data.is_favorite,
            created_at=datetime.now(timezone.utc),
        )
        translation = self.repo.insert(record)
        logger.info("Translation created", extra={"user_id": user.id, "translation_id": translation.id})
        return translation

    def update_translation(
        self,
        user: CurrentUser | None,
        translation_id: str,
        changes: dict[str, Any],
    ) -> ClipboardTranslation:
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValidationFailed(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValidationFailed("At least one field must be provided to update.")

        user = require_user(user)
        translation = self.repo.update_fields(translation_id, user.id, changes)
        if translation is None:
            logger.info("Translation not found for update", extra={"user_id": user.id, "translation_id": translation_id})
            raise NotFound()
        logger.info("Translation updated", extra={"user_id": user.id, "translation_id": translation_id})
        return translation

    def delete_translation(self, user: CurrentUser | None, translation_id: str) -> None:
        user = require_user(user)
        if not self.repo.delete_by_id(translation_id, user.id):
            logger.info("Translation not found for delete", extra={"user_id": user.id, "translation_id": translation_id})
            raise NotFound()
        logger.info("Translation deleted", extra={"user_id": user.id, "translation_id": translation_id})

    def list_translations(self, user: CurrentUser | None, *, favorites_only: bool = False) -> list[ClipboardTranslation]:
        user = require_user(user)
        translations = self.repo.list_by_owner(user.id, favorites_only=favorites_only)
        logger.debug("Translations listed", extra={"user_id": user.id, "count": len(translations)})
        return translations
