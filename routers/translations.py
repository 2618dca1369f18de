from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.auth import CurrentUser
from schemas.translation import (
    EmptyEnvelope,
    TranslationCreateIn,
    TranslationData,
    TranslationEnvelope,
    TranslationListData,
    TranslationListEnvelope,
    TranslationOut,
    TranslationUpdateIn,
)
from services.translation_service import TranslationService
from .auth import current_user

router = APIRouter(prefix="/translations", tags=["Translations"])


def _envelope(translation) -> TranslationEnvelope:
    return TranslationEnvelope(data=TranslationData(translation=TranslationOut.model_validate(translation)))


@router.post(
    "",
    response_model=TranslationEnvelope,
    status_code=201,
)
async def create_translation(
    data: TranslationCreateIn,
    user: CurrentUser | None = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = TranslationService(db)
    translation = svc.create_translation(user, data)
    return _envelope(translation)


@router.get(
    "",
    response_model=TranslationListEnvelope,
)
async def list_translations(
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    user: CurrentUser | None = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = TranslationService(db)
    translations = svc.list_translations(user, favorites_only=favorites_only)
    items = [TranslationOut.model_validate(translation) for translation in translations]
    return TranslationListEnvelope(data=TranslationListData(items=items, total=len(items)))


@router.patch(
    "/{translation_id}",
    response_model=TranslationEnvelope,
)
async def update_translation(
    data: TranslationUpdateIn,
    translation_id: str = Path(..., min_length=1),
    user: CurrentUser | None = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = TranslationService(db)
    translation = svc.update_translation(user, translation_id, data.changes())
    return _envelope(translation)


@router.delete(
    "/{translation_id}",
    response_model=EmptyEnvelope,
)
async def delete_translation(
    translation_id: str = Path(..., min_length=1),
    user: CurrentUser | None = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = TranslationService(db)
    svc.delete_translation(user, translation_id)
    return EmptyEnvelope()
