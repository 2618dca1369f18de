from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictBool, constr, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

NonEmptyText = constr(min_length=1)


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; both spellings accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranslationCreateIn(CamelModel):
    source_language: str | None = None
    target_language: str | None = None
    original_text: NonEmptyText
    translated_text: NonEmptyText
    context_hint: str | None = None
    is_favorite: StrictBool = False


class TranslationUpdateIn(CamelModel):
    """Sparse update: only keys present in the request body are applied.

    ``sourceLanguage``, ``targetLanguage`` and ``contextHint`` may be sent as
    null to clear them; the remaining fields cannot be nulled.
    """

    source_language: str | None = None
    target_language: str | None = None
    original_text: str | None = None
    translated_text: str | None = None
    context_hint: str | None = None
    is_favorite: StrictBool | None = None

    @field_validator("original_text", "translated_text", "is_favorite")
    @classmethod
    def _reject_null(cls, value: Any):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @model_validator(mode="after")
    def _require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TranslationOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    source_language: str | None = None
    target_language: str | None = None
    original_text: str
    translated_text: str
    context_hint: str | None = None
    is_favorite: bool
    created_at: datetime

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        # sqlite hands back naive datetimes; rows are always written in UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()


class TranslationData(BaseModel):
    translation: TranslationOut


class TranslationListData(BaseModel):
    items: list[TranslationOut]
    total: int


class TranslationEnvelope(BaseModel):
    success: Literal[True] = True
    data: TranslationData


class TranslationListEnvelope(BaseModel):
    success: Literal[True] = True
    data: TranslationListData


class EmptyEnvelope(BaseModel):
    success: Literal[True] = True
    data: dict = {}
