from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text, false, func

from core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ClipboardTranslation(Base):
    __tablename__ = "clipboard_translation_history"
    __table_args__ = (
        Index("ix_clipboard_translation_history_user_favorite", "user_id", "is_favorite"),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    source_language = Column(String(35), nullable=True)
    target_language = Column(String(35), nullable=True)
    original_text = Column(Text, nullable=False)
    translated_text = Column(Text, nullable=False)
    # "system", "browser" or an app name when the capture origin is known
    context_hint = Column(String(255), nullable=True)
    is_favorite = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())
