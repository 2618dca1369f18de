from pydantic import BaseModel, Field

from schemas.translation import CamelModel


class CurrentUser(BaseModel):
    """Identity of the caller, resolved once at the request boundary."""

    id: str = Field(min_length=1)


class MeOut(CamelModel):
    user_id: str
