# This project was developed with assistance from AI tools.
"""Caller identity as seen by routes, and the token claims it comes from."""

from db.enums import UserRole
from pydantic import BaseModel, ConfigDict


class UserContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    email: str = ""
    name: str = ""


class TokenPayload(BaseModel):
    """Claims we read from a session JWT. Unknown claims are ignored."""

    sub: str
    role: str | None = None
    email: str = ""
    name: str = ""
    exp: int | None = None
