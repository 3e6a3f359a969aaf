# This project was developed with assistance from AI tools.
"""Request/response schemas for the product chat endpoint."""

import uuid

from db.enums import ChatRole
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_QUESTION_LENGTH = 500
MAX_HISTORY_TURNS = 20


class ChatTurn(BaseModel):
    """One prior turn supplied by the client as context."""

    role: ChatRole
    content: str = Field(..., min_length=1)


class AskRequest(BaseModel):
    """Question about a single product."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: uuid.UUID = Field(..., alias="productId")
    message: str = Field(..., min_length=1, max_length=MAX_QUESTION_LENGTH)
    history: list[ChatTurn] = Field(default_factory=list, max_length=MAX_HISTORY_TURNS)

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class AskResponse(BaseModel):
    """Final answer after the response gate."""

    message: str = Field(..., description="Answer text shown to the user")
    safety_override: bool = Field(
        default=False,
        description="True when the generated answer was replaced by the safe fallback",
    )


class HistoryMessage(BaseModel):
    """A stored turn, read straight off the ChatMessage row."""

    model_config = ConfigDict(from_attributes=True)

    role: ChatRole
    content: str


class HistoryResponse(BaseModel):
    data: list[HistoryMessage] = Field(
        default_factory=list,
        description="Stored turns, oldest first",
    )
