# This project was developed with assistance from AI tools.
"""Product chat history persistence.

Turns are stored per (product, user). Saving is best-effort: the chat answer
is already decided by the time we persist, so a storage failure is logged and
the caller still returns the answer.
"""

import logging
from datetime import UTC, datetime, timedelta

from db import ChatMessage
from db.enums import ChatRole
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


async def save_exchange(
    session: AsyncSession,
    *,
    product_id: str,
    user_id: str,
    question: str,
    answer: str,
) -> bool:
    """Persist the user question and the final answer in one commit.

    Returns:
        True if both turns were committed, False if the write failed and was
        rolled back.
    """
    # now() is fixed per transaction, so stamp both turns here to keep their order
    asked_at = datetime.now(UTC)
    try:
        session.add(
            ChatMessage(
                product_id=product_id,
                user_id=user_id,
                role=ChatRole.USER,
                content=question,
                created_at=asked_at,
            )
        )
        session.add(
            ChatMessage(
                product_id=product_id,
                user_id=user_id,
                role=ChatRole.ASSISTANT,
                content=answer,
                created_at=asked_at + timedelta(microseconds=1),
            )
        )
        await session.commit()
    except Exception:
        logger.warning(
            "Failed to save chat messages for product %s user %s",
            product_id,
            user_id,
            exc_info=True,
        )
        await session.rollback()
        return False
    return True


async def get_chat_history(
    session: AsyncSession,
    product_id: str,
    user_id: str,
    limit: int = 10,
) -> list[ChatMessage]:
    """Return the most recent ``limit`` turns, oldest first."""
    stmt = (
        select(ChatMessage)
        .where(ChatMessage.product_id == product_id, ChatMessage.user_id == user_id)
        .order_by(ChatMessage.created_at.desc())
        .limit(limit)
    )
    result = await session.execute(stmt)
    messages = list(result.scalars().all())
    messages.reverse()
    return messages
