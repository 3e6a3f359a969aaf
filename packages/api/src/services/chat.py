# This project was developed with assistance from AI tools.
"""Product chat orchestration.

Flow for one question: pick prior turns, render the grounded prompt, call the
resolved provider, run the response gate, substitute the fallback on
rejection, persist both turns, return the answer. Each call is independent;
nothing here holds state between requests.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from db import Product
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..inference.client import get_completion
from ..inference.config import ProviderConfig, ProviderKind
from ..inference.errors import LLMTransportError
from ..inference.prompts import Turn, build_grounded_prompt
from ..inference.safety import validate_response
from ..inference.simulated import simulate_response
from .conversation import get_chat_history, save_exchange

logger = logging.getLogger(__name__)

SAFE_FALLBACK_MESSAGE = (
    "I apologize, but I couldn't generate a reliable answer. Please rephrase your "
    "question or ask about specific product details like interest rate, eligibility "
    "criteria, or tenure options."
)

TRANSPORT_ERROR_MESSAGE = (
    "I'm having trouble connecting right now. Please try again in a moment."
)


@dataclass(frozen=True)
class ChatAnswer:
    """Answer returned to the user."""

    message: str
    safety_override: bool = False


async def generate_reply(
    product: Product,
    question: str,
    history: Sequence[Turn],
    provider: ProviderConfig,
) -> str:
    """Produce raw reply text from the resolved provider, before gating."""
    if provider.kind is ProviderKind.SIMULATED:
        return simulate_response(product, question)
    prompt = build_grounded_prompt(product, question, history)
    return await get_completion(prompt, provider)


async def answer_question(
    session: AsyncSession,
    product: Product,
    question: str,
    *,
    user_id: str,
    history: Sequence[Turn] | None = None,
    provider: ProviderConfig,
) -> ChatAnswer:
    """Answer one question about ``product`` and record the exchange.

    Args:
        history: Turns supplied by the client, oldest first. When empty, the
            caller's persisted turns for this product are used instead.

    Raises:
        LLMTransportError: The provider call failed. Nothing is persisted.
    """
    limit = settings.CHAT_HISTORY_LIMIT
    if history:
        # [-0:] would keep everything
        turns = list(history)[-limit:] if limit else []
    else:
        turns = await get_chat_history(session, product.id, user_id, limit=limit)

    try:
        raw = await generate_reply(product, question, turns, provider)
    except LLMTransportError:
        logger.exception(
            "LLM call failed (provider=%s, product=%s)", provider.kind.value, product.id
        )
        raise

    outcome = validate_response(raw)
    if outcome.valid:
        answer = ChatAnswer(message=raw)
    else:
        logger.warning(
            "Response gate rejected answer for product %s: %s", product.id, outcome.reason
        )
        answer = ChatAnswer(message=SAFE_FALLBACK_MESSAGE, safety_override=True)

    await save_exchange(
        session,
        product_id=product.id,
        user_id=user_id,
        question=question,
        answer=answer.message,
    )
    return answer
