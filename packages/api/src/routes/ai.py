# This project was developed with assistance from AI tools.
"""Product chat routes.

The endpoint owns the HTTP mapping of transport failures: a missing provider
key is a server misconfiguration (500), a failed provider call is an upstream
problem (502) reported with a generic message.
"""

import logging
import uuid

from db import get_db
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..inference.config import ProviderConfig, get_provider
from ..inference.errors import LLMConfigurationError, LLMTransportError
from ..middleware.auth import CurrentUser
from ..schemas.ai import AskRequest, AskResponse, HistoryMessage, HistoryResponse
from ..services.chat import TRANSPORT_ERROR_MESSAGE, answer_question
from ..services.conversation import get_chat_history
from ..services.products import get_product

logger = logging.getLogger(__name__)

router = APIRouter()


def get_chat_provider() -> ProviderConfig:
    """Dependency wrapper so config errors surface as Problem Details."""
    try:
        return get_provider()
    except LLMConfigurationError as exc:
        logger.error("Chat request rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AI assistant is not configured",
        ) from exc


@router.post("/ask", response_model=AskResponse)
async def ask(
    body: AskRequest,
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
    provider: ProviderConfig = Depends(get_chat_provider),
) -> AskResponse:
    """Answer a question about one product from that product's data only."""
    product = await get_product(session, str(body.product_id))
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    try:
        answer = await answer_question(
            session,
            product,
            body.message,
            user_id=user.user_id,
            history=body.history,
            provider=provider,
        )
    except LLMTransportError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=TRANSPORT_ERROR_MESSAGE,
        ) from exc

    return AskResponse(message=answer.message, safety_override=answer.safety_override)


@router.get("/history/{product_id}", response_model=HistoryResponse)
async def history(
    product_id: uuid.UUID,
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
    limit: int = Query(default=settings.CHAT_HISTORY_LIMIT, ge=1, le=100),
) -> HistoryResponse:
    """Return the caller's persisted turns for a product, oldest first."""
    messages = await get_chat_history(session, str(product_id), user.user_id, limit=limit)
    return HistoryResponse(
        data=[HistoryMessage.model_validate(m) for m in messages]
    )
