# app/chat_proxy/routes.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from app.chat_proxy.chat_service import answer_prompt
from app.chat_proxy.groq_chat_client import GroqChatClient
from app.clinic_models.clinic_schemas import ChatPayload
from app.clinic_services.dependencies import get_chat_client
from app.shared.exceptions import BadRequestError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_class=HTMLResponse)
async def chat_endpoint(
    payload: Optional[ChatPayload] = None,
    client: GroqChatClient = Depends(get_chat_client),
):
    """
    Answer a free-text prompt.

    The reply may contain markup (the mock patient history does), so it is
    sent as text/html. A missing prompt is the only distinguishable failure.
    """
    prompt = payload.prompt if payload else None

    try:
        reply = await run_in_threadpool(answer_prompt, prompt, client)
    except BadRequestError as e:
        return PlainTextResponse(str(e), status_code=400)
    except Exception as e:
        logger.error(f"❌ Error querying Groq AI: {e}", exc_info=True)
        return PlainTextResponse("Error querying Groq AI", status_code=500)
    return HTMLResponse(reply)
