from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.schemas import BookingSchema, ChatRequestSchema, ChatResponseSchema
from app.wiring.dependencies import get_handle_chat_message_use_case


router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_MESSAGE = "I apologize, but I encountered an error. Please try again."


def _error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": ERROR_MESSAGE})


@router.post("/api/chat")
async def chat(request: Request) -> JSONResponse:
    try:
        body = await request.body()
        try:
            payload = json.loads(body.decode("utf-8"))
        except Exception as e:
            logger.exception("Failed to parse chat body", extra={"reason": str(e)})
            return _error_response()

        req = ChatRequestSchema.model_validate(payload)
        use_case = get_handle_chat_message_use_case()
        reply = use_case.execute(
            messages=[m.to_entity() for m in req.messages],
            bookings=[b.to_entity() for b in req.bookings],
        )

        response = ChatResponseSchema(
            message=reply.text,
            booking=BookingSchema.from_entity(reply.booking) if reply.booking else None,
        )
        return JSONResponse(content=response.model_dump(by_alias=True, exclude_none=True))
    except Exception as e:
        logger.exception("Error processing chat", extra={"reason": str(e)})
        return _error_response()
