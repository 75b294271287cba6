from functools import lru_cache
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.application.ports.seat_inventory import SeatInventoryPort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.infrastructure.seating.fixed_inventory import FixedSeatInventory
from app.infrastructure.store.memory_store import MemoryConversationStore


_conversation_store: MemoryConversationStore | None = None


@lru_cache
def get_seat_inventory() -> SeatInventoryPort:
    return FixedSeatInventory(rows=settings.SEAT_ROWS, seats_per_row=settings.SEATS_PER_ROW)


def get_conversation_store() -> MemoryConversationStore:
    global _conversation_store
    if _conversation_store is None:
        _conversation_store = MemoryConversationStore()
    return _conversation_store


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        inventory=get_seat_inventory(),
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
        default_duration=settings.DEFAULT_DURATION,
        default_purpose=settings.DEFAULT_PURPOSE,
        id_prefix=settings.BOOKING_ID_PREFIX,
    )


def get_reply_composer() -> ReplyComposer:
    return ReplyComposer(
        business_name=settings.BUSINESS_NAME,
        preview_limit=settings.AVAILABILITY_PREVIEW_LIMIT,
    )


def get_handle_chat_message_use_case() -> HandleChatMessageUseCase:
    return HandleChatMessageUseCase(
        classify_intent=ClassifyIntentUseCase(),
        booking_use_case=get_booking_use_case(),
        inventory=get_seat_inventory(),
        composer=get_reply_composer(),
    )


def get_container() -> dict[str, object]:
    return {
        "use_case": get_handle_chat_message_use_case(),
        "store": get_conversation_store(),
    }
