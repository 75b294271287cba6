from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities.booking import Booking
from app.domain.entities.message import Message


class MessageSchema(BaseModel):
    role: Literal["user", "assistant"]
    content: str

    def to_entity(self) -> Message:
        return Message(role=self.role, content=self.content)


class BookingSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    seat_number: str = Field(alias="seatNumber")
    date: str
    time: str
    duration: str
    purpose: str

    def to_entity(self) -> Booking:
        return Booking(
            id=self.id,
            name=self.name,
            email=self.email,
            seat_number=self.seat_number,
            date=self.date,
            time=self.time,
            duration=self.duration,
            purpose=self.purpose,
        )

    @staticmethod
    def from_entity(booking: Booking) -> "BookingSchema":
        return BookingSchema(
            id=booking.id,
            name=booking.name,
            email=booking.email,
            seat_number=booking.seat_number,
            date=booking.date,
            time=booking.time,
            duration=booking.duration,
            purpose=booking.purpose,
        )


class ChatRequestSchema(BaseModel):
    messages: list[MessageSchema] = Field(min_length=1)
    bookings: list[BookingSchema] = Field(default_factory=list)

    @field_validator("bookings", mode="before")
    @classmethod
    def _null_bookings(cls, value):
        return [] if value is None else value


class ChatResponseSchema(BaseModel):
    message: str
    booking: BookingSchema | None = None
