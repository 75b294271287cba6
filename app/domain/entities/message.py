from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    role: str  # "user" | "assistant"
    content: str
