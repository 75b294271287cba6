class ChatRequestError(ValueError):
    """Base class for chat requests the engine cannot process."""
    pass


class InvalidChatRequestError(ChatRequestError):
    """Raised when the transcript is empty or the latest message is unreadable."""
    pass
