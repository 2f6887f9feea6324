"""Package exception with unified message codes."""

from wandermap.core.messages import MessageCode, get_default_message


class WanderMapException(Exception):
    """Base exception for WanderMap with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int | None = None,
        details: dict | None = None,
        message: str | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = message or get_default_message(message_code)
        self.details = details or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to the toast/error payload shown by the UI."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }
