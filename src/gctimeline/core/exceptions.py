"""Exceptions raised by the timeline core."""


class DateTimeStampFormatError(ValueError):
    """Raised when date or uptime text cannot be interpreted.

    Attributes:
        text: The offending text.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text
