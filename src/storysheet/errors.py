from __future__ import annotations


class StorySheetError(Exception):
    """Base class for errors raised by storysheet."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StorySheetError):
    """
    Raised when a submission is missing a required field.

    Maps to HTTP 400.
    """


class RemoteWriteError(StorySheetError):
    """
    Raised when the Sheets API append fails for any reason.

    Auth, quota, network and malformed-request failures all land here; `message`
    is the underlying error's text. Maps to HTTP 500.
    """
