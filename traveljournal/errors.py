"""Errors raised while handling journal actions.

Each error carries a ``message_key`` that the localisation layer turns into
the text shown in the form's error region.
"""
from __future__ import annotations


class JournalError(Exception):
    message_key = "error_generic"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.message_key)
        self.detail = detail


class MissingRequiredField(JournalError):
    message_key = "error_required"


class ImageTooLarge(JournalError):
    message_key = "error_image_too_large"


class ImageEncodingFailure(JournalError):
    message_key = "error_image_invalid"


class MalformedPersistedData(JournalError):
    message_key = "warning_storage_corrupt"
