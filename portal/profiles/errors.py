"""
Portal Profiles — Errors
========================
"""

from __future__ import annotations


class MalformedProfileError(ValueError):
    """
    A stored profile or session record cannot be turned into a usable
    authorization subject.

    Raised only by explicit parsing helpers. Guards, providers and the
    engine catch it and fail closed.
    """

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message)
