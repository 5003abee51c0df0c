"""
Portal Edit Mode — User-visible Notices
=======================================
Transient messages shown without navigation (toast-style).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

logger = logging.getLogger("portal.edit_mode")


class NoticeLevel(Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Notice:
    title: str
    message: str
    level: NoticeLevel = NoticeLevel.INFO

    def __post_init__(self):
        if not self.title or not isinstance(self.title, str):
            raise ValueError("title must be a non-empty string.")

        if not isinstance(self.message, str):
            raise ValueError("message must be a string.")

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "message": self.message,
            "level": self.level.value,
        }


class NoticeSink(Protocol):
    def emit(self, notice: Notice) -> None:
        ...


_LOG_LEVELS = {
    NoticeLevel.INFO: logging.INFO,
    NoticeLevel.WARNING: logging.WARNING,
    NoticeLevel.ERROR: logging.ERROR,
}


class LoggingNoticeSink:
    """Default sink: notices go to the portal.edit_mode logger."""

    def emit(self, notice: Notice) -> None:
        logger.log(_LOG_LEVELS[notice.level], f"{notice.title}: {notice.message}")


class InMemoryNoticeSink:
    """Collects notices for later rendering (and for tests)."""

    def __init__(self) -> None:
        self._notices: list[Notice] = []

    @property
    def notices(self) -> tuple[Notice, ...]:
        return tuple(self._notices)

    def emit(self, notice: Notice) -> None:
        self._notices.append(notice)

    def drain(self) -> tuple[Notice, ...]:
        drained = tuple(self._notices)
        self._notices.clear()
        return drained
