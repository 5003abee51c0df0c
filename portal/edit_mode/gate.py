"""
Portal Edit Mode — Guarded Actions
==================================
Every mutating UI action runs through EditModeGate.guarded_action():

  lock disabled  → callback not run, notice emitted, REFUSED
  callback OK    → OK (carries the callback's return value)
  callback raise → failure notice emitted, FAILED; never re-raised

Orthogonal to AuthorizationEngine: an authorized actor is still
blocked while editing is switched off.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from portal.authorization.reasons import DenyReason
from portal.edit_mode.lock import EditLock
from portal.edit_mode.notices import LoggingNoticeSink, Notice, NoticeLevel, NoticeSink

logger = logging.getLogger("portal.edit_mode")

EDIT_MODE_DISABLED = "EDIT_MODE_DISABLED"


class GuardedActionStatus(Enum):
    OK = "OK"
    REFUSED = "REFUSED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class GuardedActionResult:
    action: str
    status: GuardedActionStatus
    value: Any = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == GuardedActionStatus.OK

    @property
    def code(self) -> Optional[str]:
        """Machine-readable outcome code (None on success)."""
        if self.status == GuardedActionStatus.REFUSED:
            return EDIT_MODE_DISABLED
        if self.status == GuardedActionStatus.FAILED:
            return DenyReason.ACTION_EXECUTION_FAILURE.value
        return None

    def __bool__(self) -> bool:
        return self.ok


class EditModeGate:
    def __init__(self, lock: EditLock, notices: Optional[NoticeSink] = None) -> None:
        if not isinstance(lock, EditLock):
            raise ValueError("lock must be EditLock.")
        self._lock = lock
        self._notices = notices or LoggingNoticeSink()

    @property
    def is_enabled(self) -> bool:
        return self._lock.enabled

    def guarded_action(
        self,
        name: str,
        callback: Callable[[], Any],
    ) -> GuardedActionResult:
        # Read the lock fresh on every call.
        if not self._lock.enabled:
            reason = self._lock.reason
            self._emit(
                Notice(
                    title="Edit Mode Disabled",
                    message=(
                        f"'{name}' was not performed. Editing is currently "
                        f"switched off{': ' + reason if reason else ''}."
                    ),
                    level=NoticeLevel.WARNING,
                )
            )
            logger.info(f"Refused '{name}': edit mode disabled.")
            return GuardedActionResult(
                action=name,
                status=GuardedActionStatus.REFUSED,
                reason=EDIT_MODE_DISABLED,
            )

        try:
            value = callback()
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            logger.error(f"Guarded action '{name}' failed: {message}")
            self._emit(
                Notice(
                    title="Action Failed",
                    message=f"'{name}' could not be completed: {message}",
                    level=NoticeLevel.ERROR,
                )
            )
            return GuardedActionResult(
                action=name,
                status=GuardedActionStatus.FAILED,
                reason=message,
            )

        return GuardedActionResult(
            action=name,
            status=GuardedActionStatus.OK,
            value=value,
        )

    def guard(self, name: str):
        """Decorator form: the wrapped function returns a GuardedActionResult."""

        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs) -> GuardedActionResult:
                return self.guarded_action(name, lambda: func(*args, **kwargs))

            return wrapper

        return decorator

    def _emit(self, notice: Notice) -> None:
        try:
            self._notices.emit(notice)
        except Exception:
            logger.error(f"Notice sink failed to emit '{notice.title}'.")
