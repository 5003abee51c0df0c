"""
Portal Edit Mode — Public API
=============================
Global read-only switch and the guarded-action wrapper.
"""

from portal.edit_mode.gate import (
    EditModeGate,
    GuardedActionResult,
    GuardedActionStatus,
)
from portal.edit_mode.lock import EditLock
from portal.edit_mode.notices import (
    InMemoryNoticeSink,
    LoggingNoticeSink,
    Notice,
    NoticeLevel,
    NoticeSink,
)

__all__ = [
    "EditLock",
    "EditModeGate",
    "GuardedActionResult",
    "GuardedActionStatus",
    "Notice",
    "NoticeLevel",
    "NoticeSink",
    "LoggingNoticeSink",
    "InMemoryNoticeSink",
]
