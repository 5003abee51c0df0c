"""
Portal Edit Mode — Global Edit Lock
===================================
Process-wide switch gating every mutating action:
  enabled  → create/edit/delete may run
  disabled → read-only mode, all mutations refused

Independent of any actor. Readers must ask every time; the value can
flip between two actions.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

logger = logging.getLogger("portal.edit_mode")


class EditLock:
    def __init__(self, enabled: bool = False, reason: Optional[str] = None) -> None:
        if not isinstance(enabled, bool):
            raise ValueError("enabled must be a bool.")
        self._lock = threading.Lock()
        self._enabled = enabled
        self._reason = None if enabled else reason

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @property
    def reason(self) -> Optional[str]:
        """Why editing is disabled (None when enabled or unspecified)."""
        with self._lock:
            return self._reason

    def enable(self) -> None:
        with self._lock:
            self._enabled = True
            self._reason = None
        logger.info("Edit mode enabled.")

    def disable(self, reason: Optional[str] = None) -> None:
        with self._lock:
            self._enabled = False
            self._reason = reason
        logger.info(f"Edit mode disabled{': ' + reason if reason else ''}.")

    def set_enabled(self, enabled: bool, reason: Optional[str] = None) -> None:
        if enabled:
            self.enable()
        else:
            self.disable(reason)

    def toggle(self) -> bool:
        """Flip the lock and return the new state."""
        with self._lock:
            self._enabled = not self._enabled
            self._reason = None
            enabled = self._enabled
        logger.info(f"Edit mode toggled {'on' if enabled else 'off'}.")
        return enabled

    def snapshot(self) -> dict:
        with self._lock:
            return {"enabled": self._enabled, "reason": self._reason}
