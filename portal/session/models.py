"""
Portal Session — Session Record
===============================
Transient proof of login, persisted as one JSON text value:

    {"email": ..., "role": ..., "station": ...,
     "isAuthenticated": true, "loginTime": "2025-01-01T08:00:00.000Z"}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from portal.profiles.errors import MalformedProfileError
from portal.time.temporal import parse_utc_timestamp

_REQUIRED_KEYS = ("email", "role", "station", "isAuthenticated", "loginTime")


@dataclass(frozen=True)
class Session:
    email: str
    role: str
    station: str
    is_authenticated: bool
    login_time: datetime

    def __post_init__(self):
        if not isinstance(self.email, str):
            raise ValueError("email must be a string.")

        if not isinstance(self.role, str):
            raise ValueError("role must be a string.")

        if not isinstance(self.station, str):
            raise ValueError("station must be a string.")

        if not isinstance(self.is_authenticated, bool):
            raise ValueError("is_authenticated must be a bool.")

        if not isinstance(self.login_time, datetime) or self.login_time.tzinfo is None:
            raise ValueError("login_time must be a timezone-aware datetime.")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Session":
        if not isinstance(record, Mapping):
            raise MalformedProfileError("session record must be an object.")

        for key in _REQUIRED_KEYS:
            if key not in record:
                raise MalformedProfileError(
                    f"session record is missing '{key}'.", field_name=key
                )

        try:
            login_time = parse_utc_timestamp(record["loginTime"])
        except (TypeError, ValueError) as exc:
            raise MalformedProfileError(
                "session loginTime is not a valid timestamp.",
                field_name="loginTime",
            ) from exc

        try:
            return cls(
                email=record["email"],
                role=record["role"],
                station=record["station"],
                is_authenticated=record["isAuthenticated"],
                login_time=login_time,
            )
        except ValueError as exc:
            raise MalformedProfileError(str(exc)) from exc

    @classmethod
    def from_json(cls, text: str) -> "Session":
        try:
            record = json.loads(text)
        except (TypeError, json.JSONDecodeError) as exc:
            raise MalformedProfileError("session record is not valid JSON.") from exc
        return cls.from_record(record)

    def to_record(self) -> dict[str, Any]:
        login_time = self.login_time.astimezone(timezone.utc)
        return {
            "email": self.email,
            "role": self.role,
            "station": self.station,
            "isAuthenticated": self.is_authenticated,
            "loginTime": login_time.isoformat(timespec="milliseconds").replace(
                "+00:00", "Z"
            ),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_record(), sort_keys=True)
