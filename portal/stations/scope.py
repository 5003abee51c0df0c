"""
Portal Stations — Station Scope
===============================
An actor's station access is either the universal sentinel "ALL"
or an explicit set of station identifiers.

Only the sentinel counts as all-stations access. A set that happens
to list every station known today does not, since stations added
later would not be in it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

ALL_STATIONS = "ALL"


@dataclass(frozen=True)
class StationAccess:
    universal: bool = False
    stations: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.stations, frozenset):
            raise ValueError("stations must be a frozenset.")

        for station in self.stations:
            if not isinstance(station, str) or not station:
                raise ValueError("station identifiers must be non-empty strings.")

        if self.universal and self.stations:
            raise ValueError("universal station access cannot also list stations.")

    @classmethod
    def all(cls) -> "StationAccess":
        return cls(universal=True)

    @classmethod
    def only(cls, *stations: str) -> "StationAccess":
        return cls(stations=frozenset(stations))

    @classmethod
    def parse(cls, value) -> "StationAccess":
        """
        Accepts the stored forms: "ALL", a single station name, an
        iterable of names, or None (no stations).
        """
        if value is None:
            return cls()
        if isinstance(value, StationAccess):
            return value
        if isinstance(value, str):
            if value == ALL_STATIONS:
                return cls.all()
            if not value.strip():
                return cls()
            return cls.only(value)
        if isinstance(value, Iterable) and not isinstance(value, (bytes, dict)):
            names = tuple(value)
            if any(not isinstance(name, str) for name in names):
                raise ValueError("station identifiers must be strings.")
            if ALL_STATIONS in names:
                raise ValueError(
                    f"'{ALL_STATIONS}' must be given alone, not inside a station list."
                )
            return cls(stations=frozenset(name for name in names if name))
        raise ValueError("station access must be 'ALL', a station name or a list.")

    def to_value(self):
        """Inverse of parse(): the sentinel string or a sorted list."""
        if self.universal:
            return ALL_STATIONS
        return sorted(self.stations)


def _access_of(profile) -> StationAccess | None:
    access = getattr(profile, "station_access", None)
    if isinstance(access, StationAccess):
        return access
    return None


def has_station_access(profile, station: str) -> bool:
    """Universal access, or the station is literally enumerated."""
    access = _access_of(profile)
    if access is None:
        return False
    if access.universal:
        return True
    return isinstance(station, str) and station in access.stations


def has_all_stations_access(profile) -> bool:
    """Exactly the universal sentinel."""
    access = _access_of(profile)
    return access is not None and access.universal
