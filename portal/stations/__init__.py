"""
Portal Stations — Public API
============================
"""

from portal.stations.scope import (
    ALL_STATIONS,
    StationAccess,
    has_all_stations_access,
    has_station_access,
)

__all__ = [
    "ALL_STATIONS",
    "StationAccess",
    "has_station_access",
    "has_all_stations_access",
]
