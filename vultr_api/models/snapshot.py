"""Server snapshots."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from vultr_api.mappers.json_mapper import JsonObjectReader


@dataclass(frozen=True)
class Snapshot:
    """A snapshot; identified by a string token, not a number."""
    id: str
    date_created: str
    description: str
    size: int
    status: str
    os_id: int
    app_id: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Snapshot":
        r = JsonObjectReader(data, "Snapshot")
        return cls(
            id=r.get_str("SNAPSHOTID"),
            date_created=r.get_str("date_created"),
            description=r.get_str("description"),
            size=r.get_int("size"),
            status=r.get_str("status"),
            os_id=r.get_int("OSID"),
            app_id=r.get_int("APPID"),
        )
