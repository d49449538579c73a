"""ISO images uploaded to the account."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from vultr_api.mappers.json_mapper import JsonObjectReader


@dataclass(frozen=True)
class Iso:
    id: int
    date_created: str
    filename: str
    size: int
    md5sum: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Iso":
        r = JsonObjectReader(data, "Iso")
        return cls(
            id=r.get_int("ISOID"),
            date_created=r.get_str("date_created"),
            filename=r.get_str("filename"),
            size=r.get_int("size"),
            md5sum=r.get_str("md5sum"),
        )
