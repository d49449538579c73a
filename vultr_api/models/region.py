"""Data center regions."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from vultr_api.exceptions.custom_exceptions import DataValidationError
from vultr_api.mappers.json_mapper import JsonObjectReader


class Continent(Enum):
    """Continents a region can be located on."""
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    ASIA = "Asia"
    EUROPE = "Europe"
    AUSTRALIA = "Australia"
    AFRICA = "Africa"

    @classmethod
    def from_wire(cls, value: str) -> "Continent":
        """Match a continent name ignoring case, spaces and underscores."""
        wanted = _squash(value)
        for member in cls:
            if _squash(member.name) == wanted:
                return member
        raise DataValidationError(f"Unknown continent: {value!r}")


def _squash(value: str) -> str:
    return "".join(value.split()).replace("_", "").upper()


@dataclass(frozen=True)
class Region:
    """A Vultr data center."""
    id: int
    name: str
    country: str
    continent: Continent
    state: str
    ddos_protection: bool
    block_storage: Optional[bool] = None
    region_code: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Region":
        r = JsonObjectReader(data, "Region")
        return cls(
            id=r.get_int("DCID"),
            name=r.get_str("name"),
            country=r.get_str("country"),
            continent=Continent.from_wire(r.get_str("continent")),
            state=r.get_str("state"),
            ddos_protection=r.get_bool("ddos_protection"),
            block_storage=r.opt_bool("block_storage"),
            region_code=r.opt_str("regioncode"),
        )
