"""Operating systems and one-click applications."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from vultr_api.mappers.json_mapper import JsonObjectReader


@dataclass(frozen=True)
class OperatingSystem:
    """An installable OS. `surcharge` is a decimal string (USD per month)."""
    id: int
    name: str
    arch: str
    family: str
    windows: bool
    surcharge: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "OperatingSystem":
        r = JsonObjectReader(data, "OperatingSystem")
        return cls(
            id=r.get_int("OSID"),
            name=r.get_str("name"),
            arch=r.get_str("arch"),
            family=r.get_str("family"),
            windows=r.get_bool("windows"),
            surcharge=r.get_str("surcharge"),
        )


@dataclass(frozen=True)
class Application:
    """An application that can be deployed with the 'application' OS."""
    id: int
    name: str
    short_name: str
    deploy_name: str
    surcharge: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Application":
        r = JsonObjectReader(data, "Application")
        return cls(
            id=r.get_int("APPID"),
            name=r.get_str("name"),
            short_name=r.get_str("short_name"),
            deploy_name=r.get_str("deploy_name"),
            surcharge=r.get_str("surcharge"),
        )
