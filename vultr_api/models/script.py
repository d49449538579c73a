"""Startup scripts."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from vultr_api.exceptions.custom_exceptions import DataValidationError
from vultr_api.mappers.json_mapper import JsonObjectReader


class ScriptType(Enum):
    """When the script runs: on boot, or as an iPXE chain script."""
    BOOT = "boot"
    PXE = "pxe"

    @classmethod
    def from_wire(cls, value: str) -> "ScriptType":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise DataValidationError(f"Unknown script type: {value!r}") from None


@dataclass(frozen=True)
class Script:
    id: int
    date_created: str
    date_modified: str
    name: str
    type: ScriptType
    script: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Script":
        r = JsonObjectReader(data, "Script")
        return cls(
            id=r.get_int("SCRIPTID"),
            date_created=r.get_str("date_created"),
            date_modified=r.get_str("date_modified"),
            name=r.get_str("name"),
            type=ScriptType.from_wire(r.get_str("type")),
            script=r.get_str("script"),
        )
