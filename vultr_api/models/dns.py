"""DNS domains and records."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from vultr_api.exceptions.custom_exceptions import DataValidationError
from vultr_api.mappers.json_mapper import JsonObjectReader


class DnsRecordType(Enum):
    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"
    NS = "NS"
    SRV = "SRV"
    TXT = "TXT"
    SSHFP = "SSHFP"
    CAA = "CAA"

    @classmethod
    def from_wire(cls, value: str) -> "DnsRecordType":
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise DataValidationError(f"Unknown DNS record type: {value!r}") from None


@dataclass(frozen=True)
class Dns:
    """A domain hosted on Vultr DNS, identified by its name."""
    domain: str
    date_created: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Dns":
        r = JsonObjectReader(data, "Dns")
        return cls(domain=r.get_str("domain"), date_created=r.get_str("date_created"))


@dataclass(frozen=True)
class DnsRecord:
    """One record of a domain. `name` is the subdomain, empty for the apex."""
    id: int
    type: DnsRecordType
    name: str
    data: str
    priority: int
    ttl: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "DnsRecord":
        r = JsonObjectReader(data, "DnsRecord")
        return cls(
            id=r.get_int("RECORDID"),
            type=DnsRecordType.from_wire(r.get_str("type")),
            name=r.get_str("name"),
            data=r.get_str("data"),
            priority=r.get_int("priority"),
            ttl=r.get_int("ttl"),
        )
