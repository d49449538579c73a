"""VPS plans."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from vultr_api.mappers.json_mapper import JsonObjectReader


@dataclass(frozen=True)
class Plan:
    """A purchasable server plan.

    `ram` is in MB, `disk` in GB and `bandwidth` in TB per month, as the API
    reports them. `price_per_month` stays a decimal string.
    """
    id: int
    name: str
    vcpu_count: int
    ram: int
    disk: int
    bandwidth: str
    price_per_month: str
    windows: bool
    plan_type: str
    available_locations: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Plan":
        r = JsonObjectReader(data, "Plan")
        return cls(
            id=r.get_int("VPSPLANID"),
            name=r.get_str("name"),
            vcpu_count=r.get_int("vcpu_count"),
            ram=r.get_int("ram"),
            disk=r.get_int("disk"),
            bandwidth=r.get_str("bandwidth"),
            price_per_month=r.get_str("price_per_month"),
            windows=r.get_bool("windows"),
            plan_type=r.get_str("plan_type"),
            available_locations=r.get_int_tuple("available_locations"),
        )
