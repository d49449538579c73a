"""Account billing information."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from vultr_api.mappers.json_mapper import JsonObjectReader


@dataclass(frozen=True)
class AccountInfo:
    """Balance and payment details; amounts are decimal strings in USD."""
    balance: str
    pending_charges: str
    last_payment_date: str
    last_payment_amount: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AccountInfo":
        r = JsonObjectReader(data, "AccountInfo")
        return cls(
            balance=r.get_str("balance"),
            pending_charges=r.get_str("pending_charges"),
            last_payment_date=r.get_str("last_payment_date"),
            last_payment_amount=r.get_str("last_payment_amount"),
        )
