"""Outbound mapping: typed arguments to form parameters."""
from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from vultr_api.utils.constants import WIRE_NO, WIRE_YES


def yes_no(value: bool) -> str:
    """Serialize a boolean the way the API expects it."""
    return WIRE_YES if value else WIRE_NO


def to_wire(value: Any) -> Any:
    """Convert one argument to its form value."""
    if isinstance(value, bool):
        return yes_no(value)
    if isinstance(value, Enum):
        return value.value
    return value


def build_params(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Build a form map, omitting every argument that is None."""
    return {k: to_wire(v) for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class ServerCreateOptions:
    """Optional settings for server creation; anything left as None is not sent."""
    ipxe_chain_url: Optional[str] = None
    iso_id: Optional[int] = None
    script_id: Optional[int] = None
    snapshot_id: Optional[str] = None
    enable_ipv6: Optional[bool] = None
    enable_private_network: Optional[bool] = None
    label: Optional[str] = None
    ssh_key_id: Optional[str] = None
    auto_backups: Optional[bool] = None
    app_id: Optional[int] = None
    user_data: Optional[str] = None
    notify_activate: Optional[bool] = None
    ddos_protection: Optional[bool] = None
    floating_sub_id: Optional[int] = None
    hostname: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        """Form parameters for the options that were set."""
        return build_params({_WIRE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)})


_WIRE_KEYS = {
    "ipxe_chain_url": "ipxe_chain_url",
    "iso_id": "ISOID",
    "script_id": "SCRIPTID",
    "snapshot_id": "SNAPSHOTID",
    "enable_ipv6": "enable_ipv6",
    "enable_private_network": "enable_private_network",
    "label": "label",
    "ssh_key_id": "SSHKEYID",
    "auto_backups": "auto_backups",
    "app_id": "APPID",
    "user_data": "userdata",
    "notify_activate": "notify_activate",
    "ddos_protection": "ddos_protection",
    "floating_sub_id": "floating_v4_SUBID",
    "hostname": "hostname",
}
