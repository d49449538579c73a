"""Virtual machines and their user data."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional
import base64

from vultr_api.mappers.json_mapper import JsonObjectReader
from vultr_api.utils.utils import parse_timestamp


@dataclass(frozen=True)
class Server:
    """An active or pending virtual machine (a subscription).

    Region, plan and OS are referenced by id only; resolve them with a
    fresh API call when needed.
    """
    id: int
    os: str
    ram: str
    disk: str
    main_ip: str
    vcpu_count: int
    location: str
    region_id: int
    date_created: str
    pending_charges: str
    status: str
    cost_per_month: str
    current_bandwidth_gb: float
    allowed_bandwidth_gb: str
    netmask_v4: str
    gateway_v4: str
    power_status: str
    server_state: str
    plan_id: int
    v6_main_ip: str
    label: str
    internal_ip: str
    kvm_url: str = field(repr=False)
    auto_backups: bool
    os_id: int
    app_id: int
    default_password: str = field(repr=False, default="")

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_timestamp(self.date_created)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Server":
        r = JsonObjectReader(data, "Server")
        return cls(
            id=r.get_int("SUBID"),
            os=r.get_str("os"),
            ram=r.get_str("ram"),
            disk=r.get_str("disk"),
            main_ip=r.get_str("main_ip"),
            vcpu_count=r.get_int("vcpu_count"),
            location=r.get_str("location"),
            region_id=r.get_int("DCID"),
            date_created=r.get_str("date_created"),
            pending_charges=r.get_str("pending_charges"),
            status=r.get_str("status"),
            cost_per_month=r.get_str("cost_per_month"),
            current_bandwidth_gb=r.get_float("current_bandwidth_gb"),
            allowed_bandwidth_gb=r.get_str("allowed_bandwidth_gb"),
            netmask_v4=r.get_str("netmask_v4"),
            gateway_v4=r.get_str("gateway_v4"),
            power_status=r.get_str("power_status"),
            server_state=r.get_str("server_state"),
            plan_id=r.get_int("VPSPLANID"),
            v6_main_ip=r.get_str("v6_main_ip"),
            label=r.get_str("label"),
            internal_ip=r.get_str("internal_ip"),
            kvm_url=r.get_str("kvm_url"),
            auto_backups=r.get_bool("auto_backups"),
            os_id=r.get_int("OSID"),
            app_id=r.get_int("APPID"),
            default_password=r.opt_str("default_password") or "",
        )


@dataclass(frozen=True)
class UserData:
    """Base64 encoded cloud-init user data of a server."""
    userdata: str = field(repr=False)

    def decoded(self) -> str:
        """Decode the user data as UTF-8 text."""
        return base64.b64decode(self.userdata).decode("utf-8")

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "UserData":
        return cls(userdata=JsonObjectReader(data, "UserData").get_str("userdata"))
