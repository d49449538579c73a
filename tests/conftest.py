from __future__ import annotations

import json
from typing import Any

import pytest

from vultr_api.clients.vultr_client import VultrClient


PLAN_LIST = {
    "201": {
        "VPSPLANID": "201",
        "name": "1024 MB RAM,25 GB SSD,1.00 TB BW",
        "vcpu_count": "1",
        "ram": "1024",
        "disk": "25",
        "bandwidth": "1.00",
        "price_per_month": "5.00",
        "windows": False,
        "plan_type": "SSD",
        "available_locations": [1, 2, 3],
    },
    "202": {
        "VPSPLANID": "202",
        "name": "2048 MB RAM,55 GB SSD,2.00 TB BW",
        "vcpu_count": "1",
        "ram": "2048",
        "disk": "55",
        "bandwidth": "2.00",
        "price_per_month": "10.00",
        "windows": False,
        "plan_type": "SSD",
        "available_locations": [1],
    },
}

SERVER = {
    "SUBID": "576965",
    "os": "CentOS 6 x64",
    "ram": "4096 MB",
    "disk": "Virtual 60 GB",
    "main_ip": "123.123.123.123",
    "vcpu_count": "2",
    "location": "New Jersey",
    "DCID": "1",
    "default_password": "nreqnusibni",
    "date_created": "2013-12-19 14:45:41",
    "pending_charges": "46.67",
    "status": "active",
    "cost_per_month": "10.05",
    "current_bandwidth_gb": 131.512,
    "allowed_bandwidth_gb": "1000",
    "netmask_v4": "255.255.255.248",
    "gateway_v4": "123.123.123.1",
    "power_status": "running",
    "server_state": "ok",
    "VPSPLANID": "28",
    "v6_main_ip": "2001:DB8:1000::100",
    "label": "my new server",
    "internal_ip": "10.99.0.10",
    "kvm_url": "https://my.vultr.com/subs/novnc/api.php?data=eawxFVZw2mXnhGUV",
    "auto_backups": "yes",
    "OSID": "127",
    "APPID": "0",
}


class FakeHttp:
    """Records gateway calls and answers from canned bodies keyed by endpoint."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, str, dict | None]] = []

    def _answer(self, endpoint: str) -> str:
        if endpoint not in self.responses:
            raise AssertionError(f"unexpected call to {endpoint}")
        body = self.responses[endpoint]
        return body if isinstance(body, str) else json.dumps(body)

    def get(self, endpoint: str, api_key: str, params=None) -> str:
        self.calls.append(("GET", endpoint, dict(params) if params else None))
        return self._answer(endpoint)

    def post(self, endpoint: str, api_key: str, params) -> str:
        self.calls.append(("POST", endpoint, dict(params)))
        return self._answer(endpoint)

    def count(self, method: str, endpoint: str) -> int:
        return sum(1 for m, e, _ in self.calls if m == method and e == endpoint)


@pytest.fixture
def fake_http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def client(fake_http: FakeHttp) -> VultrClient:
    return VultrClient(http=fake_http, api_key="test-key")
