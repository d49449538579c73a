"""Client for the Vultr v1 API."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from vultr_api.clients.http_client import HttpClient
from vultr_api.exceptions.custom_exceptions import ResourceNotFoundError
from vultr_api.mappers.json_mapper import (
    JsonObjectReader,
    parse_id_list,
    parse_list,
    parse_mapping,
    parse_object,
)
from vultr_api.mappers.params import ServerCreateOptions, build_params
from vultr_api.models.account import AccountInfo
from vultr_api.models.dns import Dns, DnsRecord, DnsRecordType
from vultr_api.models.iso import Iso
from vultr_api.models.operating_system import Application, OperatingSystem
from vultr_api.models.plan import Plan
from vultr_api.models.region import Region
from vultr_api.models.script import Script, ScriptType
from vultr_api.models.server import Server, UserData
from vultr_api.models.snapshot import Snapshot
from vultr_api.services.plan_cache import PlanCache
from vultr_api.utils import constants as ep
from vultr_api.utils.logger import get_logger
from vultr_api.utils.utils import now_timestamp

log = get_logger(__name__)

ServerRef = Union[int, Server]
PlanRef = Union[int, Plan]
RegionRef = Union[int, Region]
OsRef = Union[int, OperatingSystem]
ScriptRef = Union[int, Script]
SnapshotRef = Union[str, Snapshot]
DomainRef = Union[str, Dns]
RecordRef = Union[int, DnsRecord]


def _id(ref):
    """Accept either an entity or its identifier."""
    return getattr(ref, "id", ref)


def _domain(ref: DomainRef) -> str:
    return getattr(ref, "domain", ref)


def _read_new_id(body: str, key: str, entity: str, as_int: bool = True):
    """Read the identifier a create call returns."""
    def read(data):
        r = JsonObjectReader(data, entity)
        return r.get_int(key) if as_int else r.get_str(key)
    return parse_object(body, read)


@dataclass
class VultrClient:
    """One method per API operation; each issues a single call unless noted.

    Create operations whose response only carries the new id re-fetch the
    matching list once and return the created entity.
    """
    http: HttpClient
    api_key: str = field(repr=False)
    plan_cache: PlanCache = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.plan_cache = PlanCache(fetch_plans=self.get_plans)

    def _get(self, endpoint: str, **query) -> str:
        return self.http.get(endpoint, self.api_key, query or None)

    def _post(self, endpoint: str, params: Dict) -> str:
        return self.http.post(endpoint, self.api_key, build_params(params))

    # Account

    def get_account_info(self) -> AccountInfo:
        """Balance and payment details for the current account."""
        return parse_object(self._get(ep.ACCOUNT_INFO), AccountInfo.from_json)

    # Catalogues

    def get_regions(self) -> Dict[int, Region]:
        return parse_mapping(self._get(ep.REGIONS_LIST), Region.from_json, int)

    def get_plans(self) -> Dict[int, Plan]:
        """All active plans, keyed by plan id."""
        return parse_mapping(self._get(ep.PLANS_LIST), Plan.from_json, int)

    def get_cached_plan(self, plan_id: int) -> Plan:
        """Plan by id, fetched at most once per client."""
        return self.plan_cache.get_or_fetch(plan_id)

    def get_os_list(self) -> Dict[int, OperatingSystem]:
        return parse_mapping(self._get(ep.OS_LIST), OperatingSystem.from_json, int)

    def get_applications(self) -> Dict[int, Application]:
        return parse_mapping(self._get(ep.APP_LIST), Application.from_json, int)

    # Snapshots

    def get_snapshots(self) -> Dict[str, Snapshot]:
        """All snapshots on the account, keyed by snapshot id."""
        return parse_mapping(self._get(ep.SNAPSHOT_LIST), Snapshot.from_json, str)

    def create_snapshot(self, server: ServerRef, description: Optional[str] = None) -> Snapshot:
        """Snapshot a server and return the new snapshot as listed by the API."""
        body = self._post(ep.SNAPSHOT_CREATE, {"SUBID": _id(server), "description": description})
        snapshot_id = _read_new_id(body, "SNAPSHOTID", "SnapshotCreate", as_int=False)
        log.info("Created snapshot %s of server %s", snapshot_id, _id(server))
        snapshot = self.get_snapshots().get(snapshot_id)
        if snapshot is None:
            raise ResourceNotFoundError(f"Created snapshot {snapshot_id} is not in the snapshot list.")
        return snapshot

    def destroy_snapshot(self, snapshot: SnapshotRef) -> None:
        self._post(ep.SNAPSHOT_DESTROY, {"SNAPSHOTID": _id(snapshot)})

    # ISOs

    def get_isos(self) -> Dict[int, Iso]:
        return parse_mapping(self._get(ep.ISO_LIST), Iso.from_json, int)

    # Startup scripts

    def get_scripts(self) -> Dict[int, Script]:
        return parse_mapping(self._get(ep.SCRIPT_LIST), Script.from_json, int)

    def create_script(self, name: str, script: str, script_type: ScriptType = ScriptType.BOOT) -> Script:
        """Create a startup script.

        The API only returns the new id; dates are set to the local time of
        the call.
        """
        body = self._post(ep.SCRIPT_CREATE, {"name": name, "script": script, "type": script_type})
        script_id = _read_new_id(body, "SCRIPTID", "ScriptCreate")
        log.info("Created startup script %s (%s)", script_id, name)
        now = now_timestamp()
        return Script(
            id=script_id,
            date_created=now,
            date_modified=now,
            name=name,
            type=script_type,
            script=script,
        )

    def update_script(self, script: ScriptRef, name: Optional[str] = None, content: Optional[str] = None) -> None:
        """Rename a script and/or replace its content; None leaves a field unchanged."""
        self._post(ep.SCRIPT_UPDATE, {"SCRIPTID": _id(script), "name": name, "script": content})

    def destroy_script(self, script: ScriptRef) -> None:
        self._post(ep.SCRIPT_DESTROY, {"SCRIPTID": _id(script)})

    # Servers

    def get_servers(self) -> Dict[int, Server]:
        """All active or pending servers, keyed by subscription id."""
        return parse_mapping(self._get(ep.SERVER_LIST), Server.from_json, int)

    def create_server(
        self,
        region: RegionRef,
        plan: PlanRef,
        os: OsRef,
        options: Optional[ServerCreateOptions] = None,
    ) -> Server:
        """Deploy a new server.

        The API only answers with the new SUBID, so the server list is fetched
        once afterwards. ResourceNotFoundError is raised when the new server
        is not in that list yet; no retry is attempted.
        """
        params = {"DCID": _id(region), "VPSPLANID": _id(plan), "OSID": _id(os)}
        params.update((options or ServerCreateOptions()).to_params())
        body = self._post(ep.SERVER_CREATE, params)
        server_id = _read_new_id(body, "SUBID", "ServerCreate")
        log.info("Created server %s", server_id)

        server = self.get_servers().get(server_id)
        if server is None:
            raise ResourceNotFoundError(f"Created server {server_id} is not in the server list.")
        return server

    def destroy_server(self, server: ServerRef) -> None:
        self._post(ep.SERVER_DESTROY, {"SUBID": _id(server)})

    def get_os_change_list(self, server: ServerRef) -> Dict[str, OperatingSystem]:
        """Operating systems this server can be reinstalled with."""
        return parse_mapping(self._get(ep.SERVER_OS_CHANGE_LIST, SUBID=_id(server)), OperatingSystem.from_json, str)

    def get_upgrade_plan_list(self, server: ServerRef) -> List[Plan]:
        """Plans this server can be upgraded to, resolved through the plan cache."""
        plan_ids = parse_id_list(self._get(ep.SERVER_UPGRADE_PLAN_LIST, SUBID=_id(server)))
        return [self.get_cached_plan(plan_id) for plan_id in plan_ids]

    def get_user_data(self, server: ServerRef) -> UserData:
        return parse_object(self._get(ep.SERVER_GET_USER_DATA, SUBID=_id(server)), UserData.from_json)

    # DNS

    def get_dns_domains(self) -> List[Dns]:
        return parse_list(self._get(ep.DNS_LIST), Dns.from_json)

    def create_dns_domain(self, domain: str, server_ip: str) -> Dns:
        """Create a domain whose default records point at `server_ip`."""
        self._post(ep.DNS_CREATE_DOMAIN, {"domain": domain, "serverip": server_ip})
        log.info("Created DNS domain %s", domain)
        return Dns(domain=domain, date_created=now_timestamp())

    def delete_dns_domain(self, domain: DomainRef) -> None:
        self._post(ep.DNS_DELETE_DOMAIN, {"domain": _domain(domain)})

    def get_dns_records(self, domain: DomainRef) -> List[DnsRecord]:
        return parse_list(self._get(ep.DNS_RECORDS, domain=_domain(domain)), DnsRecord.from_json)

    def create_dns_record(
        self,
        domain: DomainRef,
        name: str,
        record_type: DnsRecordType,
        data: str,
        ttl: Optional[int] = None,
        priority: Optional[int] = None,
    ) -> None:
        """Add a record; `priority` only applies to MX and SRV records."""
        self._post(ep.DNS_CREATE_RECORD, {
            "domain": _domain(domain),
            "name": name,
            "type": record_type,
            "data": data,
            "ttl": ttl,
            "priority": priority,
        })

    def update_dns_record(
        self,
        domain: DomainRef,
        record: RecordRef,
        name: Optional[str] = None,
        data: Optional[str] = None,
        ttl: Optional[int] = None,
        priority: Optional[int] = None,
    ) -> None:
        self._post(ep.DNS_UPDATE_RECORD, {
            "domain": _domain(domain),
            "RECORDID": _id(record),
            "name": name,
            "data": data,
            "ttl": ttl,
            "priority": priority,
        })

    def delete_dns_record(self, domain: DomainRef, record: RecordRef) -> None:
        self._post(ep.DNS_DELETE_RECORD, {"domain": _domain(domain), "RECORDID": _id(record)})
