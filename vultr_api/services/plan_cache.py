"""Plan cache: remembers plans already fetched during the client's lifetime."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict
import threading

from vultr_api.exceptions.custom_exceptions import ResourceNotFoundError
from vultr_api.models.plan import Plan
from vultr_api.utils.logger import get_logger

log = get_logger(__name__)


@dataclass
class PlanCache:
    """Memoizes plans by id.

    Entries never expire. On a miss the full plan list is fetched once and
    only the requested plan is stored. The lock is held across the fetch so
    concurrent callers never fetch the same id twice.
    """
    fetch_plans: Callable[[], Dict[int, Plan]]
    _plans: Dict[int, Plan] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def get_or_fetch(self, plan_id: int) -> Plan:
        """Return the cached plan, fetching it on first request."""
        with self._lock:
            cached = self._plans.get(plan_id)
            if cached is not None:
                log.debug("Plan cache hit: %s", plan_id)
                return cached

            log.debug("Plan cache miss: %s; fetching plan list.", plan_id)
            plan = self.fetch_plans().get(plan_id)
            if plan is None:
                raise ResourceNotFoundError(f"Plan {plan_id} not found in plan list.")
            self._plans[plan_id] = plan
            return plan

    def __contains__(self, plan_id: object) -> bool:
        with self._lock:
            return plan_id in self._plans

    def __len__(self) -> int:
        with self._lock:
            return len(self._plans)
