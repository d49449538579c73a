from __future__ import annotations

import threading

import pytest

from conftest import PLAN_LIST
from vultr_api.exceptions.custom_exceptions import ResourceNotFoundError
from vultr_api.models.plan import Plan
from vultr_api.services.plan_cache import PlanCache


class CountingFetcher:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return {int(k): Plan.from_json(v) for k, v in PLAN_LIST.items()}


def test_same_id_fetches_once():
    fetcher = CountingFetcher()
    cache = PlanCache(fetch_plans=fetcher)

    first = cache.get_or_fetch(201)
    second = cache.get_or_fetch(201)

    assert fetcher.calls == 1
    assert first is second
    assert 201 in cache
    assert len(cache) == 1


def test_different_ids_fetch_separately():
    fetcher = CountingFetcher()
    cache = PlanCache(fetch_plans=fetcher)

    cache.get_or_fetch(201)
    cache.get_or_fetch(202)

    assert fetcher.calls == 2
    assert len(cache) == 2


def test_unknown_plan_raises_and_is_not_cached():
    fetcher = CountingFetcher()
    cache = PlanCache(fetch_plans=fetcher)

    with pytest.raises(ResourceNotFoundError):
        cache.get_or_fetch(999)

    assert 999 not in cache


def test_concurrent_lookups_fetch_once():
    fetcher = CountingFetcher()
    cache = PlanCache(fetch_plans=fetcher)
    results = []

    def lookup():
        results.append(cache.get_or_fetch(202))

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert fetcher.calls == 1
    assert len(results) == 8
    assert all(r.id == 202 for r in results)


def test_cached_plan_cannot_be_mutated():
    cache = PlanCache(fetch_plans=CountingFetcher())
    plan = cache.get_or_fetch(201)

    with pytest.raises(AttributeError):
        plan.available_locations.append(999)

    assert cache.get_or_fetch(201).available_locations == (1, 2, 3)
