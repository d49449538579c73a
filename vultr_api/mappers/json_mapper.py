"""Inbound mapping: response bodies to entities."""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar
import json

from vultr_api.exceptions.custom_exceptions import DataValidationError
from vultr_api.utils.logger import get_logger

log = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")

_TRUE_STRINGS = {"yes", "true", "1"}
_FALSE_STRINGS = {"no", "false", "0"}


def to_int(value: Any) -> int:
    """Coerce a JSON scalar to int; raises ValueError when it is not one."""
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if value is None or isinstance(value, (dict, list)):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(str(value).strip())


class JsonObjectReader:
    """Typed access to the fields of one JSON object.

    Required getters raise DataValidationError when the key is absent, null,
    or cannot be coerced; nothing is silently defaulted.
    """

    def __init__(self, data: Mapping[str, Any], entity: str) -> None:
        self._data = data
        self._entity = entity

    def _fail(self, key: str, problem: str) -> DataValidationError:
        return DataValidationError(f"{self._entity}: {problem} for key '{key}'")

    def _require(self, key: str) -> Any:
        if key not in self._data:
            raise self._fail(key, "missing required value")
        return self._data[key]

    def get_str(self, key: str) -> str:
        return self._coerce_str(key, self._require(key))

    def get_int(self, key: str) -> int:
        return self._coerce_int(key, self._require(key))

    def get_float(self, key: str) -> float:
        value = self._require(key)
        if isinstance(value, bool):
            raise self._fail(key, "expected a number")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise self._fail(key, f"expected a number, got {value!r}") from None

    def get_bool(self, key: str) -> bool:
        return self._coerce_bool(key, self._require(key))

    def get_int_tuple(self, key: str) -> Tuple[int, ...]:
        value = self._require(key)
        if not isinstance(value, list):
            raise self._fail(key, f"expected an array, got {type(value).__name__}")
        return tuple(self._coerce_int(key, v) for v in value)

    def opt_str(self, key: str) -> Optional[str]:
        value = self._data.get(key)
        if value is None:
            return None
        return self._coerce_str(key, value)

    def opt_bool(self, key: str) -> Optional[bool]:
        value = self._data.get(key)
        if value is None:
            return None
        return self._coerce_bool(key, value)

    def _coerce_str(self, key: str, value: Any) -> str:
        if value is None or isinstance(value, (dict, list)):
            raise self._fail(key, f"expected a string, got {_json_type(value)}")
        if isinstance(value, bool):
            return "true" if value else "false"
        return value if isinstance(value, str) else str(value)

    def _coerce_int(self, key: str, value: Any) -> int:
        try:
            return to_int(value)
        except ValueError:
            raise self._fail(key, f"expected an integer, got {value!r}") from None

    def _coerce_bool(self, key: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise self._fail(key, f"expected a boolean, got {value!r}")


def _json_type(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def parse_json(body: str) -> Any:
    """Decode a response body, raising DataValidationError on invalid JSON."""
    try:
        return json.loads(body)
    except ValueError as e:
        raise DataValidationError(f"Response is not valid JSON: {body[:200]!r}") from e


def parse_object(body: str, factory: Callable[[Mapping[str, Any]], T]) -> T:
    """Parse a body that must be a single JSON object."""
    data = parse_json(body)
    if not isinstance(data, dict):
        raise DataValidationError(f"Expected a JSON object, got {type(data).__name__}")
    return factory(data)


def parse_list(body: str, factory: Callable[[Mapping[str, Any]], T]) -> List[T]:
    """Parse a JSON array body; elements that are not objects are dropped."""
    data = parse_json(body)
    if not isinstance(data, list):
        raise DataValidationError(f"Expected a JSON array, got {type(data).__name__}")
    out: List[T] = []
    for element in data:
        if not isinstance(element, dict):
            log.debug("Skipping non-object array element: %r", element)
            continue
        out.append(factory(element))
    return out


def parse_id_list(body: str) -> List[int]:
    """Parse a JSON array of numeric identifiers."""
    data = parse_json(body)
    if not isinstance(data, list):
        raise DataValidationError(f"Expected a JSON array of ids, got {type(data).__name__}")
    try:
        return [to_int(v) for v in data]
    except ValueError as e:
        raise DataValidationError(f"Invalid id in list: {e}") from None


def parse_mapping(
    body: str,
    factory: Callable[[Mapping[str, Any]], T],
    key: Callable[[str], K],
) -> Dict[K, T]:
    """Parse a JSON object keyed by identifier into {id: entity}.

    Values that are not objects are skipped. The API answers an empty
    collection with `[]`, which maps to an empty dict.
    """
    data = parse_json(body)
    if isinstance(data, list) and not data:
        return {}
    if not isinstance(data, dict):
        raise DataValidationError(f"Expected a JSON object keyed by id, got {type(data).__name__}")
    out: Dict[K, T] = {}
    for raw_key, value in data.items():
        if not isinstance(value, dict):
            log.debug("Skipping non-object value for key %r", raw_key)
            continue
        try:
            ident = key(raw_key)
        except ValueError:
            raise DataValidationError(f"Invalid identifier in response: {raw_key!r}") from None
        out[ident] = factory(value)
    return out
