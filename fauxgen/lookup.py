"""Registry of named generator functions and typed access to their parameters."""

from __future__ import annotations

import copy
import math
import random
import re
import struct
import threading
from dataclasses import dataclass
from dataclasses import field as dc_field
from typing import Any, Callable, Optional

Generator = Callable[[random.Random, Optional["MapParams"], "Info"], Any]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class FuncLookupError(ValueError):
    """Raised when a lookup parameter is missing or cannot be parsed."""


@dataclass
class Param:
    """Description of one parameter a lookup function accepts."""

    field: str
    display: str = ""
    type: str = ""
    optional: bool = False
    default: str = ""
    options: list[str] = dc_field(default_factory=list)
    description: str = ""


class MapParams(dict):
    """Parameter values keyed by field name; each field may hold several values."""

    def add(self, field: str, value: str) -> None:
        """Append a value to the field, creating the field if needed."""
        self.setdefault(field, []).append(value)

    def size(self) -> int:
        """Number of distinct fields held."""
        return len(self)


@dataclass
class Field:
    """A named output column and the lookup function that fills it."""

    name: str
    function: str
    params: MapParams = dc_field(default_factory=MapParams)

    def __post_init__(self) -> None:
        if not isinstance(self.params, MapParams):
            self.params = MapParams(
                {key: list(values) for key, values in (self.params or {}).items()}
            )


def _parse_int(text: str, low: int, high: int, pattern: re.Pattern) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not low <= value <= high:
        raise ValueError(text)
    return value


def _parse_float(text: str, bits: int) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(text)
    body = text.lower().lstrip("+-")
    try:
        if body.startswith("0x"):
            if "p" not in body:
                raise ValueError(text)
            value = float.fromhex(text)
        else:
            value = float(text)
        if math.isinf(value) and not body.startswith("inf"):
            raise ValueError(text)
        if bits == 32 and math.isfinite(value):
            value = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(text) from exc
    return value


@dataclass
class Info:
    """Metadata about a lookup function together with the function itself."""

    display: str = ""
    category: str = ""
    description: str = ""
    example: str = ""
    output: str = ""
    params: list[Param] = dc_field(default_factory=list)
    generate: Optional[Generator] = None
    data: dict[str, str] = dc_field(default_factory=dict)

    def get_field(
        self, params: Optional[MapParams], field: str
    ) -> tuple[Param, list[str]]:
        """Return the parameter definition and its values, falling back to the default."""
        param = next((p for p in self.params if p.field == field), None)
        if param is None:
            raise FuncLookupError(f"could not find param field {field}")
        if params is not None and field in params:
            return param, params[field]
        if param.default != "":
            return param, [param.default]
        raise FuncLookupError(f"could not find field: {field}")

    def _first(self, params: Optional[MapParams], field: str) -> tuple[Param, str]:
        param, values = self.get_field(params, field)
        if not values:
            raise FuncLookupError(f"{param.field} field has no value")
        return param, values[0]

    def get_bool(self, params: Optional[MapParams], field: str) -> bool:
        param, value = self._first(params, field)
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        raise FuncLookupError(f"{param.field} field could not parse to bool value")

    def get_int(self, params: Optional[MapParams], field: str) -> int:
        param, value = self._first(params, field)
        try:
            return _parse_int(value, _INT64_MIN, _INT64_MAX, _INT_RE)
        except ValueError:
            raise FuncLookupError(
                f"{param.field} field could not parse to int value"
            ) from None

    def get_uint(self, params: Optional[MapParams], field: str) -> int:
        param, value = self._first(params, field)
        try:
            return _parse_int(value, 0, _UINT64_MAX, _UINT_RE)
        except ValueError:
            raise FuncLookupError(
                f"{param.field} field could not parse to int value"
            ) from None

    def get_float32(self, params: Optional[MapParams], field: str) -> float:
        param, value = self._first(params, field)
        try:
            return _parse_float(value, 32)
        except ValueError:
            raise FuncLookupError(
                f"{param.field} field could not parse to float value"
            ) from None

    def get_float64(self, params: Optional[MapParams], field: str) -> float:
        param, value = self._first(params, field)
        try:
            return _parse_float(value, 64)
        except ValueError:
            raise FuncLookupError(
                f"{param.field} field could not parse to float value"
            ) from None

    def get_string(self, params: Optional[MapParams], field: str) -> str:
        return self._first(params, field)[1]

    def get_string_array(self, params: Optional[MapParams], field: str) -> list[str]:
        return list(self.get_field(params, field)[1])

    def get_int_array(self, params: Optional[MapParams], field: str) -> list[int]:
        _, values = self.get_field(params, field)
        result = []
        for value in values:
            try:
                result.append(_parse_int(value, _INT64_MIN, _INT64_MAX, _INT_RE))
            except ValueError:
                raise FuncLookupError(f"{value} value could not parse to int") from None
        return result

    def get_float32_array(
        self, params: Optional[MapParams], field: str
    ) -> list[float]:
        _, values = self.get_field(params, field)
        result = []
        for value in values:
            try:
                result.append(_parse_float(value, 32))
            except ValueError:
                raise FuncLookupError(
                    f"{value} value could not parse to float"
                ) from None
        return result


_FUNC_LOOKUPS: dict[str, Info] = {}
_LOCK = threading.Lock()


def add_func_lookup(name: str, info: Info) -> None:
    """Register (or replace) a lookup function under the given name."""
    with _LOCK:
        _FUNC_LOOKUPS[name] = copy.copy(info)


def get_func_lookup(name: str) -> Optional[Info]:
    """Return a copy of the registered info, or None if the name is unknown."""
    with _LOCK:
        info = _FUNC_LOOKUPS.get(name)
    return None if info is None else copy.copy(info)


def remove_func_lookup(name: str) -> None:
    """Remove a registered lookup; unknown names are ignored."""
    with _LOCK:
        _FUNC_LOOKUPS.pop(name, None)


def func_lookups() -> dict[str, Info]:
    """Snapshot of every registered lookup."""
    with _LOCK:
        return {name: copy.copy(info) for name, info in _FUNC_LOOKUPS.items()}