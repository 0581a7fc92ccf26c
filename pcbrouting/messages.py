"""Values exchanged with the user interface: results, settings and statistics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")
E = TypeVar("E")


def _single_entry(data: Any, allowed: tuple[str, ...]) -> tuple[str, Any]:
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError(f"expected a mapping with one of {allowed}: {data!r}")
    ((tag, body),) = data.items()
    if tag not in allowed:
        raise ValueError(f"unknown variant {tag!r}, expected one of {allowed}")
    return tag, body


@dataclass(frozen=True)
class MyResult(Generic[T, E]):
    """A success value or an error, serialised as {"Ok": ...} or {"Err": ...}."""

    is_ok: bool
    payload: Any = None

    @classmethod
    def ok(cls, value: T) -> MyResult[T, E]:
        return cls(True, value)

    @classmethod
    def err(cls, error: E) -> MyResult[T, E]:
        return cls(False, error)

    def to_dict(self) -> dict[str, Any]:
        return {"Ok" if self.is_ok else "Err": self.payload}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MyResult[Any, Any]:
        tag, body = _single_entry(data, ("Ok", "Err"))
        return cls(tag == "Ok", body)


class ValueKind(Enum):
    BOOL = "Bool"
    USIZE = "Usize"
    FLOAT = "Float"


def _checked_value(kind: ValueKind, value: Any) -> Any:
    if kind is ValueKind.BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"Bool value expected, got {value!r}")
        return value
    if kind is ValueKind.USIZE:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Usize value expected, got {value!r}")
        if value < 0:
            raise ValueError(f"Usize value must not be negative: {value}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Float value expected, got {value!r}")
    return float(value)


def _validate(instance: Any, kinds: tuple[ValueKind, ...]) -> None:
    if instance.kind not in kinds:
        raise ValueError(f"{type(instance).__name__} cannot hold a {instance.kind.value} value")
    object.__setattr__(instance, "value", _checked_value(instance.kind, instance.value))


def _parse_tagged(cls: Any, data: Mapping[str, Any], kinds: tuple[ValueKind, ...]) -> Any:
    tag, body = _single_entry(data, tuple(kind.value for kind in kinds))
    try:
        return cls(ValueKind(tag), body)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


_SETTINGS_KINDS = (ValueKind.BOOL, ValueKind.USIZE, ValueKind.FLOAT)
_STATS_KINDS = (ValueKind.FLOAT, ValueKind.USIZE)


@dataclass(frozen=True)
class SettingsValue:
    """A setting's value: a bool, a non-negative integer or a float."""

    kind: ValueKind
    value: Any

    def __post_init__(self) -> None:
        _validate(self, _SETTINGS_KINDS)

    def as_bool(self) -> bool | None:
        return self.value if self.kind is ValueKind.BOOL else None

    def as_usize(self) -> int | None:
        return self.value if self.kind is ValueKind.USIZE else None

    def as_float(self) -> float | None:
        return self.value if self.kind is ValueKind.FLOAT else None

    def to_dict(self) -> dict[str, Any]:
        return {self.kind.value: self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettingsValue:
        return _parse_tagged(cls, data, _SETTINGS_KINDS)


@dataclass(frozen=True)
class GetSettingsArg:
    setting: str


@dataclass(frozen=True)
class SetSettingsArg:
    setting: str
    value: SettingsValue


@dataclass(frozen=True)
class StatsArgs:
    stat: str


@dataclass(frozen=True)
class StatsValue:
    """A statistic: a float or a non-negative integer."""

    kind: ValueKind
    value: Any

    def __post_init__(self) -> None:
        _validate(self, _STATS_KINDS)

    def as_float(self) -> float | None:
        return self.value if self.kind is ValueKind.FLOAT else None

    def as_usize(self) -> int | None:
        return self.value if self.kind is ValueKind.USIZE else None

    def to_dict(self) -> dict[str, Any]:
        return {self.kind.value: self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatsValue:
        return _parse_tagged(cls, data, _STATS_KINDS)