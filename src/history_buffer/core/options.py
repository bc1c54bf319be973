"""Configuration record for history buffers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


class _Unset:
    """Marker for an option the caller did not supply."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class InvalidConfigurationError(ValueError):
    """Raised when options are missing or lack ``max_size``."""

    def __init__(self, message: str, *, options: object | None = None) -> None:
        super().__init__(message)
        self.options = options


def accept_all(entry: object) -> bool:
    del entry
    return True


@dataclass(frozen=True, slots=True)
class HistoryOptions(Generic[T]):
    """Settings applied by ``History`` on creation and ``reconfigure``.

    ``None`` for ``max_size`` or ``validate`` and ``UNSET`` for
    ``default_value`` mean "not supplied"; ``merged_into`` keeps the previous
    value for those fields.
    """

    max_size: Optional[int] = None
    default_value: Any = UNSET
    validate: Optional[Callable[[T], bool]] = None

    @classmethod
    def coerce(cls, value: object) -> "HistoryOptions[Any]":
        if value is None:
            raise InvalidConfigurationError("Options must specify max_size.")
        if isinstance(value, HistoryOptions):
            return value
        if isinstance(value, Mapping):
            known = {item.name for item in fields(cls)}
            unknown = sorted(str(key) for key in value if key not in known)
            if unknown:
                raise InvalidConfigurationError(
                    f"Unknown history options: {', '.join(unknown)}", options=value
                )
            return cls(**dict(value))
        raise InvalidConfigurationError(
            f"Expected HistoryOptions or a mapping, got {type(value).__name__}",
            options=value,
        )

    def require(self) -> "HistoryOptions[T]":
        if self.max_size is None:
            raise InvalidConfigurationError(
                "Options must specify max_size.", options=self
            )
        return self

    def merged_into(self, previous: "HistoryOptions[T]") -> "HistoryOptions[T]":
        """Return ``previous`` with every supplied field of ``self`` applied."""

        return HistoryOptions(
            max_size=self.max_size if self.max_size is not None else previous.max_size,
            default_value=(
                previous.default_value
                if self.default_value is UNSET
                else self.default_value
            ),
            validate=self.validate if self.validate is not None else previous.validate,
        )


__all__ = [
    "UNSET",
    "HistoryOptions",
    "InvalidConfigurationError",
    "accept_all",
]
