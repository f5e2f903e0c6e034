"""Optional values: the target of ``Either.to_option``.

An Option is either ``Some(value)`` or ``Nothing()``. The Either core only
depends on the :class:`OptionFactory` protocol (``none()`` / ``some(v)``),
so any Option implementation exposing those two constructors can be
plugged into ``to_option``. This module is the default one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, final


@final
@dataclass(frozen=True)
class Some[T]:
    """A present value."""

    value: T

    @property
    def is_some(self) -> bool:
        return True

    @property
    def is_none(self) -> bool:
        return False

    def get_or_else(self, default: T) -> T:
        return self.value


@final
@dataclass(frozen=True)
class Nothing:
    """The absent value."""

    @property
    def is_some(self) -> bool:
        return False

    @property
    def is_none(self) -> bool:
        return True

    def get_or_else[T](self, default: T) -> T:
        return default


type Option[T] = Some[T] | Nothing


class OptionFactory(Protocol):
    """The two constructors ``to_option`` needs from an Option type."""

    def none(self) -> object: ...

    def some(self, value: object) -> object: ...


def some[T](value: T) -> Option[T]:
    return Some(value)


def none() -> Option[object]:
    return Nothing()


@dataclass(frozen=True)
class _ModuleFactory:
    def none(self) -> Option[object]:
        return none()

    def some(self, value: object) -> Option[object]:
        return some(value)


DEFAULT_FACTORY: OptionFactory = _ModuleFactory()
