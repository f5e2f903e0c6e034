"""The Either sum type.

An ``Either[L, R]`` is exactly one of:
  - ``Left(value)``  — by convention the failure / "other" outcome
  - ``Right(value)`` — by convention the success outcome

Both variants are frozen dataclasses, so an Either is a plain value:
structural equality, hashable when the payload is, usable in ``match``.
The union is closed; ``Left`` and ``Right`` are final and every operation
is a single match over the two cases.

Example:
    right(5).map(lambda x: x + 1)                 == Right(6)
    left("err").map(lambda x: x + 1)              == Left("err")
    right(5).chain(lambda x: right(x) if x > 0 else left("neg")) == Right(5)
    left("boom").either(lambda e: 0, lambda v: v) == 0
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, assert_never, cast, final

from .option import DEFAULT_FACTORY, Nothing, Option, OptionFactory, Some

logger = logging.getLogger(__name__)


class _EitherOps[L, R]:
    """Operations shared by both variants.

    Not a variant itself; only ``Left`` and ``Right`` derive from it.
    """

    def _narrow(self) -> Either[L, R]:
        return cast("Either[L, R]", self)

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    # -- functor / monad ----------------------------------------------------

    def chain[R2](self, f: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        """Monadic bind: feed the Right payload to ``f``.

        The result of ``f`` is returned as-is, never re-wrapped, so a
        ``Left`` produced by ``f`` propagates directly. A ``Left`` receiver
        short-circuits without calling ``f``.
        """
        match self._narrow():
            case Left(value):
                return Left(value)
            case Right(value):
                return f(value)
            case unreachable:
                assert_never(unreachable)

    def map[R2](self, f: Callable[[R], R2]) -> Either[L, R2]:
        """Transform the Right payload; a Left passes through unchanged."""
        return self.chain(lambda x: right(f(x)))

    def bimap[L2, R2](
        self, f: Callable[[L], L2], g: Callable[[R], R2]
    ) -> Either[L2, R2]:
        """Apply ``f`` to a Left payload or ``g`` to a Right one, never both."""
        match self._narrow():
            case Left(value):
                return Left(f(value))
            case Right(value):
                return Right(g(value))
            case unreachable:
                assert_never(unreachable)

    def map_left[L2](self, f: Callable[[L], L2]) -> Either[L2, R]:
        match self._narrow():
            case Left(value):
                return Left(f(value))
            case Right(value):
                return Right(value)
            case unreachable:
                assert_never(unreachable)

    # -- applicative --------------------------------------------------------

    def ap[A, B](
        self: _EitherOps[L, Callable[[A], B]], that: Either[L, A]
    ) -> Either[L, B]:
        """Apply the function held by ``self`` to the value held by ``that``.

        ``self`` is inspected first: when both sides are Left, self's Left
        is the one returned.
        """
        match self._narrow():
            case Left(value):
                return Left(value)
            case Right(fn):
                return that.map(fn)
            case unreachable:
                assert_never(unreachable)

    # -- elimination --------------------------------------------------------

    def either[T](self, f: Callable[[L], T], g: Callable[[R], T]) -> T:
        """Collapse into a plain value: ``f`` handles Left, ``g`` handles Right."""
        match self._narrow():
            case Left(value):
                return f(value)
            case Right(value):
                return g(value)
            case unreachable:
                assert_never(unreachable)

    def get_or_else(self, default: R) -> R:
        return self.either(lambda _: default, lambda value: value)

    def or_else(self, other: Either[L, R]) -> Either[L, R]:
        match self._narrow():
            case Left():
                return other
            case Right(value):
                return Right(value)
            case unreachable:
                assert_never(unreachable)

    def swap(self) -> Either[R, L]:
        match self._narrow():
            case Left(value):
                return Right(value)
            case Right(value):
                return Left(value)
            case unreachable:
                assert_never(unreachable)

    # -- conversion ---------------------------------------------------------

    def to_option(self, factory: OptionFactory = DEFAULT_FACTORY) -> Any:
        """Convert to an Option: Right(r) -> some(r), Left(_) -> none().

        The Left payload is dropped. Callers that need the failure must
        eliminate with ``either`` instead.
        """
        match self._narrow():
            case Left():
                return factory.none()
            case Right(value):
                return factory.some(value)
            case unreachable:
                assert_never(unreachable)


@final
@dataclass(frozen=True)
class Left[L, R](_EitherOps[L, R]):
    """The failure / "other" variant."""

    value: L


@final
@dataclass(frozen=True)
class Right[L, R](_EitherOps[L, R]):
    """The success variant."""

    value: R


# Closed union of both variants
type Either[L, R] = Left[L, R] | Right[L, R]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def left[L, R](value: L) -> Either[L, R]:
    return Left(value)


def right[L, R](value: R) -> Either[L, R]:
    return Right(value)


def of[L, R](value: R) -> Either[L, R]:
    """Applicative pure: lift a plain value into the success channel."""
    return right(value)


def try_catch[R](
    f: Callable[[], R],
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Either[Exception, R]:
    """Run ``f`` and capture a raised exception as ``Left(exc)``.

    Only instances of ``exceptions`` are captured (``Exception`` by
    default), so ``KeyboardInterrupt``, ``SystemExit`` and anything outside
    the given tuple still propagate. The captured object is the exception
    itself, not a copy or a message.
    """
    try:
        value = f()
    except exceptions as exc:
        logger.debug("try_catch captured %s: %s", type(exc).__name__, exc)
        return Left(exc)
    return of(value)


def from_option[L, R](opt: Option[R], if_none: L) -> Either[L, R]:
    match opt:
        case Some(value):
            return Right(value)
        case Nothing():
            return Left(if_none)
        case unreachable:
            assert_never(unreachable)


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def sequence[L, R](eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Collect Right payloads in order, or return the first Left.

    Iteration stops at the first Left, so a lazy iterable is only consumed
    up to that point.
    """
    values: list[R] = []
    for e in eithers:
        match e:
            case Left(value):
                return Left(value)
            case Right(value):
                values.append(value)
            case unreachable:
                assert_never(unreachable)
    return Right(values)


def traverse[A, L, R](
    items: Iterable[A], f: Callable[[A], Either[L, R]]
) -> Either[L, list[R]]:
    """``sequence`` of ``f`` over ``items``; ``f`` is not called past the first Left."""
    return sequence(f(item) for item in items)
