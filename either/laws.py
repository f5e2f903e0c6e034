"""Executable Either laws.

Each law is a predicate over a :class:`Sample`: a pair of payloads plus
functions compatible with them. ``check_laws`` runs every law over every
sample and collects a :class:`Diagnostic` for each law that does not hold.

- No print statements; all diagnostics go through the report and logging.
- A law that raises is an ERROR (captured with ``try_catch``), a law that
  returns False is a FAILURE.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, assert_never

from .either import Either, Left, Right, left, of, right, try_catch
from .option import none, some

logger = logging.getLogger(__name__)


class LawFamily(Enum):
    FUNCTOR = "functor"
    MONAD = "monad"
    APPLICATIVE = "applicative"
    ELIMINATION = "elimination"
    CAPTURE = "capture"


class Severity(Enum):
    FAILURE = "failure"
    ERROR = "error"


def identity[T](x: T) -> T:
    return x


def _never_called(x: Any) -> Any:
    raise AssertionError(f"function applied to {x!r} on a short-circuit path")


@dataclass(frozen=True)
class Sample:
    """Payloads and functions one law run is evaluated with.

    ``f`` and ``g`` are pure functions on the Right payload (``g`` must
    also accept the output of ``f``). ``k`` and ``h`` are Kleisli arrows
    returning an Either; ``h`` must accept the Right payloads ``k`` makes.
    ``on_left`` transforms the Left payload.
    """

    label: str
    left_value: Any
    right_value: Any
    f: Callable[[Any], Any]
    g: Callable[[Any], Any]
    k: Callable[[Any], Either[Any, Any]]
    h: Callable[[Any], Either[Any, Any]]
    on_left: Callable[[Any], Any]

    @property
    def eithers(self) -> tuple[Either[Any, Any], Either[Any, Any]]:
        return (left(self.left_value), right(self.right_value))


@dataclass(frozen=True)
class Law:
    name: str
    family: LawFamily
    description: str
    check: Callable[[Sample], bool]


@dataclass(frozen=True)
class Diagnostic:
    law: str
    family: LawFamily
    severity: Severity
    sample: str
    message: str


@dataclass(frozen=True)
class LawReport:
    laws: tuple[Law, ...]
    samples: tuple[Sample, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def failures(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.FAILURE)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def passed(self) -> bool:
        return len(self.diagnostics) == 0

    def diagnostics_for(self, law_name: str) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.law == law_name)


# ---------------------------------------------------------------------------
# Law bodies
# ---------------------------------------------------------------------------


def _functor_identity(s: Sample) -> bool:
    return (
        right(s.right_value).map(identity) == right(s.right_value)
        and left(s.left_value).map(s.f) == left(s.left_value)
    )


def _functor_composition(s: Sample) -> bool:
    e = right(s.right_value)
    return e.map(s.f).map(s.g) == e.map(lambda x: s.g(s.f(x)))


def _chain_left_identity(s: Sample) -> bool:
    return of(s.right_value).chain(s.k) == s.k(s.right_value)


def _chain_right_identity(s: Sample) -> bool:
    return all(e.chain(of) == e for e in s.eithers)


def _chain_associativity(s: Sample) -> bool:
    return all(
        e.chain(s.k).chain(s.h) == e.chain(lambda x: s.k(x).chain(s.h))
        for e in s.eithers
    )


def _short_circuit(s: Sample) -> bool:
    e = left(s.left_value)
    return e.map(_never_called) == e and e.chain(_never_called) == e


def _bimap_decomposition(s: Sample) -> bool:
    r = right(s.right_value)
    l = left(s.left_value)
    return (
        r.bimap(_never_called, s.g) == r.map(s.g)
        and l.bimap(s.on_left, _never_called) == left(s.on_left(s.left_value))
    )


def _elimination(s: Sample) -> bool:
    def tag_left(x: Any) -> tuple[str, Any]:
        return ("left", x)

    def tag_right(x: Any) -> tuple[str, Any]:
        return ("right", x)

    return right(s.right_value).either(tag_left, tag_right) == tag_right(
        s.right_value
    ) and left(s.left_value).either(tag_left, tag_right) == tag_left(s.left_value)


def _option_conversion(s: Sample) -> bool:
    return (
        right(s.right_value).to_option() == some(s.right_value)
        and left(s.left_value).to_option() == none()
    )


def _capture_success(s: Sample) -> bool:
    return try_catch(lambda: s.right_value) == right(s.right_value)


def _capture_failure(s: Sample) -> bool:
    err = RuntimeError(repr(s.left_value))

    def boom() -> Any:
        raise err

    match try_catch(boom):
        case Left(captured):
            return captured is err
        case Right():
            return False


def _ap_identity(s: Sample) -> bool:
    return of(identity).ap(right(s.right_value)) == right(s.right_value)


def _ap_homomorphism(s: Sample) -> bool:
    return of(s.f).ap(of(s.right_value)) == of(s.f(s.right_value))


def _ap_left_precedence(s: Sample) -> bool:
    first = left(s.left_value)
    second = left(("other", s.left_value))
    return first.ap(second) == first and of(s.f).ap(second) == second


ALL_LAWS: tuple[Law, ...] = (
    Law("functor_identity", LawFamily.FUNCTOR,
        "right(r).map(identity) == right(r); left(l).map(f) == left(l)",
        _functor_identity),
    Law("functor_composition", LawFamily.FUNCTOR,
        "e.map(f).map(g) == e.map(g . f)",
        _functor_composition),
    Law("chain_left_identity", LawFamily.MONAD,
        "of(r).chain(k) == k(r)",
        _chain_left_identity),
    Law("chain_right_identity", LawFamily.MONAD,
        "e.chain(of) == e",
        _chain_right_identity),
    Law("chain_associativity", LawFamily.MONAD,
        "e.chain(k).chain(h) == e.chain(x -> k(x).chain(h))",
        _chain_associativity),
    Law("short_circuit", LawFamily.MONAD,
        "left(l).map(f) == left(l); left(l).chain(f) == left(l), f never called",
        _short_circuit),
    Law("bimap_decomposition", LawFamily.FUNCTOR,
        "right: bimap(f, g) == map(g); left: only f applies",
        _bimap_decomposition),
    Law("elimination", LawFamily.ELIMINATION,
        "right(r).either(f, g) == g(r); left(l).either(f, g) == f(l)",
        _elimination),
    Law("option_conversion", LawFamily.ELIMINATION,
        "right(r).to_option() == some(r); left(l).to_option() == none()",
        _option_conversion),
    Law("capture_success", LawFamily.CAPTURE,
        "try_catch(() -> v) == right(v)",
        _capture_success),
    Law("capture_failure", LawFamily.CAPTURE,
        "try_catch(() -> raise err) == left(err), same object",
        _capture_failure),
    Law("ap_identity", LawFamily.APPLICATIVE,
        "of(identity).ap(right(r)) == right(r)",
        _ap_identity),
    Law("ap_homomorphism", LawFamily.APPLICATIVE,
        "of(f).ap(of(x)) == of(f(x))",
        _ap_homomorphism),
    Law("ap_left_precedence", LawFamily.APPLICATIVE,
        "left(a).ap(left(b)) == left(a); right(f).ap(left(b)) == left(b)",
        _ap_left_precedence),
)


def _positive(x: int) -> Either[str, int]:
    return right(x) if x > 0 else left("neg")


def _halve(x: int) -> Either[str, int]:
    return right(x // 2) if x % 2 == 0 else left("odd")


def _non_empty(s: str) -> Either[str, str]:
    return right(s) if s else left("empty")


def _first_char(s: str) -> Either[str, str]:
    return right(s[0]) if s else left("empty")


DEFAULT_SAMPLES: tuple[Sample, ...] = (
    Sample("int", "err", 5,
           f=lambda x: x + 1, g=lambda x: x * 2,
           k=_positive, h=_halve, on_left=str.upper),
    Sample("int-zero", None, 0,
           f=lambda x: x - 3, g=abs,
           k=_positive, h=_halve, on_left=lambda x: (x,)),
    Sample("str", 404, "abc",
           f=str.upper, g=len,
           k=_non_empty, h=_first_char, on_left=lambda x: x + 1),
    Sample("str-empty", ValueError("bad"), "",
           f=lambda s: s + "!", g=lambda s: s * 2,
           k=_non_empty, h=_first_char, on_left=type),
    Sample("tuple", ("a", 1), (1, 2),
           f=lambda t: t[::-1], g=sum,
           k=lambda t: right(list(t)), h=lambda xs: right(len(xs)),
           on_left=lambda t: t[0]),
)


def select_laws(families: Sequence[LawFamily]) -> tuple[Law, ...]:
    wanted = set(families)
    return tuple(law for law in ALL_LAWS if law.family in wanted)


def check_laws(
    samples: Sequence[Sample] = DEFAULT_SAMPLES,
    laws: Sequence[Law] = ALL_LAWS,
) -> LawReport:
    diagnostics: list[Diagnostic] = []

    for law in laws:
        for sample in samples:
            outcome = try_catch(lambda: law.check(sample))
            match outcome:
                case Right(True):
                    continue
                case Right(_):
                    diag = Diagnostic(
                        law.name, law.family, Severity.FAILURE, sample.label,
                        f"{law.description} does not hold",
                    )
                case Left(exc):
                    diag = Diagnostic(
                        law.name, law.family, Severity.ERROR, sample.label,
                        f"{type(exc).__name__}: {exc}",
                    )
                case unreachable:
                    assert_never(unreachable)
            logger.warning(
                "Law %r %s on sample %r: %s",
                law.name, diag.severity.value, sample.label, diag.message,
            )
            diagnostics.append(diag)

    logger.debug(
        "Checked %d laws over %d samples: %d diagnostics",
        len(laws), len(samples), len(diagnostics),
    )
    return LawReport(tuple(laws), tuple(samples), tuple(diagnostics))
