from dataclasses import dataclass

from either import (
    Either,
    Nothing,
    Some,
    from_option,
    left,
    none,
    right,
    sequence,
    some,
    traverse,
)


def parse_int(s: str) -> Either[str, int]:
    return right(int(s)) if s.lstrip("-").isdigit() else left(f"not a number: {s}")


def test_map_left() -> None:
    assert left("err").map_left(len) == left(3)
    assert right(1).map_left(len) == right(1)


def test_swap() -> None:
    assert left("x").swap() == right("x")
    assert right(2).swap() == left(2)


def test_get_or_else() -> None:
    assert right(2).get_or_else(0) == 2
    assert left("err").get_or_else(0) == 0


def test_or_else() -> None:
    assert right(1).or_else(right(2)) == right(1)
    assert left("a").or_else(right(2)) == right(2)
    assert left("a").or_else(left("b")) == left("b")


def test_sequence_all_right() -> None:
    assert sequence([right(1), right(2), right(3)]) == right([1, 2, 3])


def test_sequence_empty() -> None:
    assert sequence([]) == right([])


def test_sequence_returns_first_left() -> None:
    assert sequence([right(1), left("a"), left("b")]) == left("a")


def test_sequence_stops_consuming_at_first_left() -> None:
    seen: list[int] = []

    def gen():
        for i, e in enumerate([right(1), left("stop"), right(3)]):
            seen.append(i)
            yield e

    assert sequence(gen()) == left("stop")
    assert seen == [0, 1]


def test_traverse() -> None:
    assert traverse(["1", "2", "-3"], parse_int) == right([1, 2, -3])
    assert traverse(["1", "x", "y"], parse_int) == left("not a number: x")


def test_traverse_does_not_call_past_first_left() -> None:
    calls: list[str] = []

    def tracked(s: str) -> Either[str, int]:
        calls.append(s)
        return parse_int(s)

    traverse(["1", "x", "2"], tracked)
    assert calls == ["1", "x"]


def test_from_option() -> None:
    assert from_option(some(3), "missing") == right(3)
    assert from_option(none(), "missing") == left("missing")


def test_to_option_default_factory() -> None:
    assert right(3).to_option() == Some(3)
    assert left("x").to_option() == Nothing()


def test_to_option_drops_left_payload() -> None:
    assert left("first").to_option() == left("second").to_option()


@dataclass(frozen=True)
class Maybe:
    present: bool
    value: object = None


class MaybeFactory:
    def none(self) -> Maybe:
        return Maybe(False)

    def some(self, value: object) -> Maybe:
        return Maybe(True, value)


def test_to_option_custom_factory() -> None:
    factory = MaybeFactory()
    assert right(3).to_option(factory) == Maybe(True, 3)
    assert left("x").to_option(factory) == Maybe(False)
