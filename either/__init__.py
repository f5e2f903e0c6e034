"""either: an immutable Left | Right sum type and its operations."""

from .either import (
    Either,
    Left,
    Right,
    from_option,
    left,
    of,
    right,
    sequence,
    traverse,
    try_catch,
)
from .option import Nothing, Option, OptionFactory, Some, none, some

__all__ = [
    # Either
    "Either", "Left", "Right",
    # Constructors
    "left", "right", "of", "try_catch", "from_option",
    # Collections
    "sequence", "traverse",
    # Option
    "Option", "OptionFactory", "Some", "Nothing", "some", "none",
]
