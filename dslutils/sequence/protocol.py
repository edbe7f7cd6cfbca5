"""
dslutils Sequence Protocols - List Cell Interface Definitions
=============================================================

Protocol-based interfaces for hook-bearing lists.

``DslMutableList`` is what list hooks receive as their first argument and what
``try_bypass_hooks`` looks for when it is handed an arbitrary sequence. A plain
``list`` has no ``bypass_hooks`` and therefore does not match.
"""

from typing import (
    Any,
    Callable,
    Iterator,
    MutableSequence,
    Protocol,
    runtime_checkable,
)

from ..common_types import R, T


@runtime_checkable
class DslReplaceableList(Protocol[T]):
    """Protocol for mutable sequences whose whole content can be swapped."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: Any) -> Any: ...

    def __setitem__(self, index: Any, element: Any) -> None: ...

    def __delitem__(self, index: Any) -> None: ...

    def __iter__(self) -> Iterator[T]: ...

    def insert(self, index: int, element: T) -> None: ...

    def replace(self, new_list: MutableSequence[T]) -> None: ...


@runtime_checkable
class DslMutableList(DslReplaceableList[T], Protocol[T]):
    """
    Protocol for hook-bearing lists.

    ``bypass_hooks`` runs ``block`` against a view of the same storage that
    applies the element transforms but none of the hooks, and returns whatever
    the block returns.
    """

    def bypass_hooks(self, block: Callable[[MutableSequence[T]], R]) -> R: ...
