"""
dslutils AbstractDslMutableList - Transformed Mutable Sequence
==============================================================

``AbstractDslMutableList`` is a ``MutableSequence`` whose elements are stored in
one type and exposed in another. Subclasses decide how the two map onto each
other by implementing ``_get_transform`` and ``_set_transform``:

```python
class Celsius(AbstractDslMutableList[float, float]):
    # Stored in Kelvin, exposed in Celsius
    def _get_transform(self, original):
        return original - 273.15

    def _set_transform(self, original):
        return original + 273.15
```

The ``_original_*`` methods are the un-hooked primitives. ``ListProperty``
overrides the public methods to put hooks in front of them, and its bypass view
calls them directly.

Indexing follows Python conventions: negative indices count from the end, and
out-of-range indices raise ``IndexError`` before anything else happens. Reads
accept slices and return a plain ``list``.
"""

from abc import abstractmethod
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Sequence,
    Union,
    overload,
)

from ..common_types import I, O


class AbstractDslMutableList(MutableSequence[O], Generic[I, O]):
    """
    Mutable sequence storing ``I`` values and exposing them as ``O`` values.

    Args:
        initial: Initial internal elements. The list is copied.
    """

    def __init__(self, initial: Optional[Iterable[I]] = None) -> None:
        self._delegate: List[I] = list(initial) if initial is not None else []

    @abstractmethod
    def _get_transform(self, original: I) -> O:
        """Map a stored element to its external form."""

    @abstractmethod
    def _set_transform(self, original: O) -> I:
        """Map an external element to its stored form."""

    # ------------------------------------------------------------------
    # Index helpers
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        size = len(self._delegate)
        normalized = index + size if index < 0 else index
        if not 0 <= normalized < size:
            raise IndexError(f"Index {index} out of range for size {size}")
        return normalized

    def _check_position(self, index: int) -> int:
        size = len(self._delegate)
        normalized = index + size if index < 0 else index
        if not 0 <= normalized <= size:
            raise IndexError(f"Position {index} out of range for size {size}")
        return normalized

    # ------------------------------------------------------------------
    # Un-hooked primitives
    # ------------------------------------------------------------------

    def _original_get(self, index: int) -> O:
        return self._get_transform(self._delegate[index])

    def _original_set(self, index: int, element: O) -> O:
        old = self._original_get(index)
        self._delegate[index] = self._set_transform(element)
        return old

    def _original_insert(self, index: int, element: O) -> None:
        self._delegate.insert(index, self._set_transform(element))

    def _original_remove_at(self, index: int) -> O:
        old = self._original_get(index)
        del self._delegate[index]
        return old

    def _original_replace(self, new_list: Iterable[O]) -> None:
        self._delegate = [self._set_transform(element) for element in new_list]

    # ------------------------------------------------------------------
    # Element operations, overridden by ListProperty to add hooks
    # ------------------------------------------------------------------

    def get(self, index: int) -> O:
        return self._original_get(self._check_index(index))

    def set(self, index: int, element: O) -> O:
        """Replace the element at ``index`` and return the previous one."""
        return self._original_set(self._check_index(index), element)

    def add(self, index: int, element: O) -> None:
        """Insert ``element`` at ``index``; ``index == len(self)`` appends."""
        self._original_insert(self._check_position(index), element)

    def remove_at(self, index: int) -> O:
        """Remove the element at ``index`` and return it."""
        return self._original_remove_at(self._check_index(index))

    def replace(self, new_list: Iterable[O]) -> None:
        """Replace the whole content with ``new_list``."""
        self._original_replace(new_list)

    # ------------------------------------------------------------------
    # MutableSequence protocol
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> O: ...

    @overload
    def __getitem__(self, index: slice) -> List[O]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[O, List[O]]:
        if isinstance(index, slice):
            return [self.get(i) for i in range(*index.indices(len(self)))]
        return self.get(index)

    def __setitem__(self, index: Union[int, slice], element: Any) -> None:
        if isinstance(index, slice):
            positions = range(*index.indices(len(self)))
            elements = list(element)
            if len(elements) != len(positions):
                raise ValueError(
                    f"Slice assignment of {len(elements)} elements to "
                    f"{len(positions)} positions would change the list size"
                )
            for position, item in zip(positions, elements):
                self.set(position, item)
            return
        self.set(index, element)

    def __delitem__(self, index: Union[int, slice]) -> None:
        if isinstance(index, slice):
            for position in sorted(range(*index.indices(len(self))), reverse=True):
                self.remove_at(position)
            return
        self.remove_at(index)

    def insert(self, index: int, element: O) -> None:
        self.add(index, element)

    def __len__(self) -> int:
        return len(self._delegate)

    def __iter__(self) -> Iterator[O]:
        # Size is re-read every step, hooks may grow or shrink the list
        index = 0
        while index < len(self):
            yield self[index]
            index += 1

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[self._original_get(i) for i in range(len(self))]!r})"
