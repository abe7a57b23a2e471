"""
Paginator - splits an ordered result list into fixed-size pages.

Pages are views: each Page keeps a reference to the original sequence plus
[start, stop) bounds, so no result is copied. A page is only valid while
the underlying sequence is alive and unchanged.

    >>> pages = paginate(["a", "b", "c", "d", "e"], 2)
    >>> [list(page) for page in pages]
    [['a', 'b'], ['c', 'd'], ['e']]
"""

from collections.abc import Sequence
from typing import Iterator, Union

from .errors import InvalidInputError


class Page(Sequence):
    """Read-only view over items[start:stop]"""

    __slots__ = ("_items", "_start", "_stop")

    def __init__(self, items: Sequence, start: int, stop: int):
        self._items = items
        self._start = start
        self._stop = stop

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, position):
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(len(self)))]
        if position < 0:
            position += len(self)
        if not 0 <= position < len(self):
            raise IndexError("page index out of range")
        return self._items[self._start + position]

    def __iter__(self) -> Iterator:
        for position in range(self._start, self._stop):
            yield self._items[position]

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Page(start={self._start}, stop={self._stop})"


class Paginator(Sequence):
    """
    Lazy, restartable sequence of pages.

    Page bounds are computed on access; iterating twice yields the same
    pages. All pages hold page_size items except possibly the last one.
    An empty input gives zero pages.
    """

    def __init__(self, items: Sequence, page_size: int):
        if page_size <= 0:
            raise InvalidInputError(f"Page size must be positive, got {page_size}")
        self._items = items
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def __len__(self) -> int:
        # ceil(N / P)
        return -(-len(self._items) // self._page_size)

    def __getitem__(self, position: Union[int, slice]):
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(len(self)))]
        page_count = len(self)
        if position < 0:
            position += page_count
        if not 0 <= position < page_count:
            raise IndexError("page number out of range")
        start = position * self._page_size
        stop = min(start + self._page_size, len(self._items))
        return Page(self._items, start, stop)

    def __iter__(self) -> Iterator[Page]:
        for position in range(len(self)):
            yield self[position]

    def __str__(self) -> str:
        return "\n".join(str(page) for page in self)


def paginate(items: Sequence, page_size: int) -> Paginator:
    """
    Split ordered items into pages of page_size.

    Args:
        items: Ordered results (e.g. output of find_top_documents)
        page_size: Positive number of items per page

    Returns:
        Paginator over the items

    Raises:
        InvalidInputError: If page_size is not positive
    """
    return Paginator(items, page_size)
