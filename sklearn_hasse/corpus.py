"""
Covering relation of the subset order:
The length-bucketed `Corpus` of sets.
"""

from itertools import chain
from typing import Generic, Iterator, List, Sized, TypeVar

T = TypeVar('T', bound=Sized)


class BucketView(Generic[T]):
    """Lazy view on the buckets `[start, end)` of a `Corpus`.

    Every `iter()` starts over at the first set of bucket `start`, yielding
    sets ascending by length, and by insertion order within one length.
    """

    def __init__(self, buckets: List[List[T]], start: int):
        self._buckets = buckets
        self.start = start

    def __iter__(self) -> Iterator[T]:
        return chain.from_iterable(self._buckets[self.start:])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets[self.start:])


class Corpus(Generic[T]):
    """A collection of sets, stored in buckets by length.

    Attributes
    -----
    buckets : list of lists
        `buckets[L - 1]` holds every set of length `L`, in insertion order.
        There are no gaps: a length without sets has an empty bucket. The
        list is only as long as the longest set added.
    """

    def __init__(self):
        self.buckets: List[List[T]] = []

    def add(self, item: T) -> None:
        """Place `item` into the bucket for its length, adding empty buckets
        as necessary.
        """
        length = len(item)
        if length < 1:
            raise ValueError("Cannot add empty set to corpus: {!r}"
                             .format(item))
        for _ in range(len(self.buckets), length):
            self.buckets.append([])
        self.buckets[length - 1].append(item)

    def get_above(self, n: int) -> BucketView[T]:
        """:return: A lazy, restartable view of all sets longer than `n`."""
        return BucketView(self.buckets, n)

    def bucket(self, length: int) -> List[T]:
        """:return: All sets of `length`, empty if there are none."""
        if 1 <= length <= len(self.buckets):
            return self.buckets[length - 1]
        return []

    def __iter__(self) -> Iterator[T]:
        return chain.from_iterable(self.buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)
