"""
Covering relation of the subset order:
Concrete `SetRepresentation` variants and their subset tests.

All variants agree on `is_subset` for sets built by the same `SetBuilder`,
they differ in cost and memory layout:

- `HashSetRepresentation`: Python `set`, the reference baseline.
- `SortedArrayRepresentation`: ascending numpy array, merge-walk test.
- `BitsetRepresentation`: blocks of 256 bits (four 64 bit lanes), the subset
  test is a word-parallel `AND`.
"""

import inspect
from typing import Optional, Type, Union

import numpy as np

from sklearn_hasse.common import HAVE_NUMBA, jit, SetRepresentation

BLOCK_BITS = 256
LANE_BITS = 64
N_LANES = BLOCK_BITS // LANE_BITS


class HashSetRepresentation(SetRepresentation):
    """Set backed by a native `set` of element indices."""

    def __init__(self):
        self.items = set()

    def mark(self, index: int) -> None:
        self._check_index(index)
        self.items.add(index)

    def is_subset(self, other: 'HashSetRepresentation') -> bool:
        self._check_comparable(other)
        return self.items.issubset(other.items)

    def indices(self) -> np.ndarray:
        return np.array(sorted(self.items), dtype=np.int64)

    def __len__(self) -> int:
        return len(self.items)


class SortedArrayRepresentation(SetRepresentation):
    """Set stored as an ascending array of element indices.

    Marked indices are buffered and merged into the array on the next read,
    so building a set of n elements costs one sort instead of n inserts.

    Attributes
    -----
    items : np.ndarray of dtype int64
        The element indices, sorted, without duplicates.
    """

    def __init__(self):
        self._items = np.empty(0, dtype=np.int64)
        self._pending = []

    @property
    def items(self) -> np.ndarray:
        if self._pending:
            self._items = np.union1d(
                self._items, np.array(self._pending, dtype=np.int64))
            self._pending = []
        return self._items

    def mark(self, index: int) -> None:
        self._check_index(index)
        self._pending.append(index)

    def is_subset(self, other: 'SortedArrayRepresentation') -> bool:
        self._check_comparable(other)
        return sorted_is_subset(self.items, other.items)

    def indices(self) -> np.ndarray:
        return self.items.copy()

    def __len__(self) -> int:
        return len(self.items)


def sorted_is_subset(items: np.ndarray, other_items: np.ndarray,
                     implementation=None) -> bool:
    """Test whether ascending `items` is contained in ascending `other_items`.

    :param implementation: One of the kernels `__sorted_is_subset_numpy`,
        `__sorted_is_subset_numba` or None. If None, use numba if available.
    """
    if len(other_items) < len(items):
        return False
    if not len(items):
        return True
    if implementation is None:
        implementation = (__sorted_is_subset_numba if HAVE_NUMBA
                          else __sorted_is_subset_numpy)
    return bool(implementation(items, other_items))


def __sorted_is_subset_numpy(items: np.ndarray, other_items: np.ndarray
                             ) -> bool:
    """Version of `sorted_is_subset` using binary search in numpy."""
    positions = np.searchsorted(other_items, items)
    return bool((positions < len(other_items)).all()
                and np.array_equal(other_items[positions], items))


@jit
def __sorted_is_subset_numba(items: np.ndarray, other_items: np.ndarray
                             ) -> bool:
    """Version of `sorted_is_subset` walking both arrays forward together.

    The scan for the first element of `items` is the same loop as for all
    later ones. Stops at the first element of `items` missing in
    `other_items`.
    """
    n_other = len(other_items)
    j = 0
    for i in range(len(items)):
        item = items[i]
        while j < n_other and other_items[j] < item:
            j += 1
        if j == n_other or other_items[j] != item:
            return False
        j += 1
    return True


class BitsetRepresentation(SetRepresentation):
    """Set stored as bit flags, one bit per element index.

    Attributes
    -----
    blocks : np.ndarray of dtype uint64, shape `(n_blocks, 4)`
        Each row is one block of 256 bits, organized as four 64 bit lanes.
        Index `i` lives in block `i // 256`, lane `(i % 256) // 64`, bit
        `i % 64`. Grown on demand by `mark`.

    size : int
        Count of distinct marked indices.
    """

    def __init__(self):
        self.blocks = np.zeros((0, N_LANES), dtype=np.uint64)
        self.size = 0

    def mark(self, index: int) -> None:
        self._check_index(index)
        block, offset = divmod(index, BLOCK_BITS)
        lane, bit = divmod(offset, LANE_BITS)
        n_blocks = len(self.blocks)
        if block >= n_blocks:
            self.blocks = np.vstack([
                self.blocks,
                np.zeros((block + 1 - n_blocks, N_LANES), dtype=np.uint64)])
        flag = np.uint64(1) << np.uint64(bit)
        if not self.blocks[block, lane] & flag:
            self.blocks[block, lane] |= flag
            self.size += 1

    def is_subset(self, other: 'BitsetRepresentation') -> bool:
        self._check_comparable(other)
        if len(other) < len(self):
            return False
        return bitset_is_subset(self.blocks, other.blocks)

    def indices(self) -> np.ndarray:
        # little endian bytes & bits: bit k of the flat view is index k
        bits = np.unpackbits(self.blocks.astype('<u8').view(np.uint8),
                             bitorder='little')
        return np.flatnonzero(bits).astype(np.int64)

    def __len__(self) -> int:
        return self.size


def bitset_is_subset(blocks: np.ndarray, other_blocks: np.ndarray,
                     implementation=None) -> bool:
    """Test whether every bit set in `blocks` is set in `other_blocks`.

    :param blocks: array of dtype uint64 and shape `(n_blocks, 4)`.
    :param other_blocks: array of dtype uint64 and shape `(m_blocks, 4)`.
    :param implementation: One of the kernels `__bitset_is_subset_numpy`,
        `__bitset_is_subset_numba` or None. If None, use numba if available.
    """
    if len(other_blocks) < len(blocks):
        return False
    if implementation is None:
        implementation = (__bitset_is_subset_numba if HAVE_NUMBA
                          else __bitset_is_subset_numpy)
    return bool(implementation(blocks, other_blocks))


def __bitset_is_subset_numpy(blocks: np.ndarray, other_blocks: np.ndarray
                             ) -> bool:
    """Version of `bitset_is_subset` AND-ing all blocks at once."""
    return np.array_equal(blocks & other_blocks[:len(blocks)], blocks)


@jit
def __bitset_is_subset_numba(blocks: np.ndarray, other_blocks: np.ndarray
                             ) -> bool:
    """Version of `bitset_is_subset` to be optimized by `numba.njit`."""
    for i in range(blocks.shape[0]):
        for lane in range(blocks.shape[1]):
            if (blocks[i, lane] & other_blocks[i, lane]) != blocks[i, lane]:
                return False
    return True


REPRESENTATIONS = {
    'hash': HashSetRepresentation,
    'sorted': SortedArrayRepresentation,
    'bitset': BitsetRepresentation,
}


def resolve_representation(
        representation: Union[str, Type[SetRepresentation]]
) -> Optional[Type[SetRepresentation]]:
    """:return: The `SetRepresentation` class named by `representation`, or
        `representation` itself if it already is a concrete subclass.
        Returns None if `representation` cannot be recognized.
    """
    if isinstance(representation, str):
        return REPRESENTATIONS.get(representation)
    if (inspect.isclass(representation)
            and issubclass(representation, SetRepresentation)
            and not inspect.isabstract(representation)):
        return representation
    return None
