"""
Covering relation of the subset order:
Common `SetRepresentation` contract, the `Itemset` wrapper, and the
`SetBuilder` assigning element indices.
"""

import warnings
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Dict, Hashable, Iterable, NamedTuple, Optional, \
    Tuple, Type, TypeVar, Union

import numpy as np

try:
    HAVE_NUMBA = True
    from numba import jit
    jit = partial(jit, cache=True, nopython=True)
except ImportError as e:
    warnings.warn("Could not import numba, plain numpy subset tests will be "
                  "used instead. " + str(e))

    def jit(function):
        return function
    HAVE_NUMBA = False

Element = TypeVar("Element", bound=Hashable)
Record = Tuple[Any, ...]

T = TypeVar('T', bound='SetRepresentation')


class SetRepresentation(ABC):
    """A set of element indices, supporting the capability
    {`len`, `is_subset`}.

    Instances are filled by `SetBuilder.add` calling `mark` once per element
    index and are not modified afterwards. Subset tests are only meaningful
    between two instances of the same class whose indices come from the same
    `SetBuilder`.
    """

    @abstractmethod
    def mark(self, index: int) -> None:
        """Add element `index` to the set. Marking an index twice is a no-op.
        """
        raise NotImplementedError

    @abstractmethod
    def is_subset(self: T, other: T) -> bool:
        """:return: True iff every element of `self` is also in `other`."""
        raise NotImplementedError

    @abstractmethod
    def indices(self) -> np.ndarray:
        """:return: The marked element indices, ascending."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @classmethod
    def from_indices(cls: Type[T], indices: Iterable[int]) -> T:
        """:return: A new instance with all of `indices` marked."""
        representation = cls()
        for index in indices:
            representation.mark(index)
        return representation

    def _check_comparable(self, other: 'SetRepresentation'):
        if type(other) is not type(self):
            raise TypeError("cannot compare %s with %s"
                            % (type(self).__name__, type(other).__name__))

    @staticmethod
    def _check_index(index: int):
        if index < 0:
            raise ValueError(
                "element index not greater than or equal to 0, index == {}"
                .format(index))

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.indices().tolist())


class Itemset:
    """A raw record together with the `SetRepresentation` built from it.

    The record is kept as read (original element order, duplicates included),
    so it can be written out again unchanged; length and subset tests are
    delegated to the representation.

    Attributes
    -----
    elements : tuple
        The raw record.

    representation : SetRepresentation
        The set built from `elements` by a `SetBuilder`.
    """

    __slots__ = 'elements', 'representation'

    def __init__(self, elements: Iterable, representation: SetRepresentation):
        self.elements = tuple(elements)
        self.representation = representation

    def __len__(self) -> int:
        return len(self.representation)

    def is_subset(self, other: 'Itemset') -> bool:
        return self.representation.is_subset(other.representation)

    def __repr__(self):
        return 'Itemset({!r})'.format(self.elements)


class Edge(NamedTuple):
    """A covering edge: `superset` is a minimal-length corpus superset of
    `subset`.
    """
    subset: Any
    superset: Any


class SetBuilder:
    """Assigns a dense integer index to each distinct element, the first time
    it is seen, and builds set representations from raw records.

    All sets which are compared with each other have to be built by the same
    builder, since e.g. the bits of a `BitsetRepresentation` are only
    meaningful relative to one index assignment.

    Parameters
    -----
    representation : str or subclass of SetRepresentation
        One of 'hash', 'sorted', 'bitset' or a `SetRepresentation` class.

    Attributes
    -----
    representation_class_ : subclass of SetRepresentation
        The class resolved from `representation`.

    index_ : dict
        Maps each element seen so far to its index. Only ever grows.
    """

    def __init__(self,
                 representation: Union[str, Type[SetRepresentation]] = 'bitset'
                 ):
        # late import, concrete builds upon this module
        from sklearn_hasse.concrete import resolve_representation
        self.representation = representation
        self.representation_class_ = resolve_representation(representation)
        if self.representation_class_ is None:
            raise ValueError("representation must be one of 'hash', 'sorted',"
                             " 'bitset' or a SetRepresentation subclass, "
                             "but got {!r}.".format(representation))
        self.index_: Dict[Element, int] = {}

    def __len__(self) -> int:
        return len(self.index_)

    def add(self, raw_elements: Iterable[Element]) -> SetRepresentation:
        """Build the set of `raw_elements`, indexing unseen elements.

        Duplicates collapse. Elements are sorted before indices are assigned,
        so records with the same elements in different order always get the
        same indices.
        """
        representation = self.representation_class_()
        index = self.index_
        for element in sorted(set(raw_elements)):
            representation.mark(index.setdefault(element, len(index)))
        return representation

    def make_itemset(self, raw_elements: Iterable[Element]) -> Itemset:
        """:return: An `Itemset` of `raw_elements` and its representation."""
        raw_elements = tuple(raw_elements)
        return Itemset(raw_elements, self.add(raw_elements))

    def lookup(self, raw_elements: Iterable[Element]
               ) -> Optional[SetRepresentation]:
        """Build the set of `raw_elements` without indexing new elements.

        :return: The representation, or None if some element was never seen,
            in which case the set cannot be a subset of any set built so far.
        """
        try:
            indices = [self.index_[element] for element in set(raw_elements)]
        except KeyError:
            return None
        return self.representation_class_.from_indices(sorted(indices))
