"""Tests for `sklearn_hasse.common`."""

import pytest
from numpy.testing import assert_array_equal

from sklearn_hasse.common import Itemset, SetBuilder, SetRepresentation
from sklearn_hasse.concrete import BitsetRepresentation, \
    HashSetRepresentation


def test_builder_assigns_dense_indices(builder):
    builder.add([3, 1, 2])
    assert builder.index_ == {1: 0, 2: 1, 3: 2}
    builder.add([2, 7, 5])
    assert builder.index_ == {1: 0, 2: 1, 3: 2, 5: 3, 7: 4}
    assert len(builder) == 5


def test_builder_sorts_before_indexing(builder):
    """Transpositions of a record get identical indices."""
    first = builder.add([9, 4, 6])
    second = builder.add([6, 9, 4])
    assert_array_equal(first.indices(), [0, 1, 2])
    assert_array_equal(first.indices(), second.indices())


def test_builder_collapses_duplicates(builder):
    representation = builder.add([5, 5, 1, 5])
    assert len(representation) == 2
    assert_array_equal(representation.indices(), [0, 1])


def test_builder_idempotent_construction(builder):
    """Rebuilding a record yields a set equal to the original."""
    original = builder.add([11, 3, 7])
    builder.add([1, 2, 3, 4])
    rebuilt = builder.add([7, 11, 3])
    assert original.is_subset(rebuilt)
    assert rebuilt.is_subset(original)


def test_builder_bitset_layout():
    builder = SetBuilder('bitset')
    bitset = builder.add([1, 2, 3])
    assert bitset.blocks.shape == (1, 4)
    assert_array_equal(bitset.blocks, [[7, 0, 0, 0]])
    assert len(bitset) == 3


@pytest.mark.parametrize('representation', ['nonsense', None, 42,
                                            SetRepresentation])
def test_builder_rejects_unknown_representation(representation):
    with pytest.raises(ValueError):
        SetBuilder(representation)


def test_builder_by_name():
    assert SetBuilder('hash').representation_class_ is HashSetRepresentation
    assert SetBuilder().representation_class_ is BitsetRepresentation


def test_lookup(builder):
    stored = builder.add([1, 2, 3])
    query = builder.lookup([3, 1])
    assert len(builder) == 3, "lookup indexed new elements"
    assert query.is_subset(stored)
    assert not stored.is_subset(query)
    assert builder.lookup([1, 4]) is None
    assert len(builder) == 3


def test_make_itemset(builder):
    itemset = builder.make_itemset([2, 1, 2])
    assert itemset.elements == (2, 1, 2), "record not kept as read"
    assert len(itemset) == 2
    other = builder.make_itemset([1, 2, 3])
    assert itemset.is_subset(other)
    assert not other.is_subset(itemset)
    assert repr(itemset) == 'Itemset((2, 1, 2))'


def test_itemset_wraps_representation():
    representation = HashSetRepresentation.from_indices([4, 2])
    itemset = Itemset(iter(['b', 'a']), representation)
    assert itemset.elements == ('b', 'a')
    assert itemset.representation is representation
    assert len(itemset) == 2
