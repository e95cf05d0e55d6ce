"""pytest fixtures for the test cases in this directory."""
from typing import List, Sequence, Tuple, Type

import pytest

from sklearn_hasse.common import Itemset, SetBuilder, SetRepresentation
from sklearn_hasse.concrete import HashSetRepresentation, \
    SortedArrayRepresentation, BitsetRepresentation
from sklearn_hasse.corpus import Corpus


@pytest.fixture(params=[HashSetRepresentation,
                        SortedArrayRepresentation,
                        BitsetRepresentation])
def representation_class(request) -> Type[SetRepresentation]:
    """Fixture running for each of the set representations from
    `sklearn_hasse.concrete`.

    :return: A `SetRepresentation` subclass.
    """
    return request.param


@pytest.fixture
def builder(representation_class) -> SetBuilder:
    """:return: A fresh `SetBuilder` for each of the set representations."""
    return SetBuilder(representation_class)


def build_corpus(builder: SetBuilder, records: Sequence[Sequence]
                 ) -> Tuple[Corpus, List[Itemset]]:
    """Add `records` to a new `Corpus`, in order.

    :return: `(corpus, itemsets)` where `itemsets` are the added `Itemset`s,
      in insertion order.
    """
    corpus = Corpus()
    itemsets = []
    for record in records:
        itemset = builder.make_itemset(record)
        corpus.add(itemset)
        itemsets.append(itemset)
    return corpus, itemsets


def elements_of(itemsets) -> List[tuple]:
    """:return: the raw records of `itemsets`."""
    return [itemset.elements for itemset in itemsets]


SCENARIO_1 = [(1, 2), (1, 2, 3), (1, 2, 4), (1, 2, 3, 4), (1, 2, 3, 4, 5),
              (2,), (2, 3)]

SCENARIO_2 = [(1, 2, 3, 5), (1, 2, 3, 5, 11), (1, 2, 3, 5, 16, 17)]


@pytest.fixture(params=[SCENARIO_1,
                        SCENARIO_2,
                        [(3, 1), (1,), (1, 2, 3), (2, 3, 1, 4), (4,), (9, 8)],
                        [(i, i + 1) for i in range(0, 600, 7)]
                        + [(i, i + 1, i + 2) for i in range(0, 600, 5)]
                        + [tuple(range(0, 600, 3))],
                        ], ids=['scenario_1', 'scenario_2', 'mixed', 'wide'])
def records(request) -> List[tuple]:
    """Fixture running for a couple of small corpora.

    :return: A list of records.
    """
    return request.param
