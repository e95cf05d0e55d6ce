"""
Covering relation of the subset order: the covering edge search, and an
estimator running ingest, search and export.
"""

import logging
from time import perf_counter
from typing import Iterable, List, Type, Union

from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted
from tqdm import tqdm

from sklearn_hasse.common import Edge, Itemset, Record, SetBuilder, \
    SetRepresentation
from sklearn_hasse.corpus import Corpus
from sklearn_hasse.util import EDGE_DELIMITER, export_edges

logger = logging.getLogger(__name__)


def supersets_of(corpus: Corpus, item) -> list:
    """:return: All sets in `corpus` which are strict supersets of `item`,
        ascending by length.

    Only buckets of sets longer than `item` are searched, so `item` itself
    (and any other set of the same length) is never returned.
    """
    is_subset = item.is_subset
    return [candidate for candidate in corpus.get_above(len(item))
            if is_subset(candidate)]


def covering_edges_of(corpus: Corpus, item) -> List[Edge]:
    """:return: An `Edge(item, superset)` for every superset of `item` in
        `corpus` which has minimal length among all these supersets.
    """
    candidates = supersets_of(corpus, item)
    if not candidates:
        return []
    # candidates are ordered by length, so this is len(candidates[0]). The
    # minimum is still computed to not depend on that order.
    min_length = min(len(candidate) for candidate in candidates)
    return [Edge(item, candidate) for candidate in candidates
            if len(candidate) <= min_length]


def all_covering_edges(corpus: Corpus, progress=None) -> List[Edge]:
    """Compute the covering edges of every set in `corpus`.

    :param progress: None or a progress observer like `tqdm.tqdm`. If given,
        `progress.update(1)` is called after each set and `progress.close()`
        at the end.
    :return: The edges, ordered by subset (by length, then insertion order),
        then by superset.
    """
    edges: List[Edge] = []
    for item in corpus:
        edges.extend(covering_edges_of(corpus, item))
        if progress is not None:
            progress.update(1)
    if progress is not None:
        progress.close()
    return edges


# noinspection PyAttributeOutsideInit
class HasseEstimator(BaseEstimator):
    """Compute the covering relation (Hasse diagram edges) of the subset order
    on a collection of records.

    Parameters
    -----
    representation : str or subclass of SetRepresentation
        How the sets are stored and compared, see `sklearn_hasse.concrete`:

        - 'bitset' (default): bit flags compared block-wise, fastest.
        - 'sorted': sorted index arrays.
        - 'hash': Python sets, the reference implementation.

    progress : bool
        If True, show a `tqdm` progress bar while searching edges.

    Attributes
    -----
    builder_ : SetBuilder
        Holds the element index shared by all sets of `corpus_`.

    corpus_ : Corpus of Itemset
        All records of the training data `X`.

    n_sets_ : int
        Number of records in `X`.

    edges_ : list of Edge
        The covering edges between the `Itemset`s in `corpus_`.
    """

    def __init__(self,
                 representation: Union[str, Type[SetRepresentation]] = 'bitset',
                 progress: bool = False):
        self.representation = representation
        self.progress = progress

    def fit(self, X: Iterable[Iterable], y=None):
        """Index the records `X` and compute their covering edges.

        :param X: Iterable of records, each an iterable of hashable, ordered
            elements. Duplicate elements in a record collapse.
        :param y: Ignored.
        """
        start = perf_counter()
        self.builder_ = SetBuilder(self.representation)
        self.corpus_: Corpus[Itemset] = Corpus()
        for record in X:
            self.corpus_.add(self.builder_.make_itemset(record))
        self.n_sets_ = len(self.corpus_)
        logger.debug("indexed %d sets with %d distinct elements in %.0fms",
                     self.n_sets_, len(self.builder_),
                     (perf_counter() - start) * 1000)

        start = perf_counter()
        bar = tqdm(total=self.n_sets_, disable=not self.progress, unit='set')
        self.edges_: List[Edge] = all_covering_edges(self.corpus_, bar)
        logger.debug("found %d covering edges in %.0fms",
                     len(self.edges_), (perf_counter() - start) * 1000)
        return self

    def minimal_supersets(self, record: Iterable) -> List[Record]:
        """:return: The records in the fitted corpus which are minimal-length
            strict supersets of `record`. `record` need not be part of the
            corpus.
        """
        check_is_fitted(self, 'corpus_')
        record = tuple(record)
        representation = self.builder_.lookup(record)
        if representation is None:
            # an unseen element is in no set of the corpus
            return []
        return [edge.superset.elements
                for edge in covering_edges_of(
                    self.corpus_, Itemset(record, representation))]

    def export_text(self, delimiter: str = EDGE_DELIMITER) -> str:
        """Build a text report of `edges_`, one ``subset->superset`` line per
        edge. See `sklearn_hasse.util.format_edge`.

        The text can be read back with `sklearn_hasse.util.read_edges` if the
        records hold integer elements only.
        """
        check_is_fitted(self, 'edges_')
        return export_edges(self.edges_, delimiter)
