"""Covering relation of the subset order on a corpus of sets.

For every set A in a corpus, find the supersets of A in the corpus having
minimal length, i.e. the edges of the Hasse diagram of the subset lattice
restricted to the corpus.

Limitations / Assumptions
=====

- one-shot batch computation, the corpus cannot be updated after `fit`
- every record is a set: duplicate elements collapse
- elements have to be hashable and totally ordered
- empty records cannot be added to a corpus
- all sets compared with each other must come from the same `SetBuilder`
"""

from sklearn_hasse.covering import HasseEstimator

__all__ = ['HasseEstimator', 'cli', 'common', 'concrete', 'corpus',
           'covering', 'datasets', 'tests', 'util']
