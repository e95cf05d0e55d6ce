"""Small canned corpora and a random corpus generator, for debugging and
benchmarking the covering edge search.
"""

from typing import List, Tuple

from sklearn.utils import check_random_state


def load_one_to_four() -> List[Tuple[int, ...]]:
    """:return: A chain `[1] < [1, 2] < [1, 2, 3]` plus `[1, 2, 4]`."""
    return [(1,), (1, 2), (1, 2, 3), (1, 2, 4)]


def load_sample() -> List[Tuple[int, ...]]:
    """:return: A small corpus with two chains meeting in `[1, 2, 3]`."""
    return [(1, 2), (1, 2, 3), (1, 2, 3, 4), (1, 2, 3, 4, 5), (2,), (2, 3)]


def make_random_records(max_length: int, n_records: int, random_state=None
                        ) -> List[Tuple[int, ...]]:
    """Generate `n_records` random prefixes `(0, 1, ..., k - 1)` with `k`
    drawn uniformly from `[1, max_length]`.

    Duplicates are likely, and every record is a subset of every longer one,
    which makes this the worst case for the number of subset tests.

    :param random_state: None | int | instance of np.random.RandomState
        Passed through `sklearn.utils.check_random_state`.
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1, got %d" % max_length)
    if n_records < 0:
        raise ValueError("n_records must not be negative, got %d" % n_records)
    rng = check_random_state(random_state)
    return [tuple(range(rng.randint(1, max_length + 1)))
            for _ in range(n_records)]
