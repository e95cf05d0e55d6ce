"""Tests for `sklearn_hasse.datasets`."""

import pytest

from sklearn_hasse import datasets


def test_canned_corpora():
    assert datasets.load_one_to_four() == [(1,), (1, 2), (1, 2, 3), (1, 2, 4)]
    assert len(datasets.load_sample()) == 6


def test_make_random_records():
    records = datasets.make_random_records(5, 100, random_state=42)
    assert len(records) == 100
    for record in records:
        assert 1 <= len(record) <= 5
        assert record == tuple(range(len(record)))
    assert records == datasets.make_random_records(5, 100, random_state=42)
    assert datasets.make_random_records(1, 3) == [(0,), (0,), (0,)]
    assert datasets.make_random_records(4, 0) == []


@pytest.mark.parametrize('max_length, n_records', [(0, 10), (3, -1)])
def test_make_random_records_invalid(max_length, n_records):
    with pytest.raises(ValueError):
        datasets.make_random_records(max_length, n_records)
