"""Tests for `sklearn_hasse.corpus`."""

import pytest

from sklearn_hasse.corpus import Corpus


def test_add_buckets_by_length():
    corpus = Corpus()
    corpus.add('abc')
    assert corpus.buckets == [[], [], ['abc']]
    corpus.add('x')
    corpus.add('yz')
    corpus.add('de')
    assert corpus.buckets == [['x'], ['yz', 'de'], ['abc']]
    corpus.add('abcdef')
    assert corpus.buckets == [['x'], ['yz', 'de'], ['abc'], [], [],
                              ['abcdef']]
    assert len(corpus) == 5
    for index, bucket in enumerate(corpus.buckets):
        assert all(len(item) == index + 1 for item in bucket)


def test_add_empty():
    with pytest.raises(ValueError):
        Corpus().add('')


def test_iter_by_length_then_insertion():
    corpus = Corpus()
    for item in ['ccc', 'a', 'bb', 'dd', 'e']:
        corpus.add(item)
    assert list(corpus) == ['a', 'e', 'bb', 'dd', 'ccc']


def test_get_above():
    corpus = Corpus()
    for item in ['ccc', 'a', 'bb', 'dd', 'e', 'fffff']:
        corpus.add(item)
    assert list(corpus.get_above(0)) == list(corpus)
    assert list(corpus.get_above(1)) == ['bb', 'dd', 'ccc', 'fffff']
    assert list(corpus.get_above(3)) == ['fffff']
    assert len(corpus.get_above(3)) == 1
    assert list(corpus.get_above(5)) == []
    assert list(corpus.get_above(17)) == []


def test_get_above_restartable():
    corpus = Corpus()
    for item in ['a', 'bb', 'cc']:
        corpus.add(item)
    view = corpus.get_above(1)
    assert list(view) == ['bb', 'cc']
    assert list(view) == ['bb', 'cc']


def test_get_above_is_lazy():
    corpus = Corpus()
    corpus.add('a')
    view = corpus.get_above(1)
    corpus.add('bb')
    assert list(view) == ['bb']


def test_bucket():
    corpus = Corpus()
    corpus.add('aaa')
    assert corpus.bucket(3) == ['aaa']
    assert corpus.bucket(1) == []
    assert corpus.bucket(0) == []
    assert corpus.bucket(4) == []
