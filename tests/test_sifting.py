import pytest

from bb84lab import DIAGONAL as X, RECTILINEAR as Z, SiftedSet, sift


def test_sift_keeps_matching_positions_in_order():
    sifted = sift([Z, X, X, Z, Z], [Z, Z, X, X, Z], [1, 0, 1, 1, 0], [1, 1, 0, 0, 0])

    assert sifted.indices == (0, 2, 4)
    assert sifted.alice_bits == (1, 1, 0)
    assert sifted.bob_bits == (1, 0, 0)
    assert sifted.mismatches() == [1]


def test_sift_of_empty_stream():
    sifted = sift([], [], [], [])
    assert len(sifted) == 0
    assert sifted == SiftedSet()


def test_sift_with_no_matching_bases():
    sifted = sift([Z, Z, X], [X, X, Z], [0, 1, 1], [1, 1, 0])
    assert len(sifted) == 0
    assert sifted.mismatches() == []


def test_sift_rejects_misaligned_sequences():
    with pytest.raises(ValueError):
        sift([Z, X], [Z], [0, 1], [0, 1])
