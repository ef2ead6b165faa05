"""
Integration tests for chained sanity operations.

Exercises the public namespace the way callers use it: the output of one
operation fed straight into the next.
"""

import pytest

import sanity as s

SEQUENCES = [
    [],
    [1],
    [3, 1, 2],
    [5, -3, 0, 8, 8, -1, 2],
    list("functional"),
]


class TestAlgebraicProperties:
    """Laws that hold for any input sequence."""

    @pytest.mark.parametrize("seq", SEQUENCES)
    def test_map_identity(self, seq):
        """map with identity returns an equal sequence."""
        assert s.map(seq, s.identity) == seq

    @pytest.mark.parametrize("seq", SEQUENCES[:4])
    def test_filter_remove_complement(self, seq):
        """filter and remove split the input between them."""
        kept = s.filter(seq, s.is_even)
        dropped = s.remove(seq, s.is_even)
        assert kept == s.remove(seq, s.negate(s.is_even))
        assert s.every(kept, s.is_even)
        assert s.length(kept) + s.length(dropped) == s.length(seq)

    @pytest.mark.parametrize("seq", [q for q in SEQUENCES if q])
    def test_reduce_left_preferring(self, seq):
        """A left-preferring combinator reduces to the first element."""
        assert s.reduce(seq, lambda a, b: a) == s.first(seq)

    @pytest.mark.parametrize("seq", SEQUENCES)
    def test_take_drop_concat(self, seq):
        """take and drop at the same point reassemble the input."""
        for n in s.range(len(seq) + 1):
            assert s.concat(s.take(seq, n), s.drop(seq, n)) == seq

    @pytest.mark.parametrize("seq", SEQUENCES)
    def test_sort_shuffle(self, seq, seeded):
        """Shuffling does not change the sorted result."""
        seeded(2024)
        assert s.sort(s.shuffle(seq)) == s.sort(seq)

    def test_zipmap_keys_vals(self):
        """A mapping survives splitting into keys and values."""
        m = s.zipmap(s.range(5), s.map(s.range(5), s.inc))
        assert s.zipmap(s.keys(m), s.vals(m)) == m


class TestScenarios:
    """Worked examples of whole pipelines."""

    def test_stepped_range(self):
        """range(1, 10, 2)."""
        assert s.range(1, 10, 2) == [1, 3, 5, 7, 9]

    def test_sum_with_reduce(self):
        """reduce(0, [1, 2, 3, 4], add)."""
        assert s.reduce(0, [1, 2, 3, 4], s.add) == 10

    def test_merge(self):
        """merge with overlapping keys."""
        assert s.merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_errors(self):
        """Failing scenarios raise the documented errors."""
        with pytest.raises(s.EmptyCollectionError):
            s.first([])
        with pytest.raises(s.LengthMismatchError):
            s.zipmap([1, 2], [1, 2, 3])

    def test_all_errors_share_base(self):
        """Every library error is a SanityError."""
        with pytest.raises(s.SanityError):
            s.take([1], -1)
        with pytest.raises(s.SanityError):
            s.divide(1, 0)

    def test_doubled_positives(self):
        """filter(map(x, f), pred) chain."""
        x = [1, 2, 3, -10, -1, 4]
        assert s.filter(s.map(x, lambda q: 2 * q), s.is_positive) == [2, 4, 6, 8]

    def test_max_of_mapped_range(self):
        """maximum over a mapped range."""
        assert s.maximum(s.map(s.range(30), lambda q: 2 * q)) == 58

    def test_index_in_shuffled_range(self, seeded):
        """A shuffled range still holds every number exactly once."""
        seeded(3)
        shuffled = s.shuffle(s.range(10000))
        position = s.index_of(shuffled, 999)
        assert s.nth(shuffled, position) == 999
        assert s.index_of(s.drop(shuffled, position + 1), 999) == -1

    def test_word_frequencies(self, text_file):
        """Count words from a file with split, reduce and merge_with."""
        path = text_file("the cat\nthe hat\n")
        words = s.remove(s.split(s.slurp(path), r"\s+"), lambda w: w == "")
        counts = s.reduce({}, words, lambda acc, w: s.merge_with(s.add, acc, {w: 1}))
        assert counts == {"the": 2, "cat": 1, "hat": 1}

    def test_round_trip_through_file(self, tmp_path):
        """Write a joined sequence and read it back."""
        path = tmp_path / "numbers.txt"
        s.spit(path, "".join(s.interpose(s.map(s.range(1, 4), str), ",")))
        assert s.map(s.split(s.slurp(path), ","), int) == [1, 2, 3]

    def test_rename_and_dissoc(self):
        """Reshape a record without touching the original."""
        record = {"id": 7, "nm": "Ada", "tmp": True}
        reshaped = s.dissoc(s.rename_keys(record, {"nm": "name"}), "tmp")
        assert reshaped == {"id": 7, "name": "Ada"}
        assert record == {"id": 7, "nm": "Ada", "tmp": True}
