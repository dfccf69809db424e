import io
import random

import pytest

from oslab.histogram import collect, format_histogram, main, sample


def test_sample_is_even_and_bounded():
    rng = random.Random(1)
    for _ in range(500):
        value = sample(rng)
        assert -12 <= value <= 12
        assert value % 2 == 0


def test_collect_counts_every_sample():
    counts = collect(300, random.Random(2))
    assert len(counts) == 25
    assert sum(counts) == 300


def test_collect_odd_buckets_empty():
    counts = collect(400, random.Random(3))
    assert all(count == 0 for i, count in enumerate(counts) if (i - 12) % 2)


def test_collect_reproducible_with_seed():
    first = collect(100, random.Random(7))
    second = collect(100, random.Random(7))
    assert sum(first) == 100
    assert len(first) == 25
    assert first == second


def test_collect_zero_samples():
    assert collect(0, random.Random(0)) == [0] * 25


def test_format_histogram_lines():
    counts = [0] * 25
    counts[12] = 3
    lines = format_histogram(counts).splitlines()
    assert len(lines) == 25
    assert lines[0] == "-12: "
    assert lines[12] == "0: ***"
    assert lines[-1] == "12: "


def test_format_histogram_wrong_length():
    with pytest.raises(ValueError):
        format_histogram([1, 2, 3])


def test_main_with_argument(capsys):
    assert main(["150", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert out == format_histogram(collect(150, random.Random(5)))
    assert out.count("*") == 150


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("40\n"))
    assert main(["--seed", "9"]) == 0
    out = capsys.readouterr().out
    assert out.count("*") == 40
    assert len(out.splitlines()) == 25