import pytest

from oslab.slice import Slice, exercise, main


def test_fifo_order():
    queue = Slice(4)
    for value in (1, 2, 3):
        assert queue.push(value)
    assert [queue.pop() for _ in range(3)] == [1, 2, 3]


def test_full_queue_drops_value():
    queue = Slice(2)
    assert queue.push("a")
    assert queue.push("b")
    assert not queue.push("c")
    assert len(queue) == 2
    assert [queue.pop(), queue.pop()] == ["a", "b"]


def test_empty_pop_returns_empty_value():
    assert Slice(3).pop() == 0
    assert Slice(3, empty_value=-1).pop() == -1


def test_wraps_around_capacity():
    queue = Slice(3)
    popped = []
    for value in range(10):
        queue.push(value)
        popped.append(queue.pop())
    assert popped == list(range(10))
    assert len(queue) == 0


def test_len_tracks_contents():
    queue = Slice(5)
    for value in range(4):
        queue.push(value)
    queue.pop()
    assert len(queue) == 3


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Slice(size)


def test_exercise_leaves_queue_empty():
    queue = Slice(10)
    results = exercise(queue, 5)
    assert results == [10] * 5
    assert len(queue) == 0


def test_main_prints_popped_values(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["10"] * 5


def test_main_custom_thread_count(capsys):
    assert main(["--threads", "8", "--size", "3"]) == 0
    assert capsys.readouterr().out.split() == ["10"] * 8