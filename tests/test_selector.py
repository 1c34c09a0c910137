import math

import numpy as np
import pytest

from topk_stream import InvalidArgument, TopKSelector, Underfilled, create


def brute_force(values, k):
    return sorted(values, reverse=True)[:k]


def test_scenario_mixed_values():
    sel = create(3)
    sel.feed_many([5, 1, 9, 3, 7])
    assert sel.snapshot() == [9, 7, 5]
    assert sel.kth() == 5


def test_duplicates_are_retained():
    sel = create(2)
    sel.feed_many([4, 4, 4])
    assert sel.snapshot() == [4, 4]
    assert sel.stats()["discarded"] == 1


def test_underfilled_has_no_padding():
    sel = create(3)
    sel.feed(1)
    assert sel.snapshot() == [1]
    with pytest.raises(Underfilled) as exc:
        sel.kth()
    assert exc.value.count == 1
    assert exc.value.capacity == 3


def test_empty_selector():
    sel = TopKSelector(4)
    assert sel.snapshot() == []
    assert len(sel) == 0
    with pytest.raises(Underfilled):
        sel.kth()


@pytest.mark.parametrize("bad", [0, -1, -100, 2.5, "3", None, True])
def test_invalid_capacity(bad):
    with pytest.raises(InvalidArgument):
        TopKSelector(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        create(0)


def test_capacity_accepts_numpy_integer():
    sel = TopKSelector(np.int64(2))
    assert sel.capacity == 2
    assert isinstance(sel.capacity, int)


def test_capacity_is_read_only():
    sel = create(2)
    with pytest.raises(AttributeError):
        sel.capacity = 5


def test_kth_succeeds_exactly_at_capacity():
    sel = create(3)
    for v in [10, 20]:
        sel.feed(v)
        with pytest.raises(Underfilled):
            sel.kth()
    sel.feed(15)
    assert sel.kth() == 10


def test_tie_break_keeps_earliest_first():
    sel = create(3)
    sel.feed(1)
    sel.feed(1.0)
    snap = sel.snapshot()
    assert snap == [1, 1.0]
    assert type(snap[0]) is int
    assert type(snap[1]) is float


def test_equal_to_minimum_is_discarded_when_full():
    sel = create(2)
    sel.feed_many([2, 1])
    sel.feed(1.0)
    snap = sel.snapshot()
    assert snap == [2, 1]
    assert type(snap[1]) is int


def test_discard_does_not_change_snapshot():
    sel = TopKSelector.from_iterable(3, [8, 6, 4])
    before = sel.snapshot()
    for v in [4, 3, -1, 4.0]:
        sel.feed(v)
        assert sel.snapshot() == before


def test_snapshot_is_a_copy():
    sel = TopKSelector.from_iterable(2, [3, 1])
    snap = sel.snapshot()
    snap.append(100)
    snap[0] = -5
    assert sel.snapshot() == [3, 1]
    sel.feed(7)
    assert snap == [-5, 1, 100]


def test_iteration_and_len():
    sel = TopKSelector.from_iterable(3, [2, 9, 4, 1])
    assert list(sel) == [9, 4, 2]
    assert len(sel) == 3
    assert sel.is_full()


def test_stats_counters():
    sel = TopKSelector.from_iterable(2, [1, 5, 3, 0, 7])
    stats = sel.stats()
    assert stats["seen"] == 5
    assert stats["kept"] == 4
    assert stats["evicted"] == 2
    assert stats["discarded"] == 1
    assert stats["count"] == 2
    assert stats["seen"] == stats["kept"] + stats["discarded"]


def test_nan_ranks_below_everything():
    nan = float("nan")
    sel = create(3)
    sel.feed_many([nan, 1.0, float("-inf")])
    snap = sel.snapshot()
    assert snap[:2] == [1.0, float("-inf")]
    assert math.isnan(snap[2])
    sel.feed(0.5)
    assert sel.snapshot() == [1.0, 0.5, float("-inf")]
    sel.feed(nan)
    assert sel.snapshot() == [1.0, 0.5, float("-inf")]


def test_infinity_orders_naturally():
    sel = TopKSelector.from_iterable(2, [1.0, float("inf"), 3.0])
    assert sel.snapshot() == [float("inf"), 3.0]


def test_numpy_array_input():
    sel = TopKSelector.from_iterable(3, np.array([0.5, 2.5, -1.0, 2.0]))
    assert sel.snapshot() == [2.5, 2.0, 0.5]


@pytest.mark.parametrize("k", [1, 2, 5, 17, 200])
def test_matches_brute_force_random(k):
    rng = np.random.default_rng(k)
    values = rng.integers(-20, 20, size=150).tolist()
    sel = create(k)
    for i, v in enumerate(values, start=1):
        sel.feed(v)
        snap = sel.snapshot()
        assert len(snap) <= k
        assert all(a >= b for a, b in zip(snap, snap[1:]))
        assert snap == brute_force(values[:i], k)


def test_top_element_never_decreases():
    rng = np.random.default_rng(7)
    sel = create(4)
    best = None
    for v in rng.normal(size=300):
        sel.feed(float(v))
        top = sel.snapshot()[0]
        if best is not None:
            assert top >= best
        best = top
