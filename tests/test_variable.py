import pytest

from unfuzzy.fuzzy_sets import (
    BellSet,
    GammaSet,
    LSet,
    PiSet,
    SSet,
    SingletonSet,
    TriangleSet,
    ZSet,
)
from unfuzzy.variable import Universe, Variable


def _types(variable):
    return [type(s) for s in variable.sets]


def test_default_variable_has_straight_sets():
    v = Variable()
    assert v.name == "---"
    assert v.range_minimum == -1.0
    assert v.range_maximum == 1.0
    assert _types(v) == [LSet, TriangleSet, GammaSet]
    assert [s.name for s in v.sets] == ["Set 1", "Set 2", "Set 3"]


@pytest.mark.parametrize("count", [2, 3, 5, 7])
def test_auto_straight_layout(count):
    v = Variable(count)
    assert v.set_count == count
    assert v.interval_count == (count + 1) * 5
    assert isinstance(v.sets[0], LSet)
    assert isinstance(v.sets[-1], GammaSet)
    assert all(isinstance(s, TriangleSet) for s in v.sets[1:-1])
    assert v.sets[0].minimum == v.range_minimum
    assert v.sets[-1].maximum == v.range_maximum
    centers = [s.height_center() for s in v.sets]
    assert centers == sorted(centers)


def test_auto_curved_layout():
    v = Variable()
    v.auto_curved(4)
    assert _types(v) == [ZSet, BellSet, BellSet, SSet]
    assert v.sets[-1].name == "Set 4"


def test_auto_straight_rejects_zero():
    with pytest.raises(ValueError):
        Variable().auto_straight(0)


def test_short_triangles_peak_on_even_grid():
    v = Variable()
    v.auto_straight_short(5)
    peaks = [s.first_cut for s in v.sets[1:-1]]
    steps = [b - a for a, b in zip(peaks, peaks[1:])]
    assert steps == pytest.approx([steps[0]] * len(steps))
    for s in v.sets[1:-1]:
        assert s.membership(s.first_cut) == pytest.approx(1.0)
    assert v.sets[0].membership(v.range_minimum) == 1.0
    assert v.sets[-1].maximum == v.range_maximum


def test_short_curved_types_and_noop_below_two():
    v = Variable()
    v.auto_curved_short(3)
    assert _types(v) == [ZSet, BellSet, SSet]
    v.auto_curved_short(1)
    assert _types(v) == [ZSet, BellSet, SSet]


def test_membership_delegates_to_set():
    v = Variable()
    middle = v.sets[1]
    assert v.membership(1, middle.first_cut) == middle.membership(middle.first_cut)


def test_add_remove_clear_sets():
    v = Variable()
    v.add_set(SingletonSet("peak", 0.0, 0.2))
    assert v.set_count == 4
    v.remove_set(0)
    assert isinstance(v.sets[0], TriangleSet)
    with pytest.raises(IndexError):
        v.remove_set(10)
    v.clear_sets()
    assert v.sets == []


def test_adjust_rescales_and_round_trips():
    v = Variable()
    before = [s.key_points() for s in v.sets]
    v.adjust(0.0, 10.0)
    assert (v.range_minimum, v.range_maximum) == (0.0, 10.0)
    assert v.sets[0].minimum == 0.0
    assert v.sets[-1].maximum == 10.0
    v.adjust(-1.0, 1.0)
    after = [s.key_points() for s in v.sets]
    for b, a in zip(before, after):
        assert a == pytest.approx(b)


def test_adjust_ignores_empty_range():
    v = Variable()
    before = [s.key_points() for s in v.sets]
    v.adjust(2.0, 2.0)
    assert (v.range_minimum, v.range_maximum) == (-1.0, 1.0)
    assert [s.key_points() for s in v.sets] == before


def test_copy_from_reproduces_sets():
    source = Variable(4, name="speed")
    source.adjust(0.0, 50.0)
    source.add_set(PiSet("plateau", 10.0, 20.0, 30.0, 40.0))
    source.add_set(SingletonSet("spot", 25.0, 2.0))
    copy = Variable()
    copy.copy_from(source)
    assert copy.name == "speed"
    assert (copy.range_minimum, copy.range_maximum) == (0.0, 50.0)
    assert copy.interval_count == source.interval_count
    assert _types(copy) == _types(source)
    for a, b in zip(copy.sets, source.sets):
        assert a.name == b.name
        assert a.key_points() == pytest.approx(b.key_points())
    assert copy.sets[0] is not source.sets[0]


def test_interval_width():
    v = Variable()
    assert v.interval * v.interval_count == pytest.approx(v.range_maximum - v.range_minimum)


def test_universe_membership_and_counts():
    u = Universe()
    u.add_variable(Variable(3))
    u.add_variable(Variable(5))
    assert len(u) == 2
    assert u.set_count(1) == 5
    x = u[1].sets[2].first_cut
    assert u.membership(1, 2, x) == u[1].membership(2, x)


def test_universe_remove_and_clear():
    u = Universe()
    u.add_variable(Variable(2))
    u.add_variable(Variable(4))
    u.remove_variable(0)
    assert u.set_count(0) == 4
    with pytest.raises(IndexError):
        u.remove_variable(3)
    u.clear()
    assert len(u) == 0


def test_universe_copy_is_independent():
    u = Universe()
    u.add_variable(Variable(3, name="a"))
    u.add_variable(Variable(4, name="b"))
    copy = Universe()
    copy.add_variable(Variable())
    copy.copy_from(u)
    assert [v.name for v in copy] == ["a", "b"]
    assert [v.set_count for v in copy] == [3, 4]
    copy[0].adjust(0.0, 5.0)
    assert u[0].range_maximum == 1.0
    assert u[0].sets[0] is not copy[0].sets[0]