"""Linguistic values: labelled fuzzy sets defined by a membership function and a support."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

_TYPE_NAMES = {
    0: "Tipo L",
    1: "Triángulo",
    2: "Tipo Pi",
    3: "Tipo Gamma",
    4: "Tipo Z",
    5: "Campana",
    6: "PiCampana",
    7: "Tipo S",
    8: "Singlenton",
}


def set_type_name(identifier: int) -> str:
    """Return the display name of the set type with this identifier, or "" if unknown."""
    return _TYPE_NAMES.get(identifier, "")


def _rising_line(x: float, start: float, end: float) -> float:
    """Straight line from 0 at ``start`` to 1 at ``end``; ``start <= x <= end``."""
    if end <= start:
        return 1.0
    return (x - start) / (end - start)


def _rising_curve(x: float, start: float, end: float) -> float:
    """S-shaped curve from 0 at ``start`` to 1 at ``end``, built from two quadratic halves."""
    if end <= start:
        return 1.0
    width = end - start
    if x <= (start + end) / 2.0:
        return 2.0 * ((x - start) / width) ** 2
    return 1.0 - 2.0 * ((x - end) / width) ** 2


class FuzzySet(ABC):
    """A linguistic value: a label and a fuzzy set with support [minimum, maximum]."""

    identifier: int = -1
    _point_attrs: tuple[str, ...] = ()
    _cut_attrs: tuple[str, ...] = ()

    def __init__(self, name: str, minimum: float, maximum: float) -> None:
        self.name = name
        self.minimum = float(minimum)
        self.maximum = float(maximum)

    @property
    def key_point_count(self) -> int:
        """Number of points that can be edited graphically."""
        return len(self._point_attrs)

    @abstractmethod
    def membership(self, x: float) -> float:
        """Return the membership degree of ``x``."""

    @abstractmethod
    def height_center(self) -> float:
        """Return the centre used by height defuzzification."""

    def key_points(self) -> list[float]:
        """Return the editable points, in order."""
        return [getattr(self, attr) for attr in self._point_attrs]

    def set_key_point(self, index: int, x: float) -> None:
        """Replace the editable point at ``index`` with ``x``."""
        if not 0 <= index < len(self._point_attrs):
            raise IndexError(f"key point index {index} out of range")
        setattr(self, self._point_attrs[index], float(x))

    def adjust(self, new_minimum: float, new_maximum: float) -> None:
        """Rescale the set linearly onto a new support."""
        old_width = self.maximum - self.minimum
        if old_width == 0:
            raise ValueError("cannot rescale a set with an empty support")
        scale = (new_maximum - new_minimum) / old_width
        for attr in self._cut_attrs:
            setattr(self, attr, new_minimum + (getattr(self, attr) - self.minimum) * scale)
        self.minimum = float(new_minimum)
        self.maximum = float(new_maximum)

    def type_name(self) -> str:
        """Return the display name of this set's type."""
        return set_type_name(self.identifier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return (
            self.name == other.name
            and self.minimum == other.minimum
            and self.maximum == other.maximum
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, key_points={self.key_points()!r})"


class _OneCut(FuzzySet, ABC):
    _cut_attrs = ("first_cut",)

    def __init__(self, name: str, minimum: float, first_cut: float, maximum: float) -> None:
        super().__init__(name, minimum, maximum)
        self.first_cut = float(first_cut)


class _TwoCuts(FuzzySet, ABC):
    _point_attrs = ("minimum", "first_cut", "second_cut", "maximum")
    _cut_attrs = ("first_cut", "second_cut")

    def __init__(
        self,
        name: str,
        minimum: float,
        first_cut: float,
        second_cut: float,
        maximum: float,
    ) -> None:
        super().__init__(name, minimum, maximum)
        self.first_cut = float(first_cut)
        self.second_cut = float(second_cut)

    def height_center(self) -> float:
        return (self.first_cut + self.second_cut) / 2.0


class LSet(_OneCut):
    """1 up to the first cut, a falling line to the maximum, 0 beyond."""

    identifier = 0
    _point_attrs = ("first_cut", "maximum")

    def membership(self, x):
        if x <= self.first_cut:
            return 1.0
        if x >= self.maximum:
            return 0.0
        return 1.0 - _rising_line(x, self.first_cut, self.maximum)

    def height_center(self):
        return (self.minimum + self.first_cut) / 2.0


class TriangleSet(_OneCut):
    """0 outside the support, rising to 1 at the first cut and falling again."""

    identifier = 1
    _point_attrs = ("minimum", "first_cut", "maximum")

    def membership(self, x):
        if x < self.minimum or x > self.maximum:
            return 0.0
        if x <= self.first_cut:
            return _rising_line(x, self.minimum, self.first_cut)
        return 1.0 - _rising_line(x, self.first_cut, self.maximum)

    def height_center(self):
        return self.first_cut


class PiSet(_TwoCuts):
    """Trapezoid: rising line, plateau of 1 between the cuts, falling line."""

    identifier = 2

    def membership(self, x):
        if x < self.minimum or x > self.maximum:
            return 0.0
        if x < self.first_cut:
            return _rising_line(x, self.minimum, self.first_cut)
        if x <= self.second_cut:
            return 1.0
        return 1.0 - _rising_line(x, self.second_cut, self.maximum)


class GammaSet(_OneCut):
    """0 up to the first cut, a rising line to the maximum, 1 beyond."""

    identifier = 3
    _point_attrs = ("minimum", "first_cut")

    def membership(self, x):
        if x <= self.first_cut:
            return 0.0 if x < self.maximum or self.first_cut < self.maximum else 1.0
        if x >= self.maximum:
            return 1.0
        return _rising_line(x, self.first_cut, self.maximum)

    def height_center(self):
        return (self.first_cut + self.maximum) / 2.0


class ZSet(_OneCut):
    """1 up to the first cut, a falling S-curve to the maximum, 0 beyond."""

    identifier = 4
    _point_attrs = ("first_cut", "maximum")

    def membership(self, x):
        if x <= self.first_cut:
            return 1.0
        if x >= self.maximum:
            return 0.0
        return 1.0 - _rising_curve(x, self.first_cut, self.maximum)

    def height_center(self):
        return (self.minimum + self.first_cut) / 2.0


class BellSet(_OneCut):
    """0 outside the support, an S-curve up to 1 at the first cut and down again."""

    identifier = 5
    _point_attrs = ("minimum", "first_cut", "maximum")

    def membership(self, x):
        if x < self.minimum or x > self.maximum:
            return 0.0
        if x <= self.first_cut:
            return _rising_curve(x, self.minimum, self.first_cut)
        return 1.0 - _rising_curve(x, self.first_cut, self.maximum)

    def height_center(self):
        return self.first_cut


class PiBellSet(_TwoCuts):
    """Rising S-curve, plateau of 1 between the cuts, falling S-curve."""

    identifier = 6

    def membership(self, x):
        if x < self.minimum or x > self.maximum:
            return 0.0
        if x < self.first_cut:
            return _rising_curve(x, self.minimum, self.first_cut)
        if x <= self.second_cut:
            return 1.0
        return 1.0 - _rising_curve(x, self.second_cut, self.maximum)

    def height_center(self):
        return (self.minimum + self.first_cut + self.second_cut) / 2.0


class SSet(_OneCut):
    """0 up to the first cut, a rising S-curve to the maximum, 1 beyond."""

    identifier = 7
    _point_attrs = ("minimum", "first_cut")

    def membership(self, x):
        if x >= self.maximum:
            return 1.0
        if x <= self.first_cut:
            return 0.0
        return _rising_curve(x, self.first_cut, self.maximum)

    def height_center(self):
        return (self.first_cut + self.maximum) / 2.0


class SingletonSet(FuzzySet):
    """A rectangle of height 1 and width ``delta`` centred on ``peak``."""

    identifier = 8
    _point_attrs = ("minimum", "maximum")

    def __init__(self, name: str, peak: float, delta: float) -> None:
        peak = float(peak)
        delta = float(delta)
        super().__init__(name, peak - delta / 2, peak + delta / 2)
        self.peak = peak
        self.delta = delta

    def membership(self, x):
        if x < self.minimum:
            return 0.0
        if x > self.maximum:
            return 0.0
        return 1.0

    def height_center(self):
        return self.peak

    def _recentre(self) -> None:
        self.peak = (self.minimum + self.maximum) / 2
        self.delta = self.maximum - self.minimum

    def set_key_point(self, index, x):
        super().set_key_point(index, x)
        self._recentre()

    def adjust(self, new_minimum, new_maximum):
        self.minimum = float(new_minimum)
        self.maximum = float(new_maximum)
        self._recentre()


_CONSTRUCTORS: dict[int, type[FuzzySet]] = {
    cls.identifier: cls
    for cls in (LSet, TriangleSet, PiSet, GammaSet, ZSet, BellSet, PiBellSet, SSet, SingletonSet)
}


def make_set(identifier: int, name: str, points: Sequence[float]) -> FuzzySet:
    """Build the set of type ``identifier`` from its constructor parameters.

    Sets with one cut take (minimum, first_cut, maximum); sets with two cuts take
    (minimum, first_cut, second_cut, maximum); a singleton takes (peak, delta).
    """
    try:
        cls = _CONSTRUCTORS[identifier]
    except KeyError:
        raise ValueError(f"unknown fuzzy set type {identifier}") from None
    if issubclass(cls, _TwoCuts):
        needed = 4
    elif cls is SingletonSet:
        needed = 2
    else:
        needed = 3
    if len(points) < needed:
        raise ValueError(f"{cls.__name__} needs {needed} points, got {len(points)}")
    return cls(name, *points[:needed])