"""Linguistic variables and the universes of discourse that group them."""

from __future__ import annotations

from collections.abc import Iterator

from .fuzzy_sets import (
    BellSet,
    FuzzySet,
    GammaSet,
    LSet,
    SSet,
    TriangleSet,
    ZSet,
    make_set,
)


def _label(number: int) -> str:
    return f"Set {number}"


class Variable:
    """A named variable over the range [range_minimum, range_maximum] with its linguistic values."""

    def __init__(self, set_count: int = 3, name: str = "---") -> None:
        self.name = name
        self.sets: list[FuzzySet] = []
        self.interval_count = 200
        self.range_minimum = -1.0
        self.range_maximum = 1.0
        self.auto_straight(set_count)

    @property
    def set_count(self) -> int:
        return len(self.sets)

    @property
    def interval(self) -> float:
        """Width of one evaluation interval over the range."""
        return (self.range_maximum - self.range_minimum) / self.interval_count

    def membership(self, index: int, x: float) -> float:
        """Membership of ``x`` in the set at ``index``."""
        return self.sets[index].membership(x)

    def add_set(self, fuzzy_set: FuzzySet) -> None:
        """Append a linguistic value."""
        self.sets.append(fuzzy_set)

    def remove_set(self, index: int) -> None:
        """Remove the linguistic value at ``index``."""
        if not 0 <= index < len(self.sets):
            raise IndexError(f"set index {index} out of range")
        del self.sets[index]

    def clear_sets(self) -> None:
        """Remove every linguistic value."""
        self.sets.clear()

    def _auto_wide(self, count: int, first, middle, last) -> None:
        if count < 1:
            raise ValueError("at least one set is needed")
        self.clear_sets()
        low, high = self.range_minimum, self.range_maximum
        dx = (high - low) / (count + 1)
        self.interval_count = (count + 1) * 5
        self.add_set(first(_label(1), low, low + dx, low + 2 * dx))
        for i in range(1, count - 1):
            self.add_set(
                middle(_label(i + 1), low + i * dx, low + (i + 1) * dx, low + (i + 2) * dx)
            )
        self.add_set(last(_label(count), high - 2 * dx, high - dx, high))

    def _auto_short(self, count: int, first, middle, last) -> None:
        if count < 2:
            return
        self.clear_sets()
        low, high = self.range_minimum, self.range_maximum
        dx = (high - low) / (count - 1)
        self.interval_count = (count + 1) * 5
        self.add_set(first(_label(1), low, low, low + dx))
        for i in range(1, count - 1):
            self.add_set(
                middle(_label(i + 1), low + (i - 1) * dx, low + i * dx, low + (i + 1) * dx)
            )
        self.add_set(last(_label(count), high - dx, high, high))

    def auto_straight(self, count: int) -> None:
        """Replace the sets with an L set, ``count - 2`` triangles and a Gamma set."""
        self._auto_wide(count, LSet, TriangleSet, GammaSet)

    def auto_curved(self, count: int) -> None:
        """Replace the sets with a Z set, ``count - 2`` bells and an S set."""
        self._auto_wide(count, ZSet, BellSet, SSet)

    def auto_straight_short(self, count: int) -> None:
        """Like :meth:`auto_straight`, with sets peaking at the range ends; no-op below 2."""
        self._auto_short(count, LSet, TriangleSet, GammaSet)

    def auto_curved_short(self, count: int) -> None:
        """Like :meth:`auto_curved`, with sets peaking at the range ends; no-op below 2."""
        self._auto_short(count, ZSet, BellSet, SSet)

    def adjust(self, minimum: float, maximum: float) -> None:
        """Move the range to [minimum, maximum], rescaling every set; ignored if empty."""
        if maximum <= minimum:
            return
        old_min, old_max = self.range_minimum, self.range_maximum
        if minimum != old_min or maximum != old_max:
            scale = (maximum - minimum) / (old_max - old_min)
            for fuzzy_set in self.sets:
                new_min = minimum + (fuzzy_set.minimum - old_min) * scale
                new_max = minimum + (fuzzy_set.maximum - old_min) * scale
                fuzzy_set.adjust(new_min, new_max)
        self.range_minimum = float(minimum)
        self.range_maximum = float(maximum)

    def _rebuild(self, other_set: FuzzySet) -> FuzzySet:
        p = other_set.key_points()
        name = other_set.name
        low, high = self.range_minimum, self.range_maximum
        identifier = other_set.identifier
        if identifier in (0, 4):
            return make_set(identifier, name, [low, p[0], p[1]])
        if identifier in (1, 5):
            return make_set(identifier, name, p[:3])
        if identifier in (2, 6):
            return make_set(identifier, name, p[:4])
        if identifier in (3, 7):
            return make_set(identifier, name, [p[0], p[1], high])
        if identifier == 8:
            return make_set(8, name, [0.5 * (p[0] + p[1]), p[1] - p[0]])
        return TriangleSet(name, low, p[0], p[1])

    def copy_from(self, other: Variable) -> None:
        """Make this variable an independent copy of ``other``."""
        self.name = other.name
        self.adjust(other.range_minimum, other.range_maximum)
        self.range_minimum = other.range_minimum
        self.range_maximum = other.range_maximum
        self.interval_count = other.interval_count
        self.sets = [self._rebuild(s) for s in other.sets]

    def __repr__(self) -> str:
        return (
            f"Variable(name={self.name!r}, range=({self.range_minimum!r}, "
            f"{self.range_maximum!r}), sets={self.sets!r})"
        )


class Universe:
    """An ordered collection of variables (all inputs or all outputs of a system)."""

    def __init__(self) -> None:
        self.variables: list[Variable] = []

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.variables)

    def __getitem__(self, index: int) -> Variable:
        return self.variables[index]

    def add_variable(self, variable: Variable) -> None:
        """Append a variable."""
        self.variables.append(variable)

    def remove_variable(self, index: int) -> None:
        """Remove the variable at ``index``."""
        if not 0 <= index < len(self.variables):
            raise IndexError(f"variable index {index} out of range")
        del self.variables[index]

    def clear(self) -> None:
        """Remove every variable."""
        self.variables.clear()

    def membership(self, variable_index: int, set_index: int, x: float) -> float:
        """Membership of ``x`` in a set of one variable."""
        return self.variables[variable_index].membership(set_index, x)

    def set_count(self, variable_index: int) -> int:
        """Number of linguistic values of a variable."""
        return self.variables[variable_index].set_count

    def copy_from(self, other: Universe) -> None:
        """Replace the variables with independent copies of ``other``'s."""
        self.clear()
        for source in other.variables:
            variable = Variable()
            variable.copy_from(source)
            self.add_variable(variable)