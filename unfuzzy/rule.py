"""A single rule of the rule base: antecedent labels, modifiers and consequent labels."""

from __future__ import annotations


class Rule:
    """An if-then rule referring to fuzzy sets by their index in each variable.

    ``antecedent[i]`` is the set used for input ``i``, ``modifiers[i]`` the
    exponent (hedge) applied to its membership, and ``consequent[j]`` the set
    used for output ``j``.
    """

    def __init__(self, input_count: int = 0, output_count: int = 0) -> None:
        if input_count < 0 or output_count < 0:
            raise ValueError("input and output counts must not be negative")
        self.antecedent: list[int] = [0] * input_count
        self.modifiers: list[float] = [1.0] * input_count
        self.consequent: list[int] = [0] * output_count
        self.certainty: float = 0.0

    @property
    def input_count(self) -> int:
        return len(self.antecedent)

    @property
    def output_count(self) -> int:
        return len(self.consequent)

    def add_input(self) -> None:
        """Append an input using set 0 with modifier 1.0."""
        self.antecedent.append(0)
        self.modifiers.append(1.0)

    def add_output(self) -> None:
        """Append an output using set 0."""
        self.consequent.append(0)

    def remove_input(self, index: int) -> None:
        """Drop the input at ``index`` together with its modifier."""
        if not 0 <= index < len(self.antecedent):
            raise IndexError(f"input index {index} out of range")
        del self.antecedent[index]
        del self.modifiers[index]

    def remove_output(self, index: int) -> None:
        """Drop the output at ``index``."""
        if not 0 <= index < len(self.consequent):
            raise IndexError(f"output index {index} out of range")
        del self.consequent[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return (
            self.antecedent == other.antecedent
            and self.modifiers == other.modifiers
            and self.consequent == other.consequent
            and self.certainty == other.certainty
        )

    def __repr__(self) -> str:
        return (
            f"Rule(antecedent={self.antecedent!r}, modifiers={self.modifiers!r}, "
            f"consequent={self.consequent!r}, certainty={self.certainty!r})"
        )