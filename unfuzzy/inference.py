"""Inference engine: rule base, fuzzy operators and rule-base construction and training."""

from __future__ import annotations

import copy
import itertools
import math
from collections.abc import Sequence

from .implications import Implication, MinimumImplication
from .norms import Maximum, Minimum, Norm
from .rule import Rule
from .variable import Universe, Variable

_BASE_LABEL = "Set base"


def complete_rule_count(universe: Universe) -> int:
    """Number of rules in a complete rule base: the product of each variable's set count."""
    return math.prod(variable.set_count for variable in universe)


def _clamp(value: float, variable: Variable) -> float:
    if value > variable.range_maximum:
        value = variable.range_maximum
    if value < variable.range_minimum:
        value = variable.range_minimum
    return value


def _best_set(variable: Variable, value: float) -> tuple[int | None, float]:
    """Index of the first set with the highest positive membership, and that membership."""
    best_index: int | None = None
    best = 0.0
    for index, fuzzy_set in enumerate(variable.sets):
        degree = fuzzy_set.membership(value)
        if best < degree:
            best = degree
            best_index = index
    return best_index, best


class InferenceEngine:
    """Holds the rule base relating an input universe to an output universe.

    With no ``rule_count`` the engine starts with a complete rule base, one rule
    for every combination of input linguistic values.
    """

    def __init__(
        self,
        inputs: Universe,
        outputs: Universe,
        rule_count: int | None = None,
    ) -> None:
        self.inputs = inputs
        self.outputs = outputs
        self.input_count = len(inputs)
        self.output_count = len(outputs)
        if rule_count is None:
            rule_count = complete_rule_count(inputs)
        if rule_count < 0:
            raise ValueError("rule count must not be negative")
        self.rules: list[Rule] = [
            Rule(self.input_count, self.output_count) for _ in range(rule_count)
        ]
        self.implication: Implication = MinimumImplication()
        self.and_: Norm = Minimum()
        self.min_composition: Norm = Minimum()
        self.max_composition: Norm = Maximum()

    @property
    def rule_count(self) -> int:
        return len(self.rules)

    # rule base -----------------------------------------------------------

    def rule(self, index: int) -> Rule:
        """Return the rule at ``index``."""
        if not 0 <= index < len(self.rules):
            raise IndexError(f"rule index {index} out of range")
        return self.rules[index]

    def add_rule(self, rule: Rule) -> None:
        """Append a rule to the base."""
        self.rules.append(rule)

    def remove_rule(self, index: int) -> None:
        """Remove the rule at ``index``."""
        if not 0 <= index < len(self.rules):
            raise IndexError(f"rule index {index} out of range")
        del self.rules[index]

    def add_input(self) -> None:
        """Extend every rule with a new input."""
        for rule in self.rules:
            rule.add_input()
        self.input_count += 1

    def add_output(self) -> None:
        """Extend every rule with a new output."""
        for rule in self.rules:
            rule.add_output()
        self.output_count += 1

    def remove_input(self, index: int) -> None:
        """Drop input ``index`` from every rule."""
        for rule in self.rules:
            rule.remove_input(index)
        self.input_count -= 1

    def remove_output(self, index: int) -> None:
        """Drop output ``index`` from every rule."""
        for rule in self.rules:
            rule.remove_output(index)
        self.output_count -= 1

    def clear(self) -> None:
        """Reset every modifier to 1.0 and every consequent to set 0."""
        for rule in self.rules:
            for j in range(self.input_count):
                rule.modifiers[j] = 1.0
            for i in range(self.output_count):
                rule.consequent[i] = 0

    # memberships ---------------------------------------------------------

    def antecedent_membership(self, rule_index: int, inputs: Sequence[float]) -> float:
        """Degree to which ``inputs`` satisfy the antecedent of a rule."""
        if self.input_count < 1:
            raise ValueError("the engine has no inputs")
        rule = self.rule(rule_index)
        degree = self.inputs.membership(0, rule.antecedent[0], inputs[0])
        if rule.modifiers[0] > 0.0:
            result = math.pow(degree, rule.modifiers[0])
        else:
            result = 1.0
        for j in range(1, self.input_count):
            degree = self.inputs.membership(j, rule.antecedent[j], inputs[j])
            if rule.modifiers[j] != 0:
                degree = math.pow(degree, rule.modifiers[0])
            else:
                degree = 1.0
            result = self.and_.operate(result, degree)
        return result

    def consequent_membership(self, output: int, rule_index: int, value: float) -> float:
        """Membership of ``value`` in the consequent set of a rule for one output."""
        set_index = self.rule(rule_index).consequent[output]
        return self.outputs.membership(output, set_index, value)

    def implication_membership(
        self,
        output: int,
        rule_index: int,
        inputs: Sequence[float],
        value: float,
    ) -> float:
        """Implication degree of a rule for ``inputs`` and an output ``value``."""
        antecedent = self.antecedent_membership(rule_index, inputs)
        consequent = self.consequent_membership(output, rule_index, value)
        return self.implication.implies(antecedent, consequent)

    # training ------------------------------------------------------------

    def fill_rule(
        self,
        rule: Rule,
        antecedent: Sequence[float],
        consequent: Sequence[float],
    ) -> None:
        """Make ``rule`` pick, for each value, the set it belongs to most, and set its certainty.

        Values outside a variable's range are clamped to it first.
        """
        certainty = 1.0
        for i in range(self.input_count):
            variable = self.inputs[i]
            index, degree = _best_set(variable, _clamp(antecedent[i], variable))
            if index is not None:
                rule.antecedent[i] = index
            certainty *= degree
            rule.modifiers[i] = 1.0
        for i in range(self.output_count):
            variable = self.outputs[i]
            index, degree = _best_set(variable, _clamp(consequent[i], variable))
            if index is not None:
                rule.consequent[i] = index
            certainty *= degree
        rule.certainty = certainty

    def same_antecedent(self, first: Rule, second: Rule) -> bool:
        """True if both rules use the same set for every input."""
        return all(
            first.antecedent[i] == second.antecedent[i] for i in range(self.input_count)
        )

    def train_fixed(self, antecedent: Sequence[float], consequent: Sequence[float]) -> None:
        """Learn one example without changing the linguistic values.

        A rule with the same antecedent is replaced only if the new one is more certain.
        """
        candidate = Rule(self.input_count, self.output_count)
        self.fill_rule(candidate, antecedent, consequent)
        for index, existing in enumerate(self.rules):
            if self.same_antecedent(candidate, existing):
                if candidate.certainty > existing.certainty:
                    self.add_rule(candidate)
                    self.remove_rule(index)
                return
        self.add_rule(candidate)

    @staticmethod
    def _centred_copy(variable: Variable, target: float) -> None:
        template = variable.sets[0]
        points = template.key_points()
        new_set = copy.deepcopy(template)
        new_set.name = f"Set {variable.set_count}"
        delta = target - new_set.height_center()
        for index, point in enumerate(points):
            new_set.set_key_point(index, point + delta)
        variable.add_set(new_set)

    def train_variable(self, antecedent: Sequence[float], consequent: Sequence[float]) -> None:
        """Learn one example by creating new linguistic values centred on it and a rule using them."""
        for i in range(self.input_count):
            self._centred_copy(self.inputs[i], antecedent[i])
        for i in range(self.output_count):
            self._centred_copy(self.outputs[i], consequent[i])
        rule = Rule(self.input_count, self.output_count)
        for i in range(self.input_count):
            rule.antecedent[i] = self.inputs[i].set_count - 1
            rule.modifiers[i] = 1.0
        for i in range(self.output_count):
            rule.consequent[i] = self.outputs[i].set_count - 1
        rule.certainty = 1.0
        self.add_rule(rule)

    def empty_rule_base(self) -> None:
        """Remove every rule."""
        self.rules.clear()

    def reset_for_fixed(self) -> None:
        """Prepare for training with fixed linguistic values."""
        self.empty_rule_base()

    def reset_for_variable(self) -> None:
        """Prepare for training that creates linguistic values: keep only each variable's first set."""
        self.reset_for_fixed()
        variables = [self.inputs[i] for i in range(self.input_count)]
        variables += [self.outputs[i] for i in range(self.output_count)]
        for variable in variables:
            while variable.set_count > 1:
                variable.remove_set(1)
            variable.sets[0].name = _BASE_LABEL

    # rule-base construction ----------------------------------------------

    def fill_inputs_base(self) -> None:
        """Rebuild a complete rule base whose antecedents enumerate every combination.

        The last input varies fastest.
        """
        self.empty_rule_base()
        counts = [self.inputs.set_count(i) for i in range(self.input_count)]
        for combination in itertools.product(*(range(c) for c in counts)):
            rule = Rule(self.input_count, self.output_count)
            rule.antecedent[:] = combination
            self.rules.append(rule)

    def fill_modifiers_base(self) -> None:
        """Set every modifier to 1.0."""
        for rule in self.rules:
            for j in range(self.input_count):
                rule.modifiers[j] = 1.0

    def _factors(self) -> list[float]:
        total = 1.0 + sum(self.inputs.set_count(i) for i in range(self.input_count))
        return [
            (1.0 + sum(rule.antecedent[i] for i in range(self.input_count))) / total
            for rule in self.rules
        ]

    def fill_outputs_increasing(self) -> None:
        """Give every output a consequent that grows with the antecedent indices."""
        for rule, factor in zip(self.rules, self._factors()):
            for i in range(self.output_count):
                rule.consequent[i] = int(factor * self.outputs.set_count(i))

    def fill_outputs_decreasing(self) -> None:
        """Give every output a consequent that shrinks as the antecedent indices grow."""
        for rule, factor in zip(self.rules, self._factors()):
            for i in range(self.output_count):
                count = self.outputs.set_count(i)
                rule.consequent[i] = count - int(factor * count)

    def fill_output_increasing(self, output: int) -> None:
        """Like :meth:`fill_outputs_increasing` for one output only."""
        count = self.outputs.set_count(output)
        for rule, factor in zip(self.rules, self._factors()):
            rule.consequent[output] = int(factor * count)

    def fill_output_decreasing(self, output: int) -> None:
        """Decreasing consequents for one output, kept within its sets."""
        count = self.outputs.set_count(output)
        for rule, factor in zip(self.rules, self._factors()):
            rule.consequent[output] = count - 1 - int(factor * count)

    def fill_output_constant(self, output: int, set_index: int) -> None:
        """Use the same consequent set for one output in every rule."""
        for rule in self.rules:
            rule.consequent[output] = set_index

    def label_removed(self, is_input: bool, variable: int, set_index: int) -> None:
        """Renumber rule references after a linguistic value of a variable was removed.

        References to the removed set fall back to set 0; later sets shift down by one.
        """
        for rule in self.rules:
            labels = rule.antecedent if is_input else rule.consequent
            current = labels[variable]
            if current == set_index:
                labels[variable] = 0
            if current > set_index:
                labels[variable] = current - 1

    def __repr__(self) -> str:
        return (
            f"InferenceEngine(inputs={self.input_count}, outputs={self.output_count}, "
            f"rules={self.rule_count})"
        )