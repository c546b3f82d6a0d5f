import pytest

from unfuzzy.rule import Rule


def test_new_rule_shape():
    rule = Rule(3, 2)
    assert rule.input_count == 3
    assert rule.output_count == 2
    assert rule.antecedent == [0, 0, 0]
    assert rule.modifiers == [1.0, 1.0, 1.0]
    assert rule.consequent == [0, 0]


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        Rule(-1, 1)
    with pytest.raises(ValueError):
        Rule(1, -1)


def test_add_input_appends_defaults_and_keeps_existing():
    rule = Rule(2, 1)
    rule.antecedent[:] = [4, 5]
    rule.modifiers[:] = [2.0, 0.5]
    rule.add_input()
    assert rule.antecedent == [4, 5, 0]
    assert rule.modifiers == [2.0, 0.5, 1.0]
    assert rule.input_count == 3


def test_add_output_appends_zero():
    rule = Rule(1, 1)
    rule.consequent[0] = 7
    rule.add_output()
    assert rule.consequent == [7, 0]


def test_remove_input_drops_selected_entry():
    rule = Rule(3, 1)
    rule.antecedent[:] = [1, 2, 3]
    rule.modifiers[:] = [0.5, 1.5, 2.5]
    rule.remove_input(1)
    assert rule.antecedent == [1, 3]
    assert rule.modifiers == [0.5, 2.5]


def test_remove_output_drops_selected_entry():
    rule = Rule(1, 3)
    rule.consequent[:] = [6, 7, 8]
    rule.remove_output(2)
    assert rule.consequent == [6, 7]


def test_remove_out_of_range():
    rule = Rule(1, 1)
    with pytest.raises(IndexError):
        rule.remove_input(1)
    with pytest.raises(IndexError):
        rule.remove_output(-1)


def test_add_then_remove_round_trip():
    rule = Rule(2, 2)
    rule.antecedent[:] = [1, 2]
    rule.consequent[:] = [3, 4]
    before = Rule(2, 2)
    before.antecedent[:] = [1, 2]
    before.consequent[:] = [3, 4]
    rule.add_input()
    rule.add_output()
    rule.remove_input(2)
    rule.remove_output(2)
    assert rule == before


def test_equality_considers_certainty():
    first = Rule(1, 1)
    second = Rule(1, 1)
    assert first == second
    second.certainty = 0.5
    assert not (first == second)