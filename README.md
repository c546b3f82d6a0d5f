# unfuzzy

Building blocks for fuzzy logic systems, in pure Python with no dependencies.

- `unfuzzy.fuzzy_sets`: linguistic values. `LSet`, `TriangleSet`, `PiSet`, `GammaSet`, `ZSet`,
  `BellSet`, `PiBellSet`, `SSet` and `SingletonSet`. Each one has `membership(x)`, `key_points()`,
  `set_key_point(index, x)`, `adjust(new_minimum, new_maximum)`, `height_center()` and `type_name()`.
  `make_set(identifier, name, points)` builds a set from its numeric type identifier.
- `unfuzzy.norms`: T-norms `Product`, `Minimum`, `BoundedProduct`, `DrasticProduct`, `FamilyTp`,
  `FamilyHp` (Hamacher), `FamilyFp` (Frank), `FamilyYp` (Yager) and `FamilyAp` (Dubois-Prade).
  S-norms `Maximum`, `BoundedSum`, `DrasticSum` and `FamilySp` (Sugeno). Every norm has
  `operate(x, y)` and `to_s_norm()`, which returns 1.0 for a T-norm and 0.0 for an S-norm.
  `code_c()` and `code_cpp()` return the matching C/C++ snippet text. `norm_type_name(identifier)`
  returns a norm's display name.
- `unfuzzy.implications`: `ProductImplication`, `MinimumImplication`, `KleeneDienesImplication`,
  `LukasiewiczImplication`, `ZadehImplication`, `StochasticImplication`, `GoguenImplication`,
  `GodelImplication` and `SharpImplication`. Each has `implies(x, y)` and `default()`. `default()`
  gives the value a rule yields when it does not fire: 0 for the T-norm kinds and 1 for the if-then
  kinds.
- `unfuzzy.variable`: `Variable` is a named range holding a list of sets. It can partition its range
  automatically with `auto_straight`, `auto_curved`, `auto_straight_short` and `auto_curved_short`.
  It can be rescaled with `adjust(minimum, maximum)` and copied with `copy_from`. `Universe` is an
  ordered list of variables.
- `unfuzzy.rule`: `Rule` stores antecedent set indices, modifiers (exponents), consequent set indices
  and a certainty.
- `unfuzzy.inference`: `InferenceEngine` holds a rule base between an input and an output universe,
  together with its `implication`, `and_`, `min_composition` and `max_composition` operators. It
  covers:
  - antecedent, consequent and implication memberships;
  - automatic filling of the rule base (`fill_inputs_base`, `fill_outputs_increasing`,
    `fill_outputs_decreasing`, …);
  - training from examples with fixed linguistic values (`train_fixed`) or growing ones
    (`train_variable`).

  `complete_rule_count(universe)` gives the size of a complete rule base.
- `unfuzzy.network`: `Network` is made of `Layer`s of `Node`s joined through `Pin`s. An input pin may
  only be wired to an output pin of the previous layer. A node wraps any object that provides
  `input_count`, `output_count` and `compute(inputs)`.

## Installation

```
pip install unfuzzy
```

## Examples

Membership degrees and norms:

```python
from unfuzzy.fuzzy_sets import TriangleSet
from unfuzzy.norms import Minimum, FamilySp

warm = TriangleSet("Warm", 10.0, 20.0, 30.0)
print(warm.membership(15.0))            # 0.5
print(Minimum().operate(0.3, 0.7))      # 0.3
print(FamilySp(1.0).operate(0.2, 0.3))  # about 0.56
```

A variable split into three sets, and a rule base over it:

```python
from unfuzzy.variable import Variable, Universe
from unfuzzy.inference import InferenceEngine

speed = Variable()
speed.adjust(0.0, 100.0)
speed.auto_straight_short(3)
print([s.name for s in speed.sets])     # ['Set 1', 'Set 2', 'Set 3']

inputs = Universe()
inputs.add_variable(speed)
outputs = Universe()
outputs.add_variable(Variable(name="Power"))

engine = InferenceEngine(inputs, outputs)   # complete rule base: 3 rules
engine.fill_inputs_base()
engine.fill_outputs_increasing()
print([rule.consequent for rule in engine.rules])   # [[0], [1], [2]]
print(engine.antecedent_membership(0, [10.0]))      # 0.8
```

Learning from an example:

```python
engine.reset_for_fixed()
engine.train_fixed([60.0], [0.5])
print(engine.rules[0].antecedent, engine.rules[0].certainty)
```

A two-layer network of nodes:

```python
from unfuzzy.network import Network, Node

class Doubler:
    input_count = 1
    output_count = 1

    def compute(self, inputs):
        return [2 * inputs[0]]

net = Network("demo")
net.add_layer()
net.add_layer()
net.add_node(0, Node(Doubler()))
net.add_node(1, Node(Doubler()))
net.connect(0, 0, 0, 1, 0, 0)
print(net.compute([1.5]))   # [6.0]
```

## What this package does not do

This package has no complete fuzzy logic system object: there is no defuzzification step and no
input fuzzifier, so nothing turns crisp inputs into crisp outputs on its own. Network nodes
therefore need a system object that you supply. The package has no file storage for systems or
networks, and no writer that produces whole C or C++ programs. Norms and implications only return
their own snippet text. There is no command-line tool and no graphical editor.

## Running the tests

```
pip install unfuzzy[test]
pytest
```