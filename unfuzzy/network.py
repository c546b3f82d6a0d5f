"""Networks of fuzzy logic systems arranged in layers and wired through pins."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol


class _System(Protocol):
    """What a node needs from the fuzzy logic system it wraps."""

    @property
    def input_count(self) -> int: ...

    @property
    def output_count(self) -> int: ...

    def compute(self, inputs: Sequence[float]) -> Sequence[float]: ...


@dataclass(eq=False)
class Pin:
    """A terminal holding a value; an input pin may be wired to an output pin."""

    value: float = 0.0
    contact: Pin | None = None


class Node:
    """A fuzzy logic system with one pin per input and per output variable."""

    def __init__(self, system: _System) -> None:
        self.system = system
        self.inputs: list[Pin] = [Pin() for _ in range(system.input_count)]
        self.outputs: list[Pin] = [Pin() for _ in range(system.output_count)]

    def update_inputs(self) -> None:
        """Copy into each wired input pin the value of the output pin it is wired to."""
        for pin in self.inputs:
            if pin.contact is not None:
                pin.value = pin.contact.value

    def compute(self) -> None:
        """Refresh the inputs, run the system and store its results in the output pins."""
        self.update_inputs()
        results = self.system.compute([pin.value for pin in self.inputs])
        for pin, result in zip(self.outputs, results):
            pin.value = result

    def sync_pins(self) -> None:
        """Add or drop pins so that they match the system's input and output counts."""
        self._resize(self.inputs, self.system.input_count)
        self._resize(self.outputs, self.system.output_count)

    @staticmethod
    def _resize(pins: list[Pin], count: int) -> None:
        while len(pins) < count:
            pins.append(Pin())
        del pins[count:]

    def __repr__(self) -> str:
        return f"Node(inputs={len(self.inputs)}, outputs={len(self.outputs)})"


@dataclass
class Layer:
    """An ordered group of nodes computed together."""

    nodes: list[Node] = field(default_factory=list)


class Network:
    """Layers of nodes; inputs of a layer may only be wired to outputs of the previous one."""

    def __init__(self, name: str = "", description: str = "") -> None:
        self.name = name
        self.description = description
        self.layers: list[Layer] = []

    # lookup ----------------------------------------------------------------

    def has_layer(self, layer: int) -> bool:
        return 0 <= layer < len(self.layers)

    def has_node(self, layer: int, node: int) -> bool:
        return self.has_layer(layer) and 0 <= node < len(self.layers[layer].nodes)

    def has_input_pin(self, layer: int, node: int, pin: int) -> bool:
        return (
            self.has_node(layer, node)
            and 0 <= pin < len(self.layers[layer].nodes[node].inputs)
        )

    def has_output_pin(self, layer: int, node: int, pin: int) -> bool:
        return (
            self.has_node(layer, node)
            and 0 <= pin < len(self.layers[layer].nodes[node].outputs)
        )

    def node(self, layer: int, node: int) -> Node | None:
        """Return the node, or None if there is none at that position."""
        if not self.has_node(layer, node):
            return None
        return self.layers[layer].nodes[node]

    def input_pin(self, layer: int, node: int, pin: int) -> Pin | None:
        if not self.has_input_pin(layer, node, pin):
            return None
        return self.layers[layer].nodes[node].inputs[pin]

    def output_pin(self, layer: int, node: int, pin: int) -> Pin | None:
        if not self.has_output_pin(layer, node, pin):
            return None
        return self.layers[layer].nodes[node].outputs[pin]

    def input_pin_value(self, layer: int, node: int, pin: int) -> float:
        """Value of an input pin, or 0.0 if it does not exist."""
        found = self.input_pin(layer, node, pin)
        return 0.0 if found is None else found.value

    def output_pin_value(self, layer: int, node: int, pin: int) -> float:
        """Value of an output pin, or 0.0 if it does not exist."""
        found = self.output_pin(layer, node, pin)
        return 0.0 if found is None else found.value

    def _positions(self) -> Iterator[tuple[int, int, Node]]:
        for layer_index, layer in enumerate(self.layers):
            for node_index, node in enumerate(layer.nodes):
                yield layer_index, node_index, node

    def locate_input_pin(self, pin: Pin | None) -> tuple[int, int, int] | None:
        """Return (layer, node, pin) of an input pin, or None if it is not in the network."""
        if pin is None:
            return None
        for layer_index, node_index, node in self._positions():
            for pin_index, candidate in enumerate(node.inputs):
                if candidate is pin:
                    return layer_index, node_index, pin_index
        return None

    def locate_output_pin(self, pin: Pin | None) -> tuple[int, int, int] | None:
        """Return (layer, node, pin) of an output pin, or None if it is not in the network."""
        if pin is None:
            return None
        for layer_index, node_index, node in self._positions():
            for pin_index, candidate in enumerate(node.outputs):
                if candidate is pin:
                    return layer_index, node_index, pin_index
        return None

    # wiring ----------------------------------------------------------------

    def connect(
        self,
        layer1: int,
        node1: int,
        pin1: int,
        layer2: int,
        node2: int,
        pin2: int,
    ) -> bool:
        """Wire an output pin of layer1 to an input pin of the next layer; False if not allowed."""
        if layer1 < 0 or layer1 != layer2 - 1:
            return False
        source = self.output_pin(layer1, node1, pin1)
        target = self.input_pin(layer2, node2, pin2)
        if source is None or target is None:
            return False
        target.contact = source
        return True

    def disconnect_output(self, layer: int, node: int, pin: int) -> None:
        """Unwire every input pin wired to this output pin."""
        source = self.output_pin(layer, node, pin)
        if source is None:
            return
        for _, _, other in self._positions():
            for input_pin in other.inputs:
                if input_pin.contact is source:
                    input_pin.contact = None

    def disconnect_node_inputs(self, layer: int, node: int) -> None:
        found = self.node(layer, node)
        if found is None:
            return
        for pin in found.inputs:
            pin.contact = None

    def disconnect_node_outputs(self, layer: int, node: int) -> None:
        found = self.node(layer, node)
        if found is None:
            return
        for pin_index in range(len(found.outputs)):
            self.disconnect_output(layer, node, pin_index)

    # structure -------------------------------------------------------------

    def remove_node(self, layer: int, node: int) -> None:
        """Unwire and remove a node; ignored if it does not exist."""
        if not self.has_node(layer, node):
            return
        self.disconnect_node_inputs(layer, node)
        self.disconnect_node_outputs(layer, node)
        del self.layers[layer].nodes[node]

    def remove_layer(self, layer: int) -> None:
        """Remove a layer and all its nodes; ignored if it does not exist."""
        if not self.has_layer(layer):
            return
        while self.layers[layer].nodes:
            self.remove_node(layer, 0)
        del self.layers[layer]

    def remove_layers(self) -> None:
        while self.layers:
            self.remove_layer(0)

    def add_layer(self) -> None:
        self.layers.append(Layer())

    def add_node(self, layer: int, node: Node) -> None:
        """Append a node to a layer; ignored if the layer does not exist."""
        if not self.has_layer(layer):
            return
        self.layers[layer].nodes.append(node)

    # evaluation ------------------------------------------------------------

    def compute_network(self) -> None:
        """Compute every node, layer by layer."""
        for _, _, node in self._positions():
            node.compute()

    def set_input(self, node: int, pin: int, value: float) -> None:
        """Set an input pin of the first layer; ignored if it does not exist."""
        found = self.input_pin(0, node, pin)
        if found is not None:
            found.value = value

    def input_count(self) -> int:
        """Number of inputs of the network: those of the first layer's systems."""
        if not self.layers:
            return 0
        return sum(node.system.input_count for node in self.layers[0].nodes)

    def output_count(self) -> int:
        """Number of outputs of the network: those of the last layer's systems."""
        if not self.layers:
            return 0
        return sum(node.system.output_count for node in self.layers[-1].nodes)

    def assign_inputs(self, inputs: Sequence[float]) -> None:
        """Spread ``inputs`` over the first layer's input pins, node by node."""
        if not self.layers:
            return
        values = iter(inputs)
        for node_index, node in enumerate(self.layers[0].nodes):
            for pin_index in range(len(node.inputs)):
                try:
                    value = next(values)
                except StopIteration:
                    raise ValueError("not enough input values for the network") from None
                self.set_input(node_index, pin_index, value)

    def read_outputs(self) -> list[float]:
        """Values of the last layer's output pins, node by node."""
        if not self.layers:
            return []
        return [pin.value for node in self.layers[-1].nodes for pin in node.outputs]

    def compute(self, inputs: Sequence[float]) -> list[float]:
        """Evaluate the network for ``inputs`` and return its outputs."""
        self.assign_inputs(inputs)
        self.compute_network()
        return self.read_outputs()

    def __repr__(self) -> str:
        return f"Network(name={self.name!r}, layers={[len(l.nodes) for l in self.layers]!r})"