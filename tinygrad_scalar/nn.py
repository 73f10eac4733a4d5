"""Neurons, layers and multi-layer perceptrons built from scalar values."""

from __future__ import annotations

import random
from collections.abc import Sequence

from tinygrad_scalar.engine import Value


class Module:
    """Something with trainable parameters."""

    def zero_grad(self) -> None:
        for param in self.parameters():
            param.grad = 0.0

    def parameters(self) -> list[Value]:
        return []


class Neuron(Module):
    """A weighted sum of inputs plus a bias, optionally passed through ReLU."""

    def __init__(
        self,
        nin: int,
        nonlin: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.weights = [Value(rng.gauss(-1.0, 1.0)) for _ in range(nin)]
        self.bias = Value(rng.gauss(-1.0, 1.0))
        self.nin = nin
        self.nonlin = nonlin

    def __call__(self, inputs: Sequence[Value | float]) -> Value:
        if len(inputs) != self.nin:
            raise ValueError("Neuron input size mismatch.")
        out = Value(0.0)
        for weight, x in zip(self.weights, inputs):
            out = out + weight * x
        out = out + self.bias
        return out.relu() if self.nonlin else out

    def parameters(self) -> list[Value]:
        return [*self.weights, self.bias]

    def __str__(self) -> str:
        activation = "ReLU" if self.nonlin else "Linear"
        return f"Neuron:\n  Activation: {activation}\n  Weights:{len(self.weights)}\n"


class Layer(Module):
    """A row of neurons that all see the same inputs."""

    def __init__(
        self,
        nin: int,
        nout: int,
        nonlin: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.neurons = [Neuron(nin, nonlin, rng) for _ in range(nout)]
        self.nin = nin

    def __call__(self, inputs: Sequence[Value | float]) -> list[Value]:
        if len(inputs) != self.nin:
            raise ValueError("Layer input size mismatch.")
        return [neuron(inputs) for neuron in self.neurons]

    def parameters(self) -> list[Value]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def __str__(self) -> str:
        return "Layer:\n" + "".join(str(neuron) for neuron in self.neurons)


class MLP(Module):
    """Layers applied one after another, each feeding the next."""

    def __init__(
        self,
        nin: int,
        nouts: Sequence[int],
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        sizes = [nin, *nouts]
        self.layers = [
            Layer(n_in, n_out, rng=rng) for n_in, n_out in zip(sizes, sizes[1:])
        ]

    def __call__(self, inputs: Sequence[Value | float]) -> list[Value]:
        out = list(inputs)
        for layer in self.layers:
            out = layer(out)
        return out

    def parameters(self) -> list[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __str__(self) -> str:
        return "MLP:\n" + "".join(str(layer) for layer in self.layers)