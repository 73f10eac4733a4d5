# tinygrad_scalar

A small reverse-mode automatic differentiation engine that works on scalar
values, together with a minimal neural network library (neurons, layers and
multi-layer perceptrons) built on top of it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The autograd engine

`tinygrad_scalar.engine.Value` wraps a single float (`data`), its gradient
(`grad`, starting at 0), the values it was computed from (`children`) and the
name of the operation that produced it (`op`). Calling `backward()` on a
result sets its own gradient to 1 and adds to the gradient of every value
that fed into it.

```python
from tinygrad_scalar.engine import Value, relu

a = Value(2.0)
b = Value(-3.0)
c = a * b + a ** 2
d = relu(c) + c / b

d.backward()
print(a.grad, b.grad)
```

Supported operations are `+`, `-`, `*`, `/`, `**`, unary negation and
`relu` (available both as the function `relu(value)` and the method
`Value.relu()`). Plain numbers mix freely with `Value` objects on either side
of an operator. For `**`, gradients flow to the base only; the exponent
receives none. Operations that would overflow or be undefined give `inf` or
`nan` rather than raising.

Gradients accumulate, so reset them before each new backward pass.

`topological_order()` returns every node reachable from a value, each one
before the nodes it was computed from; `backward()` walks this list and calls
`run_backward_step()` on each node. Each step, and the size of the graph, is
logged at DEBUG level on the `tinygrad_scalar.engine` logger. `str(value)`
gives `Value(<data>, <grad>, <op>)`.

## Neural networks

`tinygrad_scalar.nn` provides `Neuron`, `Layer` and `MLP`, all subclasses of
`Module`. Each one can be called on a list of inputs (`Value` objects or plain
numbers), exposes its trainable values through `parameters()`, and clears
their gradients with `zero_grad()`.

- `Neuron(nin, nonlin=True, rng=None)` computes a weighted sum of its inputs
  plus a bias, passed through ReLU when `nonlin` is true.
- `Layer(nin, nout, nonlin=True, rng=None)` holds `nout` neurons that all see
  the same inputs and returns a list of their outputs.
- `MLP(nin, nouts, rng=None)` chains one ReLU layer per entry of `nouts`.

Weights and biases are drawn from a normal distribution with mean -1 and
standard deviation 1. A `random.Random` instance can be passed as `rng` so
that the initial weights are reproducible.

```python
import random

from tinygrad_scalar.engine import Value
from tinygrad_scalar.nn import MLP

model = MLP(3, [4, 4, 1], rng=random.Random(0))
inputs = [Value(x) for x in (2.0, 3.0, -1.0)]

(output,) = model(inputs)
loss = (output - 1.0) ** 2

model.zero_grad()
loss.backward()
for p in model.parameters():
    p.data -= 0.01 * p.grad
```

If an input list passed to a `Neuron` or `Layer` (and so to an `MLP`) has the
wrong length, `ValueError` is raised. `str(model)` describes how the network
is structured.

## What it does not do

There is no command-line program, no training loop, optimiser or loss
functions, and no way to save or load a model. Updating parameters, as in the
example above, is left to the caller.