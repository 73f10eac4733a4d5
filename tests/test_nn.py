import random
import statistics

import pytest

from tinygrad_scalar.engine import Value
from tinygrad_scalar.nn import MLP, Layer, Module, Neuron


def test_base_module_has_no_parameters():
    assert Module().parameters() == []


def test_neuron_parameters_are_weights_then_bias():
    neuron = Neuron(4, rng=random.Random(1))
    params = neuron.parameters()
    assert len(params) == 5
    assert params[-1] is neuron.bias
    assert params[:-1] == neuron.weights


def test_seeded_neurons_are_reproducible():
    first = Neuron(3, rng=random.Random(7))
    second = Neuron(3, rng=random.Random(7))
    assert [p.data for p in first.parameters()] == [p.data for p in second.parameters()]


def test_weights_are_drawn_around_minus_one():
    neuron = Neuron(4000, rng=random.Random(0))
    weights = [w.data for w in neuron.weights]
    assert statistics.mean(weights) == pytest.approx(-1.0, abs=0.1)
    assert statistics.stdev(weights) == pytest.approx(1.0, abs=0.1)


def test_neuron_rejects_wrong_input_size():
    neuron = Neuron(3, rng=random.Random(0))
    with pytest.raises(ValueError, match="Neuron input size mismatch"):
        neuron([1.0, 2.0])


def test_layer_rejects_wrong_input_size():
    layer = Layer(2, 3, rng=random.Random(0))
    with pytest.raises(ValueError, match="Layer input size mismatch"):
        layer([1.0, 2.0, 3.0])


def test_relu_neuron_output_is_never_negative():
    rng = random.Random(3)
    neuron = Neuron(3, rng=rng)
    for _ in range(50):
        out = neuron([Value(rng.uniform(-5, 5)) for _ in range(3)])
        assert out.data >= 0.0


def test_linear_neuron_with_fixed_weights():
    neuron = Neuron(2, nonlin=False, rng=random.Random(0))
    for weight in neuron.weights:
        weight.data = 1.0
    neuron.bias.data = 0.0
    out = neuron([Value(2.0), Value(3.0)])
    assert out.data == 5.0


def test_linear_neuron_weight_gradient_is_its_input():
    neuron = Neuron(3, nonlin=False, rng=random.Random(5))
    inputs = [Value(0.5), Value(-1.5), Value(2.0)]
    neuron(inputs).backward()
    for weight, x in zip(neuron.weights, inputs):
        assert weight.grad == pytest.approx(x.data)
    assert neuron.bias.grad == pytest.approx(1.0)


def test_neuron_str():
    assert str(Neuron(3, rng=random.Random(0))) == "Neuron:\n  Activation: ReLU\n  Weights:3\n"
    linear = Neuron(2, nonlin=False, rng=random.Random(0))
    assert str(linear) == "Neuron:\n  Activation: Linear\n  Weights:2\n"


def test_layer_shapes_and_str():
    layer = Layer(3, 4, rng=random.Random(2))
    out = layer([1.0, 2.0, 3.0])
    assert len(out) == 4
    assert len(layer.parameters()) == 4 * (3 + 1)
    text = str(layer)
    assert text.startswith("Layer:\n")
    assert text.count("Neuron:") == 4


def test_mlp_shapes_and_str():
    mlp = MLP(3, [4, 4, 1], rng=random.Random(4))
    out = mlp([Value(1.0), Value(-2.0), Value(0.5)])
    assert len(out) == 1
    assert len(mlp.parameters()) == 4 * (3 + 1) + 4 * (4 + 1) + 1 * (4 + 1)
    text = str(mlp)
    assert text.startswith("MLP:\n")
    assert text.count("Layer:") == 3
    assert text.count("Neuron:") == 9


def test_mlp_layers_all_use_relu():
    mlp = MLP(2, [3, 2], rng=random.Random(9))
    assert all(n.nonlin for layer in mlp.layers for n in layer.neurons)


def test_zero_grad_clears_every_parameter():
    mlp = MLP(2, [3, 1], rng=random.Random(11))
    for p in mlp.parameters():
        p.data = abs(p.data) + 0.1
    mlp([Value(1.0), Value(2.0)])[0].backward()
    assert any(p.grad != 0.0 for p in mlp.parameters())
    mlp.zero_grad()
    assert all(p.grad == 0.0 for p in mlp.parameters())


def test_mlp_gradients_match_finite_differences():
    mlp = MLP(2, [3, 2], rng=random.Random(21))
    for p in mlp.parameters():
        p.data = abs(p.data) * 0.5 + 0.1
    inputs = [0.8, -0.3]

    def loss():
        return sum(o.data for o in mlp([Value(x) for x in inputs]))

    outputs = mlp([Value(x) for x in inputs])
    total = outputs[0] + outputs[1]
    total.backward()
    eps = 1e-6
    for p in mlp.parameters():
        original = p.data
        p.data = original + eps
        high = loss()
        p.data = original - eps
        low = loss()
        p.data = original
        assert p.grad == pytest.approx((high - low) / (2 * eps), rel=1e-4, abs=1e-6)