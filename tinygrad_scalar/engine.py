"""Scalar values that record how they were computed and can backpropagate."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

Operand = "Value | float | int"


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def _pow(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` with IEEE results instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0.0:
            # zero raised to a negative power
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _as_value(x: Value | float | int) -> Value:
    return x if isinstance(x, Value) else Value(x)


class Value:
    """A scalar node in a computation graph, holding its data and gradient."""

    def __init__(
        self,
        data: float,
        children: Iterable[Value] = (),
        op: str = " ",
    ) -> None:
        self.data = float(data)
        self.grad = 0.0
        # unique children, kept in the order they were given
        self.children: tuple[Value, ...] = tuple(dict.fromkeys(children))
        self.op = op
        self._backward: Callable[[], None] | None = None

    def __add__(self, other: Value | float | int) -> Value:
        other = _as_value(other)
        out = Value(self.data + other.data, (self, other), "+")

        def backward() -> None:
            self.grad += out.grad
            other.grad += out.grad

        out._backward = backward
        return out

    def __radd__(self, other: float | int) -> Value:
        return _as_value(other) + self

    def __mul__(self, other: Value | float | int) -> Value:
        other = _as_value(other)
        out = Value(self.data * other.data, (self, other), "*")

        def backward() -> None:
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = backward
        return out

    def __rmul__(self, other: float | int) -> Value:
        return _as_value(other) * self

    def __neg__(self) -> Value:
        return self * Value(-1.0)

    def __sub__(self, other: Value | float | int) -> Value:
        return self + (-_as_value(other))

    def __rsub__(self, other: float | int) -> Value:
        return _as_value(other) - self

    def __truediv__(self, other: Value | float | int) -> Value:
        return self * (_as_value(other) ** Value(-1.0))

    def __rtruediv__(self, other: float | int) -> Value:
        return _as_value(other) / self

    def __pow__(self, other: Value | float | int) -> Value:
        exponent = _as_value(other)
        out = Value(_pow(self.data, exponent.data), (self, exponent), "^")

        def backward() -> None:
            self.grad += (
                exponent.data * _pow(self.data, exponent.data - 1) * out.grad
            )

        out._backward = backward
        return out

    def relu(self) -> Value:
        """Rectified linear unit: ``max(data, 0)``."""
        out = Value(max(self.data, 0.0), (self,), "ReLU")

        def backward() -> None:
            self.grad += (1.0 if self.data > 0 else 0.0) * out.grad

        out._backward = backward
        return out

    def run_backward_step(self) -> None:
        """Push this node's gradient into its children, if it has a rule for it."""
        if self._backward is not None:
            self._backward()
            logger.debug("%s", self)
        else:
            logger.debug("%s, function is not set.", self)

    def topological_order(self) -> list[Value]:
        """Every node reachable from this one, each before all of its children."""
        order: list[Value] = []
        visited: set[Value] = set()
        stack: list[tuple[Value, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                order.append(node)
                continue
            if node in visited:
                continue
            visited.add(node)
            stack.append((node, True))
            stack.extend(
                (child, False) for child in reversed(node.children) if child not in visited
            )
        order.reverse()
        return order

    def backward(self) -> None:
        """Backpropagate from this node, seeding its gradient with 1."""
        order = self.topological_order()
        logger.debug("Topo size: %d", len(order))
        self.grad = 1.0
        for node in order:
            node.run_backward_step()

    def __str__(self) -> str:
        return f"Value({self.data:f}, {self.grad:f}, {self.op})"

    def __repr__(self) -> str:
        return str(self)


def relu(value: Value | float | int) -> Value:
    """Rectified linear unit of ``value``."""
    return _as_value(value).relu()