import math

import numpy as np
import pytest

from forward_autodiff.expression_tree.builder import (
    identity, constant, power, sqrt, log, exp, sin, add, divide
)
from forward_autodiff.expression_tree.core.node import (
    Node, IdentityNode, ConstantNode, PowerNode, UnaryOpNode, BinaryOpNode, AddNode
)
from forward_autodiff.expression_tree.core.operators import NodeType, OpType

POINTS = [-3.5, -1.0, -0.25, 0.0, 0.3, 1.0, 2.5, 7.0]
POSITIVE_POINTS = [0.01, 0.3, 1.0, 2.5, 7.0, 120.0]


@pytest.mark.parametrize("x", POINTS)
def test_identity_value_and_derivative(x):
    node = identity()
    assert node.evaluate(x) == x
    assert node.derivative(x) == 1.0


@pytest.mark.parametrize("x", POINTS)
@pytest.mark.parametrize("c", [-2.0, 0.0, 3.75])
def test_constant_ignores_input(x, c):
    node = constant(c)
    assert node.evaluate(x) == c
    assert node.derivative(x) == 0.0


@pytest.mark.parametrize("n", [1, 2, 3, 5])
@pytest.mark.parametrize("x", POINTS)
def test_power_of_identity(n, x):
    node = power(identity(), n)
    assert node.evaluate(x) == pytest.approx(x ** n)
    assert node.derivative(x) == pytest.approx(n * x ** (n - 1))


def test_power_uses_chain_rule():
    # (3x + 1)^2 built as (x + x + x + 1)^2 -> derivative 2 * (3x + 1) * 3
    inner = add(add(add(identity(), identity()), identity()), constant(1.0))
    node = power(inner, 2)
    assert node.evaluate(2.0) == 49.0
    assert node.derivative(2.0) == 42.0


@pytest.mark.parametrize("x", [-4.0, 0.0, 1.5, 1e3])
def test_power_zero_exponent_is_one_with_zero_derivative(x):
    node = power(sin(identity()), 0)
    assert node.evaluate(x) == 1.0
    assert node.derivative(x) == 0.0


def test_power_zero_exponent_ignores_non_finite_base():
    node = power(log(identity()), 0)
    assert node.evaluate(-1.0) == 1.0


def test_negative_exponent_runs_empty_product():
    # No reciprocal: value stays 1 and the derivative is n * 1 * g'
    node = power(identity(), -2)
    assert node.evaluate(3.0) == 1.0
    assert node.derivative(3.0) == -2.0


@pytest.mark.parametrize("x", POSITIVE_POINTS)
def test_sqrt(x):
    node = sqrt(identity())
    assert node.evaluate(x) == pytest.approx(math.sqrt(x))
    assert node.derivative(x) == pytest.approx(1.0 / (2.0 * math.sqrt(x)))


def test_sqrt_non_positive_is_non_finite():
    node = sqrt(identity())
    assert np.isnan(node.evaluate(-1.0))
    assert np.isnan(node.derivative(-1.0))
    assert node.evaluate(0.0) == 0.0
    assert np.isinf(node.derivative(0.0))


@pytest.mark.parametrize("x", POSITIVE_POINTS)
def test_log_derivative_is_reciprocal(x):
    node = log(identity())
    assert node.evaluate(x) == pytest.approx(math.log(x))
    assert node.derivative(x) == pytest.approx(1.0 / x)


@pytest.mark.parametrize("x", [0.0, -0.5, -10.0])
def test_log_non_positive_returns_non_finite(x):
    node = log(identity())
    assert not np.isfinite(node.evaluate(x))
    assert node.evaluate(0.0) == -np.inf


def test_log_derivative_at_zero_is_infinite():
    assert np.isinf(log(identity()).derivative(0.0))


@pytest.mark.parametrize("x", POINTS)
def test_exp_derivative_is_exp(x):
    node = exp(identity())
    assert node.evaluate(x) == pytest.approx(math.exp(x))
    assert node.derivative(x) == pytest.approx(math.exp(x))


def test_exp_overflow_propagates_infinity():
    node = exp(identity())
    assert node.evaluate(1000.0) == np.inf
    assert node.derivative(1000.0) == np.inf


@pytest.mark.parametrize("x", POINTS)
def test_sin_derivative_is_cos(x):
    node = sin(identity())
    assert node.evaluate(x) == pytest.approx(math.sin(x))
    assert node.derivative(x) == pytest.approx(math.cos(x))


def test_sin_of_infinity_is_nan():
    node = sin(exp(identity()))
    assert np.isnan(node.evaluate(1000.0))
    assert np.isnan(node.derivative(1000.0))


@pytest.mark.parametrize("x", POINTS)
def test_add(x):
    node = add(sin(identity()), power(identity(), 2))
    assert node.evaluate(x) == pytest.approx(math.sin(x) + x * x)
    assert node.derivative(x) == pytest.approx(math.cos(x) + 2 * x)


@pytest.mark.parametrize("x", POINTS)
def test_divide_matches_quotient_rule(x):
    f = sin(identity())
    g = add(exp(identity()), constant(1.0))
    node = divide(f, g)

    fv, fd = f.evaluate(x), f.derivative(x)
    gv, gd = g.evaluate(x), g.derivative(x)
    assert gv != 0.0
    assert node.evaluate(x) == pytest.approx(fv / gv)
    assert node.derivative(x) == pytest.approx((fd * gv - fv * gd) / gv ** 2)


def test_divide_order_matters():
    node = divide(constant(1.0), identity())
    assert node.evaluate(4.0) == 0.25
    assert node.derivative(4.0) == pytest.approx(-1.0 / 16.0)


def test_divide_by_zero_is_non_finite():
    assert divide(constant(1.0), identity()).evaluate(0.0) == np.inf
    assert divide(constant(1.0), identity()).derivative(0.0) == -np.inf
    assert np.isnan(divide(identity(), identity()).evaluate(0.0))
    assert np.isnan(divide(identity(), identity()).derivative(0.0))


def test_nan_propagates_through_composites():
    node = add(exp(sqrt(identity())), constant(1.0))
    assert np.isnan(node.evaluate(-4.0))
    assert np.isnan(node.derivative(-4.0))


def test_results_are_float64():
    node = divide(identity(), constant(2.0))
    assert isinstance(node.evaluate(3), np.float64)
    assert isinstance(node.derivative(3), np.float64)
    assert isinstance(identity().derivative(1.0), np.float64)


def test_repeated_calls_are_bit_identical():
    node = sin(divide(log(add(exp(identity()), constant(2.0))), power(identity(), 3)))
    for x in [0.5, 1.25, -2.0]:
        first = (node.evaluate(x), node.derivative(x))
        node.derivative(x + 1.0)
        second = (node.evaluate(x), node.derivative(x))
        assert first[0].tobytes() == second[0].tobytes()
        assert first[1].tobytes() == second[1].tobytes()


def test_nodes_are_immutable():
    node = power(identity(), 3)
    with pytest.raises(AttributeError):
        node.exponent = 4
    with pytest.raises(AttributeError):
        node.operand = constant(1.0)
    with pytest.raises(AttributeError):
        del node.operand
    with pytest.raises(AttributeError):
        constant(2.0).value = 3.0
    with pytest.raises(AttributeError):
        identity().cache = {}
    assert node.exponent == 3


def test_base_classes_are_abstract():
    with pytest.raises(TypeError):
        Node()
    with pytest.raises(TypeError):
        UnaryOpNode(identity())
    with pytest.raises(TypeError):
        BinaryOpNode(identity(), identity())


def test_node_kinds_and_children():
    x = identity()
    c = constant(1.0)
    total = add(x, c)
    assert isinstance(x, IdentityNode) and x.node_type == NodeType.IDENTITY
    assert isinstance(c, ConstantNode) and c.node_type == NodeType.CONSTANT
    assert isinstance(total, AddNode) and total.op_type == OpType.ADD
    assert total.node_type == NodeType.BINARY_OP
    assert total.children() == (x, c)
    assert x.children() == ()

    squared = power(total, 2)
    assert isinstance(squared, PowerNode)
    assert squared.node_type == NodeType.UNARY_OP
    assert squared.children() == (total,)
    assert squared.size() == 4


@pytest.mark.filterwarnings("error")
def test_power_overflow_is_silent():
    node = power(identity(), 2)
    assert node.evaluate(1e200) == np.inf
    assert node.derivative(1e200) == pytest.approx(2e200)
    assert power(identity(), 3).derivative(1e200) == np.inf


@pytest.mark.filterwarnings("error")
def test_domain_violations_emit_no_warnings():
    assert np.isnan(log(identity()).evaluate(-1.0))
    assert np.isinf(divide(constant(1.0), identity()).derivative(0.0))
    assert np.isnan(sqrt(identity()).derivative(-1.0))
    assert exp(identity()).evaluate(1000.0) == np.inf


def test_power_exponent_beyond_int64_raises_on_evaluation():
    node = power(identity(), 2 ** 70)
    assert node.exponent == 2 ** 70
    with pytest.raises(OverflowError):
        node.evaluate(1.0)
