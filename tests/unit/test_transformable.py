"""
Tests for the transform capability.

Tests cover:
- Scalars, arrays and points
- Containers: tuple (incl. namedtuple), list, set, frozenset, dict
- Function conjugation for functions, bound methods and partials
- Registration of new types, and rejection of unknown ones
- The translate / scale helpers and Transformation.act
"""
import functools
import operator
from collections import namedtuple
from dataclasses import dataclass
from fractions import Fraction

import pytest
import jax.numpy as jnp
import numpy as np

from affinekit import (
    R2,
    SCALARS,
    Point,
    Transformable,
    ZeroScalingError,
    conjugate,
    point,
    scale,
    scaling,
    transform,
    translate,
    translation,
)
from tests.geometry.generators import RationalSpace, rational_vector
from tests.geometry.invariants import assert_points_close


Pair = namedtuple("Pair", ["start", "end"])


@dataclass(frozen=True)
class Segment(Transformable):
    """A user type that opts in by subclassing."""
    start: Point
    end: Point

    def transform(self, t):
        return Segment(transform(t, self.start), transform(t, self.end))


@dataclass(frozen=True)
class Circle:
    """A user type registered from outside."""
    center: Point
    radius: float


transform.register(Circle, lambda t, c: Circle(transform(t, c.center), c.radius))


class Labelled(Transformable, tuple):
    """A (label, point) pair that handles its own transform."""

    def transform(self, t):
        label, at = self
        return Labelled((label, transform(t, at)))


class TestVectorsAndPoints:
    """Scalars and arrays are vectors; points are positions."""

    def test_scalar(self):
        assert transform(scaling(3.0, SCALARS), 2.0) == 6.0

    def test_scalar_ignores_translation(self):
        assert transform(translation(5.0), 2.0) == 2.0

    def test_fraction_stays_exact(self):
        out = transform(scaling(Fraction(1, 3), SCALARS), Fraction(3, 2))
        assert out == Fraction(1, 2)
        assert isinstance(out, Fraction)

    def test_jax_array(self):
        out = transform(scaling(2.0, R2), jnp.array([1.0, -1.0]))
        np.testing.assert_allclose(out, [2.0, -2.0])

    def test_numpy_array(self):
        out = transform(translation((9.0, 9.0)), np.array([1.0, -1.0]))
        np.testing.assert_allclose(out, [1.0, -1.0])

    def test_point(self):
        t = translation((1.0, 2.0))
        assert_points_close(transform(t, point(0.0, 0.0)), point(1.0, 2.0))

    def test_transformation_is_composed_on_the_left(self):
        inner = translation((1.0, 0.0))
        outer = scaling(2.0, R2)
        composed = transform(outer, inner)
        assert_points_close(composed.papply(point(0.0, 0.0)), point(2.0, 0.0))


class TestContainers:
    """Containers transform element-wise and keep their shape."""

    def test_tuple(self):
        out = transform(scaling(2.0, SCALARS), (1.0, 2.0, 3.0, 4.0))
        assert out == (2.0, 4.0, 6.0, 8.0)
        assert type(out) is tuple

    def test_namedtuple_is_preserved(self):
        t = translation((1.0, 1.0))
        out = transform(t, Pair(point(0.0, 0.0), point(1.0, 0.0)))
        assert isinstance(out, Pair)
        assert out.start == point(1.0, 1.0)
        assert out.end == point(2.0, 1.0)

    def test_list(self):
        t = translation((0.0, 1.0))
        out = transform(t, [point(0.0, 0.0), point(1.0, 1.0)])
        assert isinstance(out, list)
        assert out == [point(0.0, 1.0), point(1.0, 2.0)]

    def test_empty_list(self):
        assert transform(scaling(2.0, R2), []) == []

    def test_set(self):
        t = translation((1.0, 0.0))
        out = transform(t, {point(0.0, 0.0), point(0.0, 1.0)})
        assert isinstance(out, set)
        assert out == {point(1.0, 0.0), point(1.0, 1.0)}

    def test_frozenset(self):
        out = transform(scaling(2.0, SCALARS), frozenset({1.0, 2.0}))
        assert out == frozenset({2.0, 4.0})
        assert isinstance(out, frozenset)

    def test_set_may_shrink_when_elements_collide(self):
        # Both products underflow to 0.0
        out = transform(scaling(1e-300, SCALARS), {1e-200, 2e-200})
        assert out == {0.0}

    def test_dict_values_transform_keys_do_not(self):
        t = translation((1.0, 1.0))
        key = point(5.0, 5.0)
        out = transform(t, {key: point(0.0, 0.0), "b": point(1.0, 1.0)})
        assert set(out) == {key, "b"}
        assert out[key] == point(1.0, 1.0)
        assert out["b"] == point(2.0, 2.0)

    def test_nested(self):
        t = scaling(2.0, SCALARS)
        out = transform(t, {"xs": [1.0, (2.0, 3.0)], "ys": frozenset({4.0})})
        assert out == {"xs": [2.0, (4.0, 6.0)], "ys": frozenset({8.0})}


class TestConjugation:
    """Functions transform as t ∘ f ∘ t⁻¹."""

    def test_square_under_scaling(self):
        def square(x):
            return x * x

        g = transform(scaling(2.0, SCALARS), square)
        # 2 * (x / 2)^2
        assert g(4.0) == pytest.approx(8.0)
        assert g(2.0) == pytest.approx(2.0)

    def test_keeps_function_metadata(self):
        def square(x):
            """Square a number."""
            return x * x

        g = conjugate(scaling(2.0, SCALARS), square)
        assert g.__name__ == "square"
        assert g.__doc__ == "Square a number."

    def test_point_function(self):
        shift = jnp.array([1.0, 0.0])
        g = transform(scaling(2.0, R2), lambda p: p + shift)
        # Scaling the observer doubles the apparent shift
        assert_points_close(g(point(0.0, 0.0)), point(2.0, 0.0))

    def test_translation_commutes_with_shift(self):
        shift = jnp.array([0.0, 3.0])
        g = transform(translation((4.0, 4.0)), lambda p: p + shift)
        assert_points_close(g(point(1.0, 1.0)), point(1.0, 4.0))

    def test_all_positional_arguments_are_inverse_transformed(self):
        g = transform(scaling(2.0, SCALARS), lambda x, y: x * y)
        # 2 * ((x / 2) * (y / 2))
        assert g(4.0, 6.0) == pytest.approx(12.0)

    def test_bound_method(self):
        class Counter:
            def bump(self, x):
                return x + 1.0

        g = transform(scaling(2.0, SCALARS), Counter().bump)
        assert g(4.0) == pytest.approx(6.0)

    def test_partial(self):
        g = transform(scaling(2.0, SCALARS), functools.partial(operator.mul, 3.0))
        assert g(5.0) == pytest.approx(15.0)


class TestRegistration:
    """New types opt in by subclassing or by registering."""

    def test_transformable_subclass(self):
        t = translation((1.0, 1.0))
        out = transform(t, Segment(point(0.0, 0.0), point(1.0, 0.0)))
        assert out == Segment(point(1.0, 1.0), point(2.0, 1.0))

    def test_registered_type(self):
        t = translation((0.0, 2.0))
        out = transform(t, Circle(point(1.0, 1.0), 3.0))
        assert isinstance(out, Circle)
        assert out.center == point(1.0, 3.0)
        assert out.radius == 3.0

    def test_register_as_decorator(self):
        class Marker:
            def __init__(self, at):
                self.at = at

        @transform.register(Marker)
        def _(t, m):
            return Marker(transform(t, m.at))

        out = transform(translation((1.0, 0.0)), Marker(point(0.0, 0.0)))
        assert out.at == point(1.0, 0.0)

    def test_transformable_container_subclass_uses_own_method(self):
        out = transform(translation((1.0, 0.0)), Labelled(("a", point(0.0, 0.0))))
        assert isinstance(out, Labelled)
        assert out[0] == "a"
        assert out[1] == point(1.0, 0.0)

    @pytest.mark.parametrize("value", ["text", None, abs, object()])
    def test_unknown_types_raise(self, value):
        with pytest.raises(TypeError, match="not transformable"):
            transform(scaling(2.0, SCALARS), value)


class TestHelpers:
    """translate, scale and act."""

    def test_translate_point(self):
        assert translate((1.0, 2.0), point(0.0, 0.0)) == point(1.0, 2.0)

    def test_translate_leaves_vectors(self):
        v = jnp.array([3.0, 4.0])
        np.testing.assert_allclose(translate((1.0, 2.0), v), v)

    def test_scale_infers_space_from_point(self):
        assert scale(3.0, point(1.0, 2.0)) == point(3.0, 6.0)

    def test_scale_infers_space_from_container(self):
        assert scale(2.0, [1.0, 2.0]) == [2.0, 4.0]

    def test_scale_with_explicit_space(self):
        out = scale(2.0, [jnp.array([1.0, 1.0])], space=R2)
        np.testing.assert_allclose(out[0], [2.0, 2.0])

    def test_scale_by_zero_raises(self):
        with pytest.raises(ZeroScalingError):
            scale(0.0, point(1.0, 1.0))

    def test_act_matches_transform(self):
        t = scaling(2.0, R2) @ translation((1.0, 0.0))
        xs = [point(0.0, 0.0), point(1.0, 1.0)]
        assert t.act(xs) == transform(t, xs)

    def test_scale_point_over_other_space(self):
        Q2 = RationalSpace(2)
        out = scale(2, Point(rational_vector(1, 2), Q2))
        assert out == Point(rational_vector(2, 4), Q2)
        assert out.space == Q2

    def test_translate_point_over_other_space(self):
        Q2 = RationalSpace(2)
        out = translate(rational_vector(1, Fraction(1, 3)), Point(rational_vector(0, 1), Q2), space=Q2)
        assert out == Point(rational_vector(1, Fraction(4, 3)), Q2)
