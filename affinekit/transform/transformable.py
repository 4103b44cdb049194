"""
The Transformable capability.

``transform(t, x)`` applies a Transformation to any value of a supported
shape and returns a value of the same shape. Dispatch is explicit: every
shape is registered below, and new types either subclass Transformable
or are registered with ``transform.register``.

Registered shapes:
- Transformable subclasses (Transformation, Point, TransInv, user types)
- Scalars and arrays: treated as vectors, so translation has no effect
- tuple, list, set, frozenset, dict: transformed element-wise
- Functions: transformed by conjugation

Every implementation is structure preserving:
    transform(t1 @ t2, x) == transform(t1, transform(t2, x))
    transform(identity, x) == x
"""
from __future__ import annotations

import functools
import numbers
import types
from typing import Callable, Optional

import jax
import numpy as np

from ..core.protocols import Transformable
from ..core.spaces import VectorSpace, vector_space_of
from .affine import Transformation, scaling, translation


@functools.singledispatch
def _transform_value(x, t: Transformation):
    raise TypeError(f"{type(x).__name__} is not transformable")


def transform(t: Transformation, x):
    """
    Apply a transformation to an object.

    Transformable instances always use their own ``transform`` method,
    even when they also subclass a registered container such as tuple.

    Args:
        t: Transformation over the space ``x`` lives in
        x: Any registered shape or Transformable instance

    Returns:
        The transformed value, of the same shape as ``x``

    Raises:
        TypeError: if ``x`` has no registered transform behaviour
    """
    if isinstance(x, Transformable):
        return x.transform(t)
    return _transform_value.dispatch(type(x))(x, t)


def _register(cls: type, func: Optional[Callable] = None):
    """
    Register transform behaviour for ``cls``.

    ``func(t, x)`` receives the transformation first. Usable as a
    decorator: ``@transform.register(MyType)``.
    """
    def decorate(f):
        _transform_value.register(cls, lambda x, t: f(t, x))
        return f
    if func is not None:
        return decorate(func)
    return decorate


transform.register = _register


# =============================================================================
# VECTORS
# =============================================================================

def _apply_vector(x, t: Transformation):
    return t.apply(x)


_transform_value.register(numbers.Number, _apply_vector)
_transform_value.register(jax.Array, _apply_vector)
_transform_value.register(np.ndarray, _apply_vector)


# =============================================================================
# CONTAINERS
# =============================================================================

@_transform_value.register(tuple)
def _(x: tuple, t: Transformation):
    items = [transform(t, item) for item in x]
    if hasattr(x, "_fields"):
        return type(x)._make(items)
    return type(x)(items)


@_transform_value.register(list)
def _(x: list, t: Transformation):
    return [transform(t, item) for item in x]


@_transform_value.register(set)
@_transform_value.register(frozenset)
def _(x, t: Transformation):
    # Elements that collide after transforming merge, shrinking the set.
    return type(x)(transform(t, item) for item in x)


@_transform_value.register(dict)
def _(x: dict, t: Transformation):
    return type(x)((k, transform(t, v)) for k, v in x.items())


# =============================================================================
# FUNCTIONS
# =============================================================================

def conjugate(t: Transformation, f: Callable) -> Callable:
    """
    Transform a function by conjugation.

    Arguments are reverse-transformed and the result forward-transformed.
    Intuition: if someone shrinks you, you see your environment enlarged;
    if you rotate right, you see your environment rotating left.
    """
    t_inv = t.inverse()

    @functools.wraps(f)
    def conjugated(*args):
        return transform(t, f(*(transform(t_inv, a) for a in args)))

    return conjugated


def _conjugate_value(f, t: Transformation):
    return conjugate(t, f)


_transform_value.register(types.FunctionType, _conjugate_value)
_transform_value.register(types.MethodType, _conjugate_value)
_transform_value.register(functools.partial, _conjugate_value)


# =============================================================================
# GENERIC TRANSFORMATIONS
# =============================================================================

def translate(v, x, space: Optional[VectorSpace] = None):
    """Translate ``x`` by the vector ``v``."""
    return transform(translation(v, space), x)


def scale(s, x, space: Optional[VectorSpace] = None):
    """
    Scale ``x`` uniformly in every dimension by ``s``.

    The vector space is inferred from ``x`` unless given.

    Raises:
        ZeroScalingError: if ``s`` is zero
    """
    if space is None:
        space = vector_space_of(x)
    return transform(scaling(s, space), x)


# =============================================================================
# SPACE INFERENCE FOR CONTAINERS
# =============================================================================

def _first_space(items, kind: str) -> VectorSpace:
    for item in items:
        return vector_space_of(item)
    raise ValueError(f"cannot infer the vector space of an empty {kind}")


@vector_space_of.register(tuple)
@vector_space_of.register(list)
@vector_space_of.register(set)
@vector_space_of.register(frozenset)
def _(x) -> VectorSpace:
    return _first_space(x, type(x).__name__)


@vector_space_of.register(dict)
def _(x: dict) -> VectorSpace:
    return _first_space(x.values(), "dict")


__all__ = [
    'transform',
    'conjugate',
    'translate',
    'scale',
]
