"""
Invertible linear maps.

An InvertibleLinearMap pairs a linear function with its inverse. Neither
linearity nor invertibility is verified: both are contracts on whoever
builds the map (see ``invertible``).

Maps from a space to itself form a monoid under ``@``:
    (f, f⁻¹) @ (g, g⁻¹) = (f ∘ g, g⁻¹ ∘ f⁻¹)
with identity (id, id).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple


def _identity(v):
    return v


class _Chain:
    """
    Composite of linear functions, applied right to left in a loop.

    Chains flatten on composition, so applying a map built from any number
    of ``@`` steps uses constant stack depth.
    """
    __slots__ = ("steps",)

    def __init__(self, steps: Tuple[Callable, ...]):
        self.steps = steps

    def __call__(self, v):
        for step in reversed(self.steps):
            v = step(v)
        return v

    def __repr__(self) -> str:
        return f"_Chain(<{len(self.steps)} steps>)"


def _steps(f: Callable) -> Tuple[Callable, ...]:
    return f.steps if isinstance(f, _Chain) else (f,)


def _compose(f: Callable, g: Callable) -> Callable:
    """f ∘ g, collapsing identities and flattening nested chains."""
    if f is _identity:
        return g
    if g is _identity:
        return f
    return _Chain(_steps(f) + _steps(g))


@dataclass(frozen=True, eq=False)
class InvertibleLinearMap:
    """
    A linear map paired with its inverse.

    Attributes:
        forward: u -> v, assumed linear
        backward: v -> u, assumed to be the inverse of forward
    """
    forward: Callable[[Any], Any]
    backward: Callable[[Any], Any]

    @classmethod
    def identity(cls) -> 'InvertibleLinearMap':
        return cls(_identity, _identity)

    def apply(self, v):
        """Apply the forward map to a vector."""
        return self.forward(v)

    def __call__(self, v):
        return self.forward(v)

    def inverse(self) -> 'InvertibleLinearMap':
        """Swap the two directions. O(1), nothing is recomputed."""
        return InvertibleLinearMap(self.backward, self.forward)

    def __matmul__(self, other: 'InvertibleLinearMap') -> 'InvertibleLinearMap':
        """
        Compose maps: ``self @ other`` applies ``other`` first.

        The inverse half composes in reverse order so the pair stays
        mutually inverse.
        """
        if not isinstance(other, InvertibleLinearMap):
            return NotImplemented
        return InvertibleLinearMap(
            _compose(self.forward, other.forward),
            _compose(other.backward, self.backward),
        )


def invertible(f: Callable, g: Callable) -> InvertibleLinearMap:
    """
    Create an invertible linear map from two functions which are
    assumed to be linear inverses.

    Args:
        f: Forward linear function
        g: Its inverse

    Returns:
        The paired map
    """
    return InvertibleLinearMap(f, g)


def linv(m: InvertibleLinearMap) -> InvertibleLinearMap:
    """Invert a linear map."""
    return m.inverse()


def lapp(m: InvertibleLinearMap, v):
    """Apply a linear map to a vector."""
    return m.forward(v)


__all__ = [
    'InvertibleLinearMap',
    'invertible',
    'linv',
    'lapp',
]
