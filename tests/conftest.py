"""
Pytest configuration and shared fixtures for affinekit tests.

This module provides JAX-aware fixtures and configuration for testing
the transformation algebra across vector spaces.
"""
import pytest
import jax

from affinekit import Euclidean, clear_basis_cache

# Ensure reproducible, double-precision tests across runs
jax.config.update("jax_enable_x64", True)


@pytest.fixture(scope="session")
def base_key():
    """Root PRNG key for all tests."""
    return jax.random.PRNGKey(42)


@pytest.fixture
def key(base_key, request):
    """Per-test PRNG key derived from test name for reproducibility."""
    test_id = hash(request.node.nodeid) % (2**31)
    return jax.random.fold_in(base_key, test_id)


@pytest.fixture(params=[1, 2, 3, 4])
def dim(request):
    """Parametrized dimension; cofactor expansion keeps this small."""
    return request.param


@pytest.fixture
def space(dim):
    """Euclidean space of the parametrized dimension."""
    return Euclidean(dim)


@pytest.fixture
def tolerance():
    """Numerical tolerance for float64 comparisons."""
    # Solves and compositions accumulate error at higher dims
    return 1e-8


@pytest.fixture(autouse=True)
def _fresh_basis_cache():
    """Basis vectors are cached per space; start every test clean."""
    clear_basis_cache()
    yield
    clear_basis_cache()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep AFFINEKIT_* settings from leaking in from the shell."""
    for name in ("AFFINEKIT_CHECK_TRANSPOSE", "AFFINEKIT_TRANSPOSE_ATOL",
                 "AFFINEKIT_DET_WARN_DIM"):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "invariant: mathematical invariant verification")
