#!/usr/bin/env python3
"""
affinekit CLI - Affine Transformations over Abstract Vector Spaces

Command-line interface for inspecting the transformation algebra, running
small demos, and testing invariants.

Usage:
    affinekit info                    Show package info and available components
    affinekit demo scaling            Scaling, matrices and determinants in R^2
    affinekit demo compose            Composition order and inverses
    affinekit demo conjugate          Transforming functions by conjugation
    affinekit check invariants        Run mathematical invariant checks
"""
import argparse
import sys

import jax.numpy as jnp


def cmd_info(args):
    """Show package information and available components."""
    import affinekit

    print(f"""
╔══════════════════════════════════════════════════════════════════════╗
║                         affinekit {affinekit.__version__:<35}║
║          Affine Transformations over Abstract Vector Spaces          ║
╚══════════════════════════════════════════════════════════════════════╝

Vector Spaces:
  • Euclidean(n)      - R^n on 1-D JAX arrays (R1, R2, R3 predefined)
  • ScalarField()     - Scalars as a 1-D space (exact with Fraction)

Constructors:
  • translation(v)          - Pure translation
  • scaling(s, space)       - Uniform scaling (s != 0)
  • from_linear(l, lt, sp)  - Linear map plus its transpose
  • invertible(f, g)        - Pair a linear function with its inverse

Extraction:
  • on_basis / matrix_rep   - Columns of the linear part
  • determinant             - Cofactor expansion
  • homogeneous_matrix      - (n+1)x(n+1) matrix for backends

Quick Start:
    from affinekit import R2, point, scaling, translation, transform

    t = scaling(2.0, R2) @ translation((1.0, 0.0))
    transform(t, point(0.0, 0.0))   # Point((2.0, 0.0))
""")


def cmd_demo_scaling(args):
    """Run scaling / matrix / determinant demo."""
    from affinekit import (
        R2, ZeroScalingError, determinant, matrix_rep, point, scaling, transform, transl,
    )

    print("\n=== Scaling Demo ===\n")

    try:
        t = scaling(args.factor, R2)
    except ZeroScalingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    p = point(1.0, 1.0)

    print(f"scaling({args.factor}) over {R2!r}")
    print(f"  {p!r} -> {transform(t, p)!r}")
    print(f"  matrix (columns): {[[float(c) for c in col] for col in matrix_rep(t)]}")
    print(f"  translation:      {[float(c) for c in transl(t)]}")
    print(f"  determinant:      {float(determinant(t)):.4f}")

    print("\n✓ determinant(scaling(s)) = s^n")
    return 0


def cmd_demo_compose(args):
    """Show that t1 @ t2 performs t2 first."""
    from affinekit import R2, inv, point, scaling, transform, translation

    print("\n=== Composition Demo ===\n")

    t = scaling(2.0, R2) @ translation((1.0, 0.0))
    p = point(0.0, 0.0)
    q = transform(t, p)

    print("t = scaling(2) @ translation((1, 0))")
    print(f"  t {p!r}      = {q!r}   (translate first, then scale)")
    print(f"  inv(t) {q!r} = {transform(inv(t), q)!r}")

    v = jnp.array([1.0, 1.0])
    print(f"\nVectors ignore translation: t [1, 1] = {transform(t, v).tolist()}")

    print("\n✓ Composition is associative; inverses undo translations too")


def cmd_demo_conjugate(args):
    """Show conjugation of functions."""
    from affinekit import SCALARS, scaling, transform

    print("\n=== Conjugation Demo ===\n")

    def square(x):
        return x * x

    t = scaling(2.0, SCALARS)
    g = transform(t, square)

    print("g = transform(scaling(2), square) = 2 * square(x / 2)")
    for x in (1.0, 2.0, 4.0):
        print(f"  g({x}) = {g(x):.4f}")

    print("\n✓ Shrinking an observer magnifies its environment")


def cmd_check_invariants(args):
    """Run mathematical invariant checks."""
    import subprocess

    print("\n=== Running Mathematical Invariant Checks ===\n")

    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-m", "invariant", "-v", "--tb=short"],
        cwd=".",
        capture_output=False
    )

    return result.returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='affinekit',
        description='affinekit - Affine Transformations over Abstract Vector Spaces',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  affinekit info                 Show available components
  affinekit demo scaling         Scaling matrices and determinants
  affinekit demo compose         Composition order and inverses
  affinekit demo conjugate       Conjugating functions
  affinekit check invariants     Run math invariant tests
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('info', help='Show package info and components')

    demo_parser = subparsers.add_parser('demo', help='Run demos')
    demo_parser.add_argument('name', choices=['scaling', 'compose', 'conjugate'],
                             help='Demo to run')
    demo_parser.add_argument('--factor', type=float, default=2.0,
                             help='Scale factor for the scaling demo')

    check_parser = subparsers.add_parser('check', help='Run verification checks')
    check_parser.add_argument('what', choices=['invariants'],
                              help='What to check')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'info':
        cmd_info(args)
    elif args.command == 'demo':
        if args.name == 'scaling':
            return cmd_demo_scaling(args)
        elif args.name == 'compose':
            cmd_demo_compose(args)
        elif args.name == 'conjugate':
            cmd_demo_conjugate(args)
    elif args.command == 'check':
        if args.what == 'invariants':
            return cmd_check_invariants(args)

    return 0


if __name__ == '__main__':
    sys.exit(main())
