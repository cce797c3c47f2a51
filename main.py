#!/usr/bin/env python3
"""
pershom: Persistent Homology over GF(2)

Persistence intervals and Betti numbers of filtered simplicial complexes.

Usage:
    # Intervals and Betti numbers of a filtration file
    python main.py compute --input filtration.txt --output result.json

    # Dump the boundary matrix of a filtration file
    python main.py boundary --input filtration.txt --reduced

    # Build a Vietoris-Rips filtration from a point cloud
    python main.py rips --points points.csv --eps 0.5 --expand --output rips.txt

    # Run demos
    python main.py demo --example triangle

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

import numpy as np

from pershom import (
    Filtration,
    PersistentHomology,
    Simplex,
    build_boundary_matrix,
    read_filtration,
    run_persistence,
    vietoris_rips,
    write_boundary_matrix,
    write_filtration,
    __version__,
)

logger = logging.getLogger("pershom")

VALUE_TYPES = {"float": float, "int": int}
VERTEX_TYPES = {"int": int, "str": str}


def load_filtration(filepath: str, vertex_type: str = "int", value_type: str = "float") -> Filtration:
    """Load a filtration from a text file (one 'v0,...,vk,value' line per cell)."""
    with open(filepath, "r") as f:
        return read_filtration(f, vertex_type=VERTEX_TYPES[vertex_type], value_type=VALUE_TYPES[value_type])


def _json_value(v):
    if isinstance(v, float) and math.isinf(v):
        return "inf"
    return v


def save_result_to_json(filepath: str, result) -> None:
    """Save persistence result to JSON file."""
    output = {
        "betti": {str(p): b for p, b in result.betti.items()},
        "intervals": {
            str(p): [[_json_value(i.start), _json_value(i.end)] for i in ints]
            for p, ints in sorted(result.intervals.items())
        },
        "pairs": [[p.birth, _json_value(p.death)] for p in result.pairs],
    }

    with open(filepath, "w") as f:
        json.dump(output, f, indent=2)


def cmd_compute(args):
    """Execute the compute command."""
    print(f"Loading filtration from: {args.input}")
    flt = load_filtration(args.input, args.vertex_type, args.value_type)

    print(f"\nFiltration:")
    print(f"  Complex: {flt.complex!r}")
    print(f"  Distinct values: {len(flt)}")
    print(f"\nReduction: {args.reduction}{' (reduced homology)' if args.reduced else ''}")

    result = run_persistence(
        flt,
        reduction=args.reduction,
        reduced=args.reduced,
        length0=args.length0,
    )

    print("\nIntervals:")
    for p, ints in sorted(result.intervals.items()):
        print(f"  H{p}: " + " ".join(str(i) for i in ints))

    print("\nBetti numbers:")
    for p, b in sorted(result.betti.items()):
        print(f"  beta_{p} = {b}")

    if args.output:
        save_result_to_json(args.output, result)
        print(f"\nResults saved to: {args.output}")

    return 0


def cmd_boundary(args):
    """Execute the boundary command."""
    flt = load_filtration(args.input, args.vertex_type, args.value_type)
    bm = build_boundary_matrix(flt, reduced=args.reduced)

    if args.output:
        with open(args.output, "w") as f:
            write_boundary_matrix(bm.columns, f, zero_index=not args.one_based)
        print(f"Boundary matrix ({len(bm)} columns) saved to: {args.output}")
    else:
        write_boundary_matrix(bm.columns, sys.stdout, zero_index=not args.one_based)
    return 0


def cmd_rips(args):
    """Execute the rips command."""
    X = np.loadtxt(args.points, delimiter=args.delimiter, ndmin=2)
    cplx, w = vietoris_rips(X, args.eps, expand=args.expand, max_dim=args.max_dim)
    flt = Filtration.from_weights(cplx, w)

    print(f"Points: {X.shape[0]} in R^{X.shape[1]}")
    print(f"Complex: {cplx!r}")

    with open(args.output, "w") as f:
        write_filtration(flt, f)
    print(f"Filtration saved to: {args.output}")
    return 0


def demo_edge():
    """Demo: Two vertices joined by an edge"""
    print("=" * 60)
    print("Demo: Edge A -- B")
    print("=" * 60)

    flt = Filtration()
    flt.insert(Simplex((0,)), 1)
    flt.insert(Simplex((1,)), 1)
    flt.insert(Simplex((0, 1)), 2)

    ph = PersistentHomology(flt, reduction="standard")
    bettis = dict(ph)
    print(f"\nBetti numbers: {bettis}")
    print(f"Intervals: {ph.intervals()}")

    match = bettis == {0: 1, 1: 0}
    print(f"Match: {match}")
    return match


def demo_triangle():
    """Demo: Boundary of a triangle, then filled"""
    print("=" * 60)
    print("Demo: Triangle")
    print("=" * 60)

    flt = Filtration()
    for i, v in enumerate((0, 1, 2)):
        flt.insert(Simplex((v,)), i + 1)
    flt.insert(Simplex((0, 1)), 4)
    flt.insert(Simplex((1, 2)), 5)
    flt.insert(Simplex((0, 2)), 6)
    flt.insert(Simplex((0, 1, 2)), 7)

    result = run_persistence(flt)
    print("\nIntervals:")
    for p, ints in sorted(result.intervals.items()):
        print(f"  H{p}: " + " ".join(str(i) for i in ints))
    print(f"Betti numbers: {result.betti}")

    # The 1-cycle is born at 6 and filled at 7
    match = result.betti == {0: 1, 1: 0, 2: 0} and [str(i) for i in result.intervals[1]] == ["[6,7)"]
    print(f"Match: {match}")
    return match


def demo_circle():
    """Demo: Vietoris-Rips complex of points on a circle"""
    print("=" * 60)
    print("Demo: Vietoris-Rips circle")
    print("=" * 60)

    t = np.linspace(0, 2 * np.pi, 12, endpoint=False)
    X = np.column_stack([np.cos(t), np.sin(t)])
    cplx, w = vietoris_rips(X, 0.6, expand=True)
    flt = Filtration.from_weights(cplx, w)

    print(f"\nComplex: {cplx!r}")
    ph = PersistentHomology(flt)
    bettis = dict(ph)
    print(f"Betti numbers: {bettis}")

    match = bettis[0] == 1 and bettis[1] == 1
    print(f"Match: {match}")
    return match


def cmd_demo(args):
    """Execute the demo command."""
    demos = {
        "edge": demo_edge,
        "triangle": demo_triangle,
        "circle": demo_circle,
    }

    if args.example == "all":
        results = []
        for name, func in demos.items():
            try:
                passed = func()
                results.append((name, passed))
            except Exception as e:
                logger.exception("Demo %s failed", name)
                print(f"Error in {name}: {e}")
                results.append((name, False))
            print()

        print("=" * 60)
        print("Summary")
        print("=" * 60)
        all_passed = True
        for name, passed in results:
            status = "PASS" if passed else "FAIL"
            print(f"  {name}: {status}")
            if not passed:
                all_passed = False

        return 0 if all_passed else 1

    passed = demos[args.example]()
    return 0 if passed else 1


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=pershom", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args):
    """Display system information."""
    print(f"pershom v{__version__}")
    print("Persistent homology of filtered simplicial complexes over GF(2)")
    print()
    print("Reductions:")
    print("  standard - left-to-right column reduction")
    print("  twist    - dimension-descending reduction with clearing")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)

    import scipy
    import networkx
    print("SciPy:", scipy.__version__)
    print("NetworkX:", networkx.__version__)

    return 0


def _add_input_args(p):
    p.add_argument("--input", "-i", type=str, required=True, help="Filtration text file")
    p.add_argument("--vertex-type", choices=sorted(VERTEX_TYPES), default="int",
                   help="Vertex label type (default: int)")
    p.add_argument("--value-type", choices=sorted(VALUE_TYPES), default="float",
                   help="Filtration value type (default: float)")
    p.add_argument("--reduced", action="store_true", help="Use reduced homology")


def main():
    parser = argparse.ArgumentParser(
        prog="pershom",
        description="pershom: Persistent Homology over GF(2)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Intervals and Betti numbers
  pershom compute --input filtration.txt --reduction twist

  # Boundary matrix dump, 1-based rows
  pershom boundary --input filtration.txt --one-based

  # Rips filtration from a CSV point cloud
  pershom rips --points points.csv --eps 0.5 --expand --output rips.txt

  # Run demos
  pershom demo --example all
""",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"pershom {__version__}",
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Compute command
    compute_parser = subparsers.add_parser("compute", help="Compute intervals and Betti numbers")
    _add_input_args(compute_parser)
    compute_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    compute_parser.add_argument(
        "--reduction", "-r",
        choices=["standard", "twist"],
        default="twist",
        help="Reduction algorithm (default: twist)",
    )
    compute_parser.add_argument("--length0", action="store_true", help="Keep zero-length intervals")

    # Boundary command
    boundary_parser = subparsers.add_parser("boundary", help="Dump the boundary matrix")
    _add_input_args(boundary_parser)
    boundary_parser.add_argument("--output", "-o", type=str, help="Output text file")
    boundary_parser.add_argument("--one-based", action="store_true", help="Write 1-based row ids")

    # Rips command
    rips_parser = subparsers.add_parser("rips", help="Build a Vietoris-Rips filtration")
    rips_parser.add_argument("--points", "-p", type=str, required=True, help="Point cloud file, one point per row")
    rips_parser.add_argument("--delimiter", type=str, default=",", help="Column delimiter (default: ',')")
    rips_parser.add_argument("--eps", type=float, required=True, help="Maximal edge length")
    rips_parser.add_argument("--expand", action="store_true", help="Add higher simplices for cliques")
    rips_parser.add_argument("--max-dim", type=int, default=2, help="Highest simplex dimension (default: 2)")
    rips_parser.add_argument("--output", "-o", type=str, required=True, help="Output filtration file")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demonstration examples")
    demo_parser.add_argument(
        "--example", "-e",
        choices=["edge", "triangle", "circle", "all"],
        default="all",
        help="Which example to run (default: all)",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    # Info command
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "compute": cmd_compute,
        "boundary": cmd_boundary,
        "rips": cmd_rips,
        "demo": cmd_demo,
        "test": cmd_test,
        "info": cmd_info,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
