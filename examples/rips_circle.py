"""
Example: Vietoris-Rips persistence of a noisy circle.

The single long-lived H1 interval is the circle.
"""

import numpy as np

from pershom import Filtration, vietoris_rips, persistence_intervals


def main():
    rng = np.random.default_rng(7)
    n = 30
    t = rng.uniform(0, 2 * np.pi, n)
    X = np.column_stack([np.cos(t), np.sin(t)]) + rng.normal(scale=0.05, size=(n, 2))

    cplx, w = vietoris_rips(X, 1.2, expand=True)
    flt = Filtration.from_weights(cplx, w)
    print(f"Complex: {cplx!r}")

    ints = persistence_intervals(flt, reduction="twist")
    h1 = sorted(ints.get(1, []), key=lambda i: i.start - i.end)
    print(f"\nH0: {len(ints.get(0, []))} intervals")
    print("H1 (longest first):")
    for i in h1[:5]:
        print(f"  {i}  length={i.end - i.start:.4f}")


if __name__ == "__main__":
    main()
