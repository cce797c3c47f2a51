"""
Example: Filtration of a filled triangle.

Vertices 0, 1, 2 appear first, then the three edges, then the 2-simplex.
"""

from pershom import Filtration, PersistentHomology, Simplex


def main():
    flt = Filtration()

    # Vertices
    flt.insert(Simplex((0,)), 1)
    flt.insert(Simplex((1,)), 2)
    flt.insert(Simplex((2,)), 3)

    # Edges close a 1-cycle at value 6
    flt.insert(Simplex((0, 1)), 4)
    flt.insert(Simplex((1, 2)), 5)
    flt.insert(Simplex((0, 2)), 6)

    # The face fills it
    flt.insert(Simplex((0, 1, 2)), 7)

    for reduction in ("standard", "twist"):
        ph = PersistentHomology(flt, reduction=reduction)
        print(f"--- {reduction} reduction ---")
        print(f"Pairs: {ph.pairs()}")
        for p, ints in sorted(ph.intervals().items()):
            print(f"  H{p}: " + " ".join(str(i) for i in ints))
        print(f"Betti numbers: {dict(ph)}")

    # Reduced homology of a contractible complex vanishes
    ph_red = PersistentHomology(flt, reduced=True)
    print(f"\nReduced Betti numbers: {dict(ph_red)}")


if __name__ == "__main__":
    main()
