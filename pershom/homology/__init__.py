"""
Homology module: Betti numbers and the persistent homology interface.
"""

from pershom.homology.betti import betti
from pershom.homology.persistent import PersistentHomology

__all__ = ["betti", "PersistentHomology"]
