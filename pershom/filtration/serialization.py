"""
pershom/filtration/serialization.py

Text I/O for filtrations and boundary matrices.

Filtration format, one cell per line in filtration order:

    v0,v1,...,vk,value

Boundary matrix dump, one column per line:

    dim r1 r2 ...
"""

from __future__ import annotations

import io
from typing import Callable, Iterable, TextIO

from pershom.errors import FiltrationParseError
from pershom.filtration.boundary import simplex_dimension
from pershom.filtration.filtration import Filtration
from pershom.topology.complex import SimplicialComplex
from pershom.topology.simplex import Simplex


def write_filtration(flt: Filtration, stream: TextIO) -> None:
    """Write a filtration, one cell per line, in ascending (value, dimension) order."""
    cplx = flt.complex
    for v, d, ci in flt.entries():
        cell = cplx.cell_at(ci, d)
        fields = [str(k) for k in cell.values] + [str(v)]
        stream.write(",".join(fields) + "\n")


def read_filtration(
    stream: TextIO,
    vertex_type: Callable = int,
    value_type: Callable = float,
) -> Filtration:
    """
    Read a filtration written by write_filtration.

    Args:
        stream: Text stream
        vertex_type: Type of vertex labels (also used to parse them)
        value_type: Type of filtration values (also used to parse them)

    Returns:
        Filtration with cells inserted in file order

    Raises:
        FiltrationParseError: on a line with too few fields or a bad token
    """
    flt = Filtration(SimplicialComplex(vertex_type))
    for lineno, raw in enumerate(stream, start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split(",")
        if len(parts) < 2:
            raise FiltrationParseError(lineno, line, f"need at least 2 fields, got {len(parts)}")
        try:
            svals = tuple(vertex_type(p.strip()) for p in parts[:-1])
            fval = value_type(parts[-1].strip())
            flt.insert(Simplex(svals), fval)
        except ValueError as e:
            raise FiltrationParseError(lineno, line, str(e)) from e
    return flt


def dumps_filtration(flt: Filtration) -> str:
    """Serialize a filtration to a string."""
    buf = io.StringIO()
    write_filtration(flt, buf)
    return buf.getvalue()


def loads_filtration(text: str, vertex_type: Callable = int, value_type: Callable = float) -> Filtration:
    """Parse a filtration from a string."""
    return read_filtration(io.StringIO(text), vertex_type=vertex_type, value_type=value_type)


def write_boundary_matrix(columns: Iterable, stream: TextIO, zero_index: bool = True) -> None:
    """
    Write a boundary matrix, one column per line.

    Each line holds the simplex dimension followed by the column's row ids,
    shifted to 0-based when zero_index is set.
    """
    shift = 1 if zero_index else 0
    for col in columns:
        fields = [str(simplex_dimension(col))]
        fields.extend(str(i - shift) for i in sorted(col))
        stream.write(" ".join(fields) + "\n")
