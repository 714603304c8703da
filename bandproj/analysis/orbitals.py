"""Orbital label tables and name-to-index resolution.

Column order follows VASP: ``LORBIT = 11`` writes the lm-decomposed table
(s, py, pz, px, dxy, dyz, dz2, dxz, dx2-y2), ``LORBIT = 10`` the
l-decomposed one (s, p, d).  Tables come from ``config/orbitals.yaml``.
"""

from __future__ import annotations

import operator
from typing import Iterable, List, Union

from bandproj._config_loader import load_config
from bandproj.core.errors import SelectionError

_DECOMPOSITIONS = {"lm": "lm_decomposed", "l": "l_decomposed"}


def orbital_labels(decomposition: str = "lm") -> List[str]:
    """Orbital labels in projection column order.

    Args:
        decomposition: ``"lm"`` or ``"l"``.

    Raises:
        ValueError: If ``decomposition`` is unknown.
    """
    try:
        key = _DECOMPOSITIONS[decomposition]
    except KeyError:
        raise ValueError(
            f"Unknown decomposition {decomposition!r}; expected one of {sorted(_DECOMPOSITIONS)}"
        ) from None
    return load_config("orbitals")[key]


def resolve_orbitals(
    items: Iterable[Union[int, str]],
    decomposition: str = "lm",
) -> List[int]:
    """Turn orbital indices and names into sorted 0-based column indices.

    Each item is an index, an exact label (``"dz2"``) or, in lm mode, a
    shell letter selecting the whole shell (``"p"`` -> py, pz, px).

    Raises:
        SelectionError: If an index is out of range or a name is unknown.
    """
    labels = orbital_labels(decomposition)
    resolved = set()
    for item in items:
        if isinstance(item, str):
            if item in labels:
                resolved.add(labels.index(item))
                continue
            shell = [i for i, lbl in enumerate(labels) if lbl[0] == item]
            if len(item) != 1 or not shell:
                raise SelectionError(f"Unknown orbital {item!r}; known: {labels}")
            resolved.update(shell)
        else:
            item = operator.index(item)
            if not 0 <= item < len(labels):
                raise SelectionError(
                    f"orbital index {item} out of range for {decomposition}-decomposed data"
                )
            resolved.add(item)
    return sorted(resolved)
