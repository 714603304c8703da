import logging
import os
from typing import Dict, List, Tuple

from ase import Atoms
from ase.io import read

logger = logging.getLogger(__name__)


def species_runs(atoms: Atoms) -> List[Tuple[str, int]]:
    """
    Contiguous species blocks of a structure, in ion order.

    This is the POSCAR species line paired with its counts line, and the
    ``counts_per_type`` that ``typed_pdos`` partitions the per-ion pDOS with.
    A species that appears in two separate blocks yields two runs.

    Args:
        atoms (Atoms): Structure whose ion order matches the DOS/PROCAR data.

    Returns:
        List[Tuple[str, int]]: ``(symbol, count)`` per block, e.g.
        ``[("Y", 2), ("Al", 6)]``.
    """
    runs: List[Tuple[str, int]] = []
    for symbol in atoms.get_chemical_symbols():
        if runs and runs[-1][0] == symbol:
            runs[-1] = (symbol, runs[-1][1] + 1)
        else:
            runs.append((symbol, 1))
    return runs


def ion_groups_by_species(atoms: Atoms) -> Dict[str, List[int]]:
    """
    0-based ion indices of every species, in order of first appearance.

    Feed the values to ``typed_pdos_by_groups`` when species are not stored
    in contiguous blocks.
    """
    groups: Dict[str, List[int]] = {}
    for index, symbol in enumerate(atoms.get_chemical_symbols()):
        groups.setdefault(symbol, []).append(index)
    return groups


def read_ion_types(path: str = "POSCAR", fmt: str = "vasp") -> List[Tuple[str, int]]:
    """
    Read a POSCAR/CONTCAR with ASE and return its species runs.

    Args:
        path (str): Structure file path.
        fmt (str): ASE format name.

    Returns:
        List[Tuple[str, int]]: See :func:`species_runs`.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Structure file not found: {path}")
    atoms = read(path, format=fmt)
    runs = species_runs(atoms)
    logger.info("Ion types from %s: %s", path, runs)
    return runs
