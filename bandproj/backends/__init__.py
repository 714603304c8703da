"""Data containers and input readers.

``base`` defines the containers every reduction consumes, ``kpoints_parser``
reads line-mode KPOINTS files, and ``vasp_providers`` adapts pymatgen's
PROCAR / vasprun.xml readers (optional dependency).

Example::

    from bandproj.backends import parse_kpath_file

    kpath = parse_kpath_file("KPOINTS")
    print(kpath.tick_labels, kpath.tick_positions)
"""

from bandproj.backends.base import BandTensor, DosCollection, KPathSpec
from bandproj.backends.kpoints_parser import (
    merge_tick_labels,
    parse_kpath,
    parse_kpath_file,
)
from bandproj.backends.vasp_providers import (
    band_tensor_from_procar,
    dos_collection_from_vasprun,
    is_pymatgen_available,
    load_procar,
    load_vasprun_dos,
)

__all__ = [
    "BandTensor", "DosCollection", "KPathSpec",
    "merge_tick_labels", "parse_kpath", "parse_kpath_file",
    "band_tensor_from_procar", "dos_collection_from_vasprun",
    "is_pymatgen_available", "load_procar", "load_vasprun_dos",
]
