"""Reductions over projected band and DOS data.

All sub-modules only require numpy.

Available modules
-----------------
- **projection**: fatband weights and per-type partial DOS.
- **dos**: Fermi energy at a hypothetical electron count.
- **orbitals**: orbital label tables and name resolution.

Usage::

    from bandproj.analysis import fat_weight, typed_pdos

    weights = fat_weight(bands.projections, orbitals=[6], ions=[6, 7])
"""

from bandproj.analysis.dos import energy_at_electrons, fermi_from_electron_count
from bandproj.analysis.orbitals import orbital_labels, resolve_orbitals
from bandproj.analysis.projection import (
    fat_weight,
    fatband_weights,
    ion_groups_from_counts,
    partial_dos,
    select_pdos_curve,
    selected_pdos,
    typed_pdos,
    typed_pdos_by_groups,
)

__all__ = [
    # Projection
    "fat_weight",
    "fatband_weights",
    "ion_groups_from_counts",
    "partial_dos",
    "select_pdos_curve",
    "selected_pdos",
    "typed_pdos",
    "typed_pdos_by_groups",
    # DOS
    "energy_at_electrons",
    "fermi_from_electron_count",
    # Orbitals
    "orbital_labels",
    "resolve_orbitals",
]
