"""pymatgen-backed providers for projected bands and DOS.

PROCAR and vasprun.xml decoding is delegated to pymatgen; this module only
reorders its output into the axis conventions bandproj reduces over:

* ``BandTensor.projections`` is ``(norbitals, nions, nkpts, nbands)``
  (pymatgen's ``Procar.data[spin]`` is ``(nkpts, nbands, nions, norbitals)``).
* ``DosCollection.pdos`` holds one ``(norbitals, npts)`` matrix per ion with
  orbitals in VASP column order.

Requires pymatgen::

    pip install bandproj[vasp]

Example::

    from bandproj.backends.vasp_providers import load_procar, load_vasprun_dos

    bands = load_procar("PROCAR", fermi_energy=6.2222)
    dos = load_vasprun_dos("vasprun.xml")
"""

from __future__ import annotations

import logging
from typing import Any, List

import numpy as np

from bandproj.backends.base import BandTensor, DosCollection

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Optional dependency guard
# ---------------------------------------------------------------------------

try:
    from pymatgen.electronic_structure.core import Spin
    from pymatgen.io.vasp.outputs import Procar, Vasprun

    _PYMATGEN_AVAILABLE = True
except ImportError:
    _PYMATGEN_AVAILABLE = False


def is_pymatgen_available() -> bool:
    """Check if pymatgen's VASP output readers are installed."""
    return _PYMATGEN_AVAILABLE


def _ensure_pymatgen_available() -> None:
    """Raise ImportError if pymatgen is not available."""
    if not _PYMATGEN_AVAILABLE:
        raise ImportError(
            "Reading PROCAR / vasprun.xml requires pymatgen. "
            "Install with: pip install bandproj[vasp]"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def band_tensor_from_procar(
    procar: Any,
    spin: str = "up",
    fermi_energy: float = 0.0,
) -> BandTensor:
    """Convert a pymatgen ``Procar`` into a :class:`BandTensor`.

    Args:
        procar: ``pymatgen.io.vasp.outputs.Procar`` instance.
        spin: ``"up"`` or ``"down"``.
        fermi_energy: Fermi energy in eV.  PROCAR does not record it; take
            it from OUTCAR or vasprun.xml.

    Raises:
        ImportError: If pymatgen is not installed.
        ValueError: If ``spin`` is unknown or missing from the PROCAR.
    """
    _ensure_pymatgen_available()

    key = _resolve_spin(spin)
    if key not in procar.data:
        raise ValueError(f"PROCAR has no spin channel {spin!r}")

    projections = np.transpose(np.asarray(procar.data[key], dtype=float), (3, 2, 0, 1))
    energies = np.asarray(procar.eigenvalues[key], dtype=float)

    logger.info(
        "PROCAR: %d k-points, %d bands, %d ions, %d orbitals (spin %s)",
        energies.shape[0], energies.shape[1], projections.shape[1],
        projections.shape[0], spin,
    )
    return BandTensor(
        energies=energies,
        projections=projections,
        fermi_energy=float(fermi_energy),
        orbital_labels=list(procar.orbitals),
        source="procar",
    )


def dos_collection_from_vasprun(vasprun: Any, spin: str = "total") -> DosCollection:
    """Convert a pymatgen ``Vasprun`` with parsed DOS into a :class:`DosCollection`.

    Args:
        vasprun: ``pymatgen.io.vasp.outputs.Vasprun`` parsed with
            ``parse_dos=True``.
        spin: ``"up"``, ``"down"`` or ``"total"`` (sum of both channels;
            identical to ``"up"`` for non-spin-polarised runs).

    Raises:
        ImportError: If pymatgen is not installed.
        ValueError: If ``spin`` is unknown or missing from the run.
    """
    _ensure_pymatgen_available()

    total_dos = _pick_channel(vasprun.tdos.densities, spin)
    integrated = None
    if getattr(vasprun, "idos", None) is not None:
        integrated = _pick_channel(vasprun.idos.densities, spin)

    pdos: List[Any] = []
    labels: List[str] = []
    for site_dos in vasprun.pdos:
        orbitals = sorted(site_dos, key=lambda orb: orb.value)
        if not labels:
            labels = [str(orb) for orb in orbitals]
        pdos.append(np.vstack([_pick_channel(site_dos[orb], spin) for orb in orbitals]))

    logger.info(
        "vasprun DOS: %d points, %d projected ions, E_F = %.4f eV",
        len(vasprun.tdos.energies), len(pdos), vasprun.efermi,
    )
    return DosCollection(
        energies=np.asarray(vasprun.tdos.energies, dtype=float),
        total_dos=total_dos,
        fermi_energy=float(vasprun.efermi),
        integrated_dos=integrated,
        pdos=pdos,
        orbital_labels=labels,
        source="vasprun",
    )


def load_procar(path: str, spin: str = "up", fermi_energy: float = 0.0) -> BandTensor:
    """Read a PROCAR file with pymatgen and return a :class:`BandTensor`."""
    _ensure_pymatgen_available()
    return band_tensor_from_procar(Procar(path), spin=spin, fermi_energy=fermi_energy)


def load_vasprun_dos(path: str, spin: str = "total") -> DosCollection:
    """Read the DOS of a vasprun.xml with pymatgen and return a :class:`DosCollection`."""
    _ensure_pymatgen_available()
    vasprun = Vasprun(path, parse_dos=True, parse_eigen=False, parse_potcar_file=False)
    return dos_collection_from_vasprun(vasprun, spin=spin)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_spin(spin: str) -> "Spin":
    if spin == "up":
        return Spin.up
    if spin == "down":
        return Spin.down
    raise ValueError(f"Unknown spin channel {spin!r}; expected 'up' or 'down'")


def _pick_channel(densities: Any, spin: str) -> np.ndarray:
    """Select one spin channel of a pymatgen ``{Spin: array}`` dict, or sum them."""
    if spin == "total":
        return np.sum([np.asarray(v, dtype=float) for v in densities.values()], axis=0)
    key = _resolve_spin(spin)
    if key not in densities:
        raise ValueError(f"DOS has no spin channel {spin!r}")
    return np.asarray(densities[key], dtype=float)
