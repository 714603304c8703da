"""DOS helpers: Fermi energy estimate at a hypothetical electron count.

Only requires numpy.

Example::

    from bandproj.analysis.dos import fermi_from_electron_count

    # 72 valence electrons in the cell (POTCAR ZVAL x ions)
    e_f = fermi_from_electron_count(dos, 72)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from bandproj.core.errors import DimensionMismatchError

if TYPE_CHECKING:
    from bandproj.backends.base import DosCollection

logger = logging.getLogger(__name__)


def energy_at_electrons(
    energies: Any,
    integrated_dos: Any,
    electron_count: float,
) -> float:
    """Energy at which the integrated DOS reaches ``electron_count``.

    Finds the first grid point whose integrated DOS is at least
    ``electron_count`` and interpolates linearly towards the point before it.

    Args:
        energies: Shape ``(npts,)`` ascending energy grid in eV.
        integrated_dos: Shape ``(npts,)`` non-decreasing integrated DOS.
        electron_count: Target number of electrons.

    Returns:
        Estimated Fermi energy in eV.

    Raises:
        DimensionMismatchError: If the two series differ in length.
        ValueError: If ``electron_count`` lies outside the integrated-DOS range.
    """
    e = np.asarray(energies, dtype=float)
    n = np.asarray(integrated_dos, dtype=float)
    if e.shape != n.shape or e.ndim != 1:
        raise DimensionMismatchError(
            f"energies {e.shape} and integrated DOS {n.shape} must be equal-length 1-D series"
        )
    if e.size == 0:
        raise ValueError("Electron count invalid: integrated DOS is empty")
    if electron_count < n[0] or electron_count > n[-1]:
        raise ValueError(
            f"Electron count invalid: {electron_count} outside "
            f"integrated DOS range [{n[0]}, {n[-1]}]"
        )

    i = int(np.searchsorted(n, electron_count, side="left"))
    if i == 0 or n[i] == electron_count:
        return float(e[i])

    slope = (n[i] - n[i - 1]) / (e[i] - e[i - 1])
    if slope == 0:
        return float(e[i])
    intercept = n[i] - slope * e[i]
    energy = (electron_count - intercept) / slope
    logger.debug("energy_at_electrons(%s) = %.4f eV (grid index %d)", electron_count, energy, i)
    return float(energy)


def fermi_from_electron_count(dos: "DosCollection", electron_count: float) -> float:
    """:func:`energy_at_electrons` on a :class:`DosCollection`.

    Raises:
        ValueError: If ``dos`` has no integrated DOS, or the count is out of range.
    """
    if dos.integrated_dos is None:
        raise ValueError("DOS data has no integrated DOS; cannot locate an electron count")
    return energy_at_electrons(dos.energies, dos.integrated_dos, electron_count)
