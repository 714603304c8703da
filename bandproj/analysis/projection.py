"""Orbital/ion projection reductions for fatbands and partial DOS.

Two reductions share one pattern, a sum over a selected index set:

* :func:`fat_weight` collapses a ``(norbitals, nions, nkpts, nbands)``
  projection tensor onto ``(nkpts, nbands)`` marker weights.
* :func:`typed_pdos` collapses an ion-ordered list of ``(norbitals, npts)``
  pDOS matrices onto one matrix per ion type.

Both are pure functions over in-memory arrays.  Whether projection data
exists at all is decided by the caller (``BandTensor.has_projections`` /
``DosCollection.has_projections``); the ``Selection``-level helpers at the
bottom of this module are that caller.

Example::

    from bandproj.analysis.projection import fat_weight, typed_pdos

    weights = fat_weight(bands.projections, orbitals=range(4, 9), ions=range(6))
    per_type = typed_pdos(dos.pdos, counts_per_type=[12, 4])
    curve = per_type[1][3]          # p_x of the second ion type
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any, Iterable, List, Sequence, Union

import numpy as np

from bandproj.core.errors import DimensionMismatchError, SelectionError

if TYPE_CHECKING:
    from bandproj.backends.base import BandTensor, DosCollection
    from bandproj.core.schemas import Selection

logger = logging.getLogger(__name__)

IndexSelection = Union[int, Iterable[int]]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _validate_indices(selection: IndexSelection, size: int, kind: str) -> List[int]:
    """Normalise a selection to sorted unique indices within ``[0, size)``.

    Raises:
        SelectionError: If the selection is empty, contains a non-integer,
            or references an index outside the valid range.
    """
    if isinstance(selection, (int, np.integer)):
        selection = [selection]
    try:
        indices = sorted({operator.index(i) for i in selection})
    except TypeError as exc:
        raise SelectionError(f"{kind} indices must be integers, got {selection!r}") from exc

    if not indices:
        raise SelectionError(f"{kind} selection is empty")
    bad = [i for i in indices if i < 0 or i >= size]
    if bad:
        raise SelectionError(
            f"{kind} indices {bad} out of range; valid range is 0..{size - 1}"
        )
    return indices


def _stack_matrices(per_ion_matrices: Sequence[Any]) -> List[np.ndarray]:
    """Convert per-ion pDOS matrices to float arrays of one common shape."""
    if len(per_ion_matrices) == 0:
        raise DimensionMismatchError("no per-ion pDOS matrices supplied")
    matrices = [np.asarray(m, dtype=float) for m in per_ion_matrices]
    shape = matrices[0].shape
    for ion, matrix in enumerate(matrices):
        if matrix.shape != shape:
            raise DimensionMismatchError(
                f"pDOS matrix of ion {ion} has shape {matrix.shape}, expected {shape}"
            )
    return matrices


# ---------------------------------------------------------------------------
# Fatband weights
# ---------------------------------------------------------------------------


def fat_weight(
    tensor: Any,
    orbitals: IndexSelection,
    ions: IndexSelection,
) -> np.ndarray:
    """Sum projection weights over selected orbitals and ions.

    For every (k-point, band) pair the result holds
    ``sum(tensor[o, i, k, b] for o in orbitals for i in ions)``.  Repeated
    indices count once.  The reduction is linear: for disjoint orbital sets
    ``A`` and ``B``, ``fat_weight(t, A | B, ions) == fat_weight(t, A, ions)
    + fat_weight(t, B, ions)``.

    Args:
        tensor: Shape ``(norbitals, nions, nkpts, nbands)`` projection array.
        orbitals: Orbital index or indices (0-based).
        ions: Ion index or indices (0-based).

    Returns:
        Shape ``(nkpts, nbands)`` array of non-negative weights, to be scaled
        into marker sizes by the renderer.

    Raises:
        SelectionError: If ``orbitals`` or ``ions`` is empty or out of range.
        DimensionMismatchError: If ``tensor`` is not 4-D.
    """
    proj = np.asarray(tensor, dtype=float)
    if proj.ndim != 4:
        raise DimensionMismatchError(
            f"projection tensor must be (norbitals, nions, nkpts, nbands), got shape {proj.shape}"
        )

    orb_idx = _validate_indices(orbitals, proj.shape[0], "orbital")
    ion_idx = _validate_indices(ions, proj.shape[1], "ion")

    weights = proj[np.ix_(orb_idx, ion_idx)].sum(axis=(0, 1))
    logger.debug(
        "fat_weight: %d orbitals x %d ions -> %s", len(orb_idx), len(ion_idx), weights.shape
    )
    return weights


# ---------------------------------------------------------------------------
# Per-type partial DOS
# ---------------------------------------------------------------------------


def ion_groups_from_counts(counts_per_type: Sequence[int]) -> List[List[int]]:
    """Expand per-type ion counts into contiguous 0-based ion index lists.

    ``[2, 3]`` becomes ``[[0, 1], [2, 3, 4]]``.

    Raises:
        DimensionMismatchError: If a count is negative.
    """
    groups: List[List[int]] = []
    cursor = 0
    for count in counts_per_type:
        count = operator.index(count)
        if count < 0:
            raise DimensionMismatchError(f"ion counts must be non-negative, got {count}")
        groups.append(list(range(cursor, cursor + count)))
        cursor += count
    return groups


def typed_pdos(
    per_ion_matrices: Sequence[Any],
    counts_per_type: Sequence[int],
) -> List[np.ndarray]:
    """Sum per-ion pDOS matrices into one matrix per ion type.

    The flat ion list is cut into contiguous runs whose lengths are given by
    ``counts_per_type``, in order, and each run is summed element-wise.

    Ordering contract: the ion order of ``per_ion_matrices`` must match the
    declaration order of ``counts_per_type`` (the POSCAR species order).
    Counts alone cannot detect a mismatched order; a wrong order produces
    wrong sums without an error.  Use :func:`typed_pdos_by_groups` with
    explicit ion indices when the ordering is not guaranteed.

    Args:
        per_ion_matrices: One ``(norbitals, npts)`` matrix per ion.
        counts_per_type: Number of ions of each type.

    Returns:
        One ``(norbitals, npts)`` matrix per type.  A type with zero ions
        yields a zero matrix.

    Raises:
        DimensionMismatchError: If the counts do not sum to the number of
            matrices, a count is negative, the matrices disagree in shape, or
            no matrices are given.
    """
    matrices = _stack_matrices(per_ion_matrices)
    counts = [operator.index(c) for c in counts_per_type]
    if any(c < 0 for c in counts):
        raise DimensionMismatchError(f"ion counts must be non-negative, got {counts}")
    if sum(counts) != len(matrices):
        raise DimensionMismatchError(
            f"ion counts {counts} sum to {sum(counts)}, "
            f"but {len(matrices)} per-ion pDOS matrices were supplied"
        )

    summed: List[np.ndarray] = []
    cursor = 0
    for count in counts:
        total = np.zeros_like(matrices[0])
        for matrix in matrices[cursor:cursor + count]:
            total += matrix
        summed.append(total)
        cursor += count

    logger.debug("typed_pdos: %d ions -> %d types %s", len(matrices), len(counts), counts)
    return summed


def typed_pdos_by_groups(
    per_ion_matrices: Sequence[Any],
    ion_groups: Sequence[Sequence[int]],
) -> List[np.ndarray]:
    """Sum per-ion pDOS matrices over explicit ion index lists.

    Unlike :func:`typed_pdos`, every type names its ions, so a structure
    whose species are not stored contiguously is still summed correctly.

    Args:
        per_ion_matrices: One ``(norbitals, npts)`` matrix per ion.
        ion_groups: One list of 0-based ion indices per type.

    Returns:
        One ``(norbitals, npts)`` matrix per group.

    Raises:
        SelectionError: If a group is empty or references a missing ion.
        DimensionMismatchError: If the matrices disagree in shape or none
            are given.
    """
    matrices = _stack_matrices(per_ion_matrices)
    summed = []
    for group in ion_groups:
        indices = _validate_indices(group, len(matrices), "ion")
        summed.append(np.sum([matrices[i] for i in indices], axis=0))
    return summed


def select_pdos_curve(
    typed: Sequence[np.ndarray],
    type_index: int,
    orbital_index: int,
) -> np.ndarray:
    """Pick one orbital row of one ion type from :func:`typed_pdos` output.

    Raises:
        SelectionError: If either index is out of range.
    """
    if not 0 <= type_index < len(typed):
        raise SelectionError(
            f"ion type {type_index} out of range; {len(typed)} types available"
        )
    matrix = typed[type_index]
    if not 0 <= orbital_index < matrix.shape[0]:
        raise SelectionError(
            f"orbital {orbital_index} out of range; pDOS has {matrix.shape[0]} orbitals"
        )
    return matrix[orbital_index]


# ---------------------------------------------------------------------------
# Selection-level entry points
# ---------------------------------------------------------------------------


def fatband_weights(band: "BandTensor", selection: "Selection") -> np.ndarray:
    """Fatband weights of ``selection.orbitals`` on ``selection.ions``.

    Raises:
        ValueError: If ``band`` carries no projections (fatbands cannot be
            drawn; skip the fatband layer instead).
        SelectionError: See :func:`fat_weight`.
    """
    if not band.has_projections:
        raise ValueError("band data has no orbital projections; fatbands are unavailable")
    return fat_weight(band.projections, selection.orbitals, selection.ions)


def partial_dos(dos: "DosCollection", selection: "Selection") -> List[np.ndarray]:
    """Per-type pDOS matrices partitioned by ``selection.ion_counts``.

    Raises:
        ValueError: If ``dos`` has no projected DOS.
        DimensionMismatchError: See :func:`typed_pdos`.
    """
    if not dos.has_projections:
        raise ValueError("DOS data has no per-ion projections; pDOS is unavailable")
    return typed_pdos(dos.pdos, selection.ion_counts)


def selected_pdos(dos: "DosCollection", selection: "Selection") -> np.ndarray:
    """The single pDOS curve chosen by ``selection.type_index`` / ``orbital_index``."""
    return select_pdos_curve(
        partial_dos(dos, selection), selection.type_index, selection.orbital_index
    )
