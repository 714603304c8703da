from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Tuple

import numpy as np

from bandproj.core.errors import DimensionMismatchError


@dataclass(frozen=True)
class KPathSpec:
    """Parsed line-mode k-path description.

    Produced by ``bandproj.backends.kpoints_parser.parse_kpath``.

    Attributes:
        segment_length: Number of k-points sampled between two consecutive
            high-symmetry points (constant along the path).
        raw_labels: One label per high-symmetry point as written in the file,
            two per segment, so shared endpoints appear twice.
        tick_labels: Merged label of every distinct x-axis tick.  Interior
            ticks join differing neighbours with a separator, e.g.
            ``"X | U"`` at a path discontinuity.
    """

    segment_length: int
    raw_labels: Tuple[str, ...]
    tick_labels: Tuple[str, ...]

    @property
    def num_raw_labels(self) -> int:
        return len(self.raw_labels)

    @property
    def num_segments(self) -> int:
        return len(self.raw_labels) // 2

    @property
    def num_kpoints(self) -> int:
        """Total number of k-points VASP writes for this path in line mode."""
        return self.num_segments * self.segment_length

    @property
    def tick_positions(self) -> List[int]:
        """0-based k-point index of each tick.

        The first tick sits on the first k-point; every following tick on
        the last k-point of its segment.
        """
        return [0] + [
            i * self.segment_length - 1 for i in range(1, self.num_segments + 1)
        ]

    def as_tuple(self) -> Tuple[int, int, Tuple[str, ...]]:
        """Return ``(segment_length, num_raw_labels, tick_labels)``."""
        return self.segment_length, self.num_raw_labels, self.tick_labels


@dataclass
class BandTensor:
    """Band energies with optional orbital/ion projections.

    Attributes:
        energies: Shape ``(nkpts, nbands)`` array of band energies in eV.
        projections: Shape ``(norbitals, nions, nkpts, nbands)`` array of
            non-negative projection weights, or ``None`` when the calculation
            was not projected.  Summed over all orbitals and ions the weights
            approach 1 for every (k-point, band).
        fermi_energy: Fermi energy in eV.
        orbital_labels: Label of each orbital row of ``projections``.
        source: Provider that produced this data (e.g. ``"procar"``).
    """

    energies: Any  # np.ndarray (nkpts, nbands), eV
    projections: Optional[Any] = None  # np.ndarray (norbitals, nions, nkpts, nbands)
    fermi_energy: float = 0.0
    orbital_labels: List[str] = field(default_factory=list)
    source: str = "unknown"

    def __post_init__(self) -> None:
        self.energies = np.asarray(self.energies, dtype=float)
        if self.energies.ndim != 2:
            raise DimensionMismatchError(
                f"energies must be (nkpts, nbands), got shape {self.energies.shape}"
            )
        if self.projections is None:
            return
        self.projections = np.asarray(self.projections, dtype=float)
        if self.projections.ndim != 4:
            raise DimensionMismatchError(
                "projections must be (norbitals, nions, nkpts, nbands), "
                f"got shape {self.projections.shape}"
            )
        if self.projections.shape[2:] != self.energies.shape:
            raise DimensionMismatchError(
                f"projection (nkpts, nbands) axes {self.projections.shape[2:]} "
                f"do not match energies {self.energies.shape}"
            )

    @property
    def nkpts(self) -> int:
        return self.energies.shape[0]

    @property
    def nbands(self) -> int:
        return self.energies.shape[1]

    @property
    def has_projections(self) -> bool:
        return self.projections is not None and self.projections.size > 0

    @property
    def norbitals(self) -> int:
        return self.projections.shape[0] if self.projections is not None else 0

    @property
    def nions(self) -> int:
        return self.projections.shape[1] if self.projections is not None else 0

    def shifted(self, offset: float) -> "BandTensor":
        """Return a copy with energies and Fermi energy moved by ``offset`` eV."""
        return replace(
            self,
            energies=self.energies + offset,
            fermi_energy=self.fermi_energy + offset,
        )


@dataclass
class DosCollection:
    """Total and per-ion orbital-projected density of states.

    Attributes:
        energies: Shape ``(npts,)`` energy grid in eV.
        total_dos: Shape ``(npts,)`` total DOS in states/eV.
        fermi_energy: Fermi energy in eV.
        integrated_dos: Shape ``(npts,)`` integrated DOS (number of
            electrons), if the provider has it.
        pdos: One ``(norbitals, npts)`` matrix per ion, in the ion order of
            the structure file.  Empty when the DOS was not projected.
        orbital_labels: Label of each orbital row of the pDOS matrices.
        source: Provider that produced this data (e.g. ``"vasprun"``).
    """

    energies: Any  # np.ndarray (npts,), eV
    total_dos: Any  # np.ndarray (npts,), states/eV
    fermi_energy: float = 0.0
    integrated_dos: Optional[Any] = None
    pdos: List[Any] = field(default_factory=list)
    orbital_labels: List[str] = field(default_factory=list)
    source: str = "unknown"

    def __post_init__(self) -> None:
        self.energies = np.asarray(self.energies, dtype=float)
        self.total_dos = np.asarray(self.total_dos, dtype=float)
        npts = self.energies.shape[0]
        if self.total_dos.shape != (npts,):
            raise DimensionMismatchError(
                f"total_dos shape {self.total_dos.shape} does not match "
                f"{npts} energy points"
            )
        if self.integrated_dos is not None:
            self.integrated_dos = np.asarray(self.integrated_dos, dtype=float)
            if self.integrated_dos.shape != (npts,):
                raise DimensionMismatchError(
                    f"integrated_dos shape {self.integrated_dos.shape} does not "
                    f"match {npts} energy points"
                )
        matrices = []
        for ion, matrix in enumerate(self.pdos):
            matrix = np.asarray(matrix, dtype=float)
            if matrix.ndim != 2 or matrix.shape[1] != npts:
                raise DimensionMismatchError(
                    f"pDOS of ion {ion} has shape {matrix.shape}, "
                    f"expected (norbitals, {npts})"
                )
            matrices.append(matrix)
        self.pdos = matrices

    @property
    def npts(self) -> int:
        return self.energies.shape[0]

    @property
    def nions(self) -> int:
        return len(self.pdos)

    @property
    def has_projections(self) -> bool:
        return len(self.pdos) > 0

    def shifted(self, offset: float) -> "DosCollection":
        """Return a copy with the energy grid and Fermi energy moved by ``offset`` eV."""
        return replace(
            self,
            energies=self.energies + offset,
            fermi_energy=self.fermi_energy + offset,
        )
