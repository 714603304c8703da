"""Tests for bandproj.analysis.dos."""

from __future__ import annotations

import numpy as np
import pytest

from bandproj.analysis.dos import energy_at_electrons, fermi_from_electron_count
from bandproj.backends.base import DosCollection
from bandproj.core.errors import DimensionMismatchError


class TestEnergyAtElectrons:
    def test_linear_interpolation(self):
        energies = np.array([-2.0, -1.0, 0.0, 1.0])
        idos = np.array([0.0, 2.0, 4.0, 8.0])
        assert energy_at_electrons(energies, idos, 3.0) == pytest.approx(-0.5)
        assert energy_at_electrons(energies, idos, 6.0) == pytest.approx(0.5)

    def test_exact_grid_value(self):
        energies = np.array([-2.0, -1.0, 0.0])
        idos = np.array([0.0, 2.0, 4.0])
        assert energy_at_electrons(energies, idos, 2.0) == pytest.approx(-1.0)

    def test_lower_bound(self):
        energies = np.array([-2.0, -1.0])
        idos = np.array([1.0, 2.0])
        assert energy_at_electrons(energies, idos, 1.0) == pytest.approx(-2.0)

    def test_upper_bound(self):
        energies = np.array([-2.0, -1.0])
        idos = np.array([1.0, 2.0])
        assert energy_at_electrons(energies, idos, 2.0) == pytest.approx(-1.0)

    def test_gap_plateau_picks_first_reaching_point(self):
        """Inside a gap the integrated DOS is flat; the first point reaching the count wins."""
        energies = np.array([0.0, 1.0, 2.0, 3.0])
        idos = np.array([0.0, 4.0, 4.0, 6.0])
        assert energy_at_electrons(energies, idos, 4.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("count", [-0.1, 8.1])
    def test_out_of_range(self, count):
        energies = np.array([0.0, 1.0])
        idos = np.array([0.0, 8.0])
        with pytest.raises(ValueError, match="Electron count invalid"):
            energy_at_electrons(energies, idos, count)

    def test_empty_series(self):
        with pytest.raises(ValueError, match="Electron count invalid"):
            energy_at_electrons([], [], 1.0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            energy_at_electrons([0.0, 1.0], [0.0], 0.5)


class TestFermiFromElectronCount:
    def test_on_collection(self, dos_collection):
        target = float(dos_collection.integrated_dos[75])
        energy = fermi_from_electron_count(dos_collection, target)
        assert energy == pytest.approx(dos_collection.energies[75])

    def test_monotonic_in_count(self, dos_collection):
        idos = dos_collection.integrated_dos
        low = fermi_from_electron_count(dos_collection, 0.25 * idos[-1])
        high = fermi_from_electron_count(dos_collection, 0.75 * idos[-1])
        assert low < high

    def test_requires_integrated_dos(self):
        dos = DosCollection(energies=np.arange(3.0), total_dos=np.ones(3))
        with pytest.raises(ValueError, match="no integrated DOS"):
            fermi_from_electron_count(dos, 1.0)
