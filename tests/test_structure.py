"""Tests for bandproj.tools.structure (ASE helpers)."""

import pytest

pytest.importorskip("ase")

from ase import Atoms
from ase.build import bulk
from ase.io import write

from bandproj.tools.structure import ion_groups_by_species, read_ion_types, species_runs


def _yal3_like():
    """Y2Al6 in POSCAR species order."""
    return Atoms("Y2Al6", positions=[(i * 1.5, 0.0, 0.0) for i in range(8)],
                 cell=[12.0, 12.0, 12.0], pbc=True)


class TestSpeciesRuns:
    def test_contiguous_blocks(self):
        assert species_runs(_yal3_like()) == [("Y", 2), ("Al", 6)]

    def test_single_species(self):
        assert species_runs(bulk("Si", "diamond", a=5.43)) == [("Si", 2)]

    def test_split_species_gives_two_runs(self):
        atoms = Atoms("YAlY", positions=[(0, 0, 0), (2, 0, 0), (4, 0, 0)])
        assert species_runs(atoms) == [("Y", 1), ("Al", 1), ("Y", 1)]

    def test_counts_sum_to_ion_count(self):
        atoms = _yal3_like()
        assert sum(n for _, n in species_runs(atoms)) == len(atoms)


class TestIonGroupsBySpecies:
    def test_contiguous(self):
        assert ion_groups_by_species(_yal3_like()) == {
            "Y": [0, 1],
            "Al": [2, 3, 4, 5, 6, 7],
        }

    def test_interleaved(self):
        atoms = Atoms("YAlYAl", positions=[(i, 0, 0) for i in range(4)])
        assert ion_groups_by_species(atoms) == {"Y": [0, 2], "Al": [1, 3]}


class TestReadIonTypes:
    def test_reads_poscar(self, tmp_path):
        path = tmp_path / "POSCAR"
        write(str(path), _yal3_like(), format="vasp")
        assert read_ion_types(str(path)) == [("Y", 2), ("Al", 6)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Structure file not found"):
            read_ion_types(str(tmp_path / "POSCAR"))
