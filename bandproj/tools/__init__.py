"""Structure helpers built on ASE."""

from bandproj.tools.structure import ion_groups_by_species, read_ion_types, species_runs

__all__ = ["ion_groups_by_species", "read_ion_types", "species_runs"]
