import textwrap

import pytest

from bandproj._config_loader import clear_cache


# ---------------------------------------------------------------------------
# K-path fixtures
# ---------------------------------------------------------------------------


FCC_KPOINTS = textwrap.dedent("""\
    k-path for fcc (generated)
    40   ! intersections
    Line-mode
    reciprocal
       0.000  0.000  0.000   1   G
       0.500  0.000  0.500   1   X

       0.500  0.000  0.500   1   X
       0.500  0.250  0.750   1   W

       0.500  0.250  0.750   1   W
       0.375  0.375  0.750   1   K

       0.375  0.375  0.750   1   K
       0.000  0.000  0.000   1   G

       0.625  0.250  0.625   1   U
       0.500  0.500  0.500   1   L
""")


@pytest.fixture
def fcc_kpoints_text():
    """Line-mode KPOINTS with four connected segments and one discontinuity (G -> U)."""
    return FCC_KPOINTS


@pytest.fixture
def fcc_kpoints_path(tmp_path):
    """The fcc KPOINTS text written to disk."""
    path = tmp_path / "KPOINTS"
    path.write_text(FCC_KPOINTS)
    return str(path)


# ---------------------------------------------------------------------------
# Projection fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def projection_tensor():
    """Synthetic (9 orbitals, 4 ions, 20 k-points, 6 bands) tensor.

    Weights are non-negative and sum to exactly 1 over orbitals and ions for
    every (k-point, band).
    """
    import numpy as np

    rng = np.random.default_rng(7)
    tensor = rng.random((9, 4, 20, 6))
    return tensor / tensor.sum(axis=(0, 1), keepdims=True)


@pytest.fixture
def band_tensor(projection_tensor):
    """BandTensor wrapping ``projection_tensor``."""
    import numpy as np
    from bandproj.backends.base import BandTensor

    nkpts, nbands = projection_tensor.shape[2:]
    energies = np.tile(np.linspace(-8.0, 4.0, nbands), (nkpts, 1))
    return BandTensor(
        energies=energies,
        projections=projection_tensor,
        fermi_energy=0.5,
        orbital_labels=["s", "py", "pz", "px", "dxy", "dyz", "dz2", "dxz", "dx2-y2"],
        source="test",
    )


@pytest.fixture
def dos_collection():
    """Synthetic DOS: 6 ions (4 of type A, 2 of type B), 9 orbitals, 151 points."""
    import numpy as np
    from bandproj.backends.base import DosCollection

    energies = np.linspace(-10.0, 5.0, 151)
    rng = np.random.default_rng(3)
    pdos = [rng.random((9, energies.size)) for _ in range(6)]
    total = np.sum([m.sum(axis=0) for m in pdos], axis=0)
    integrated = np.cumsum(total) * (energies[1] - energies[0])
    return DosCollection(
        energies=energies,
        total_dos=total,
        fermi_energy=1.25,
        integrated_dos=integrated,
        pdos=pdos,
        source="test",
    )


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Every test starts from an empty config cache."""
    clear_cache()
    yield
    clear_cache()
