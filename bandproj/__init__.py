"""bandproj: k-path labels and orbital-projection reductions for band/DOS plots."""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy import for the most used entry points."""
    if name in ("parse_kpath", "parse_kpath_file"):
        from bandproj.backends import kpoints_parser

        globals()[name] = getattr(kpoints_parser, name)
        return globals()[name]
    if name in ("fat_weight", "typed_pdos"):
        from bandproj.analysis import projection

        globals()[name] = getattr(projection, name)
        return globals()[name]
    raise AttributeError(f"module 'bandproj' has no attribute {name!r}")


__all__ = ["fat_weight", "parse_kpath", "parse_kpath_file", "typed_pdos", "__version__"]
