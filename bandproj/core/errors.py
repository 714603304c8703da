"""Exception hierarchy for bandproj.

Every error is raised synchronously to the immediate caller. Nothing in the
package retries or recovers; the presentation layer decides what to show.
"""


class BandprojError(Exception):
    """Base class for all bandproj errors."""


class FormatError(BandprojError, ValueError):
    """Raised when a k-path text source is malformed.

    Covers a header shorter than four lines, a missing or non-numeric
    segment count, and an odd (or empty) list of high-symmetry labels.
    """


class SelectionError(BandprojError, IndexError):
    """Raised when an orbital, ion, type or curve selection is out of range or empty."""


class DimensionMismatchError(BandprojError, ValueError):
    """Raised when array shapes or ion partitions do not line up.

    Examples: per-type ion counts that do not sum to the number of per-ion
    pDOS matrices, or a projection tensor whose ``(nkpts, nbands)`` axes
    disagree with the energy matrix.
    """
