"""Line-mode KPOINTS parser.

Reads the high-symmetry path of a VASP ``KPOINTS`` file written in line
mode and returns a :class:`~bandproj.backends.base.KPathSpec` with the
segment length, the raw labels and the merged x-axis tick labels.

File layout
-----------
::

    k-path for fcc                 <- line 1: comment (ignored)
    40                             <- line 2: k-points per segment
    Line-mode                      <- line 3: mode marker (ignored)
    reciprocal                     <- line 4: coordinate system (ignored)
    0.0 0.0 0.0 1 G                <- label lines: x y z weight label
    0.5 0.0 0.5 1 X

    0.5 0.0 0.5 1 X
    0.5 0.25 0.75 1 W

Only lines with exactly five whitespace-separated fields contribute a label;
blank separators, comments and anything else are skipped.

Usage::

    from bandproj.backends.kpoints_parser import parse_kpath_file

    kpath = parse_kpath_file("KPOINTS")
    kpath.tick_labels      # ('G', 'X', 'W')
    kpath.tick_positions   # [0, 39, 79]
"""

from __future__ import annotations

import itertools
import logging
import os
from typing import Iterable, List, Optional, Sequence

from bandproj.backends.base import KPathSpec
from bandproj.core.errors import FormatError

logger = logging.getLogger(__name__)

HEADER_LINES = 4
LABEL_FIELD_COUNT = 5


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_kpath(lines: Iterable[str], separator: Optional[str] = None) -> KPathSpec:
    """Parse a line-mode KPOINTS text stream.

    Args:
        lines: Text lines of the file, in order (an open file object works).
        separator: String joining the two labels of a path discontinuity.
            Defaults to ``label_separator`` of the ``kpath`` config (``" | "``).

    Returns:
        ``KPathSpec`` with ``segment_length``, ``raw_labels`` and
        ``tick_labels``.

    Raises:
        FormatError: If the stream has fewer than 4 header lines, if the
            segment count on line 2 is missing, non-numeric or not positive,
            or if the number of labels is zero or odd.
    """
    it = iter(lines)
    header = list(itertools.islice(it, HEADER_LINES))
    if len(header) < HEADER_LINES:
        raise FormatError(
            f"KPOINTS header needs {HEADER_LINES} lines, got {len(header)}"
        )

    segment_length = _parse_segment_length(header[1])

    raw_labels: List[str] = []
    for lineno, line in enumerate(it, start=HEADER_LINES + 1):
        fields = line.split()
        if _is_label_line(fields):
            raw_labels.append(fields[LABEL_FIELD_COUNT - 1])
        elif fields:
            logger.debug("KPOINTS line %d skipped (%d fields)", lineno, len(fields))

    if not raw_labels:
        raise FormatError("KPOINTS file contains no high-symmetry labels")
    if len(raw_labels) % 2:
        raise FormatError(
            f"KPOINTS file has an odd number of high-symmetry labels "
            f"({len(raw_labels)}); every segment needs a start and an end point"
        )

    if separator is None:
        from bandproj._config_loader import load_config

        separator = load_config("kpath")["label_separator"]

    tick_labels = merge_tick_labels(raw_labels, separator)
    logger.info(
        "Parsed k-path: %d segments x %d points, ticks %s",
        len(raw_labels) // 2, segment_length, tick_labels,
    )
    return KPathSpec(
        segment_length=segment_length,
        raw_labels=tuple(raw_labels),
        tick_labels=tuple(tick_labels),
    )


def parse_kpath_file(path: str, separator: Optional[str] = None) -> KPathSpec:
    """Parse a line-mode KPOINTS file from disk.

    The file is closed before this function returns or raises.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        FormatError: See :func:`parse_kpath`.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"KPOINTS file not found: {path}")
    with open(path, encoding="utf-8") as fh:
        return parse_kpath(fh, separator=separator)


def merge_tick_labels(raw_labels: Sequence[str], separator: str = " | ") -> List[str]:
    """Merge paired segment-endpoint labels into one label per tick.

    The first and last labels pass through verbatim.  Each interior pair
    (end of one segment, start of the next) collapses to a single label when
    both are equal and is joined with ``separator`` otherwise.

    Examples::

        merge_tick_labels(["G", "X", "X", "M"])  # ['G', 'X', 'M']
        merge_tick_labels(["G", "X", "U", "M"])  # ['G', 'X | U', 'M']

    Raises:
        FormatError: If ``raw_labels`` is empty or has odd length.
    """
    n = len(raw_labels)
    if n == 0 or n % 2:
        raise FormatError(f"Expected a non-zero even number of labels, got {n}")

    ticks = [raw_labels[0]]
    for left, right in zip(raw_labels[1:-1:2], raw_labels[2:-1:2]):
        ticks.append(left if left == right else f"{left}{separator}{right}")
    ticks.append(raw_labels[-1])
    return ticks


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_segment_length(line: str) -> int:
    """Read the k-points-per-segment count from the first token of ``line``."""
    fields = line.split()
    if not fields:
        raise FormatError("KPOINTS line 2 is empty; expected the number of k-points per segment")
    try:
        value = int(fields[0])
    except ValueError as exc:
        raise FormatError(
            f"KPOINTS line 2 must start with an integer segment length, got {fields[0]!r}"
        ) from exc
    if value <= 0:
        raise FormatError(f"Segment length must be positive, got {value}")
    return value


def _is_label_line(fields: Sequence[str]) -> bool:
    """A label line carries ``x y z weight label``."""
    return len(fields) == LABEL_FIELD_COUNT
