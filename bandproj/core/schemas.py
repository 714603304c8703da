from typing import List

from pydantic import BaseModel, Field, field_validator


def parse_index_spec(spec: str) -> List[int]:
    """Convert a 1-based, inclusive index expression into sorted 0-based indices.

    Accepts what users type into the notebooks: a single index (``"7"``),
    a range (``"1:6"``), a comma-separated list (``"5,7,9"``) or a mix of
    both (``"2:4, 9"``).

    Raises:
        ValueError: If a token is not an integer, a range is reversed, or an
            index is smaller than 1.
    """
    indices = set()
    for token in spec.split(","):
        token = token.strip()
        if not token:
            continue
        if ":" in token:
            start_s, _, stop_s = token.partition(":")
            try:
                start, stop = int(start_s), int(stop_s)
            except ValueError as exc:
                raise ValueError(f"Invalid index range {token!r}") from exc
            if stop < start:
                raise ValueError(f"Reversed index range {token!r}")
            block = range(start, stop + 1)
        else:
            try:
                block = range(int(token), int(token) + 1)
            except ValueError as exc:
                raise ValueError(f"Invalid index {token!r}") from exc
        if block.start < 1:
            raise ValueError(f"Indices are 1-based, got {token!r}")
        indices.update(i - 1 for i in block)
    return sorted(indices)


class Selection(BaseModel):
    """User-chosen aggregation parameters for fatbands and partial DOS.

    All indices are 0-based. ``ion_counts`` partitions the ion-ordered pDOS
    list into contiguous types in declaration order (POSCAR species order);
    the counts cannot prove that the ordering is right, which stays the
    caller's responsibility.
    """

    orbitals: List[int] = Field(
        default_factory=list,
        description="Orbital indices summed for fatband weights (e.g. [4, 5, 6, 7, 8] for d).",
    )
    ions: List[int] = Field(
        default_factory=list,
        description="Ion indices summed for fatband weights.",
    )
    ion_counts: List[int] = Field(
        default_factory=list,
        description="Number of ions per type, in the order ions appear in the structure.",
    )
    type_index: int = Field(default=0, ge=0, description="Ion type whose pDOS is plotted.")
    orbital_index: int = Field(default=0, ge=0, description="Orbital row of the plotted pDOS.")

    @field_validator("orbitals", "ions")
    @classmethod
    def dedupe_non_negative(cls, v: List[int]) -> List[int]:
        if any(i < 0 for i in v):
            raise ValueError(f"indices must be non-negative, got {v}")
        return sorted(set(v))

    @field_validator("ion_counts")
    @classmethod
    def counts_non_negative(cls, v: List[int]) -> List[int]:
        if any(c < 0 for c in v):
            raise ValueError(f"ion counts must be non-negative, got {v}")
        return v

    @classmethod
    def from_user_input(
        cls,
        orbitals: str,
        ions: str,
        **kwargs,
    ) -> "Selection":
        """Build a selection from 1-based notebook-style index expressions."""
        return cls(
            orbitals=parse_index_spec(orbitals),
            ions=parse_index_spec(ions),
            **kwargs,
        )
