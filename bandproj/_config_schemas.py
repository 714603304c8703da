"""Pydantic schemas for validating YAML config files.

Both packaged configs are validated: a typo in an orbital label would
silently select the wrong projection column, and an empty separator would
make path discontinuities invisible on the tick axis.
"""

from __future__ import annotations

from typing import Dict, List, Type

from pydantic import BaseModel, field_validator


class KPathConfig(BaseModel):
    """Validates kpath.yaml structure."""

    label_separator: str = " | "

    @field_validator("label_separator")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("label_separator must contain a visible character")
        return v


class OrbitalTableConfig(BaseModel):
    """Validates orbitals.yaml structure.

    ``lm_decomposed`` follows the PROCAR / DOSCAR column order of
    ``LORBIT = 11``; ``l_decomposed`` the order of ``LORBIT = 10``.
    """

    lm_decomposed: List[str]
    l_decomposed: List[str]

    @field_validator("lm_decomposed", "l_decomposed")
    @classmethod
    def must_be_unique_and_start_with_s(cls, v: List[str]) -> List[str]:
        if not v or v[0] != "s":
            raise ValueError("orbital table must start with 's'")
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate orbital labels in {v}")
        return v


# Registry of configs that have a Pydantic schema.
_SCHEMA_MAP: Dict[str, Type[BaseModel]] = {
    "kpath": KPathConfig,
    "orbitals": OrbitalTableConfig,
}


def validate_config(name: str, data: dict) -> dict:
    """Validate config data against its Pydantic schema if one exists.

    Returns the validated (and possibly coerced) data as a dict.
    Raises ``pydantic.ValidationError`` if schema check fails.
    Configs without a schema are passed through unchanged.
    """
    schema_cls = _SCHEMA_MAP.get(name)
    if schema_cls is None:
        return data
    validated = schema_cls.model_validate(data)
    return validated.model_dump()
