"""Tests for bandproj.core.schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bandproj.core.schemas import Selection, parse_index_spec


class TestParseIndexSpec:
    @pytest.mark.parametrize("spec,expected", [
        ("1", [0]),
        ("1:6", [0, 1, 2, 3, 4, 5]),
        ("5,7,9", [4, 6, 8]),
        ("2:4, 9", [1, 2, 3, 8]),
        ("3,1:3", [0, 1, 2]),
        ("", []),
    ])
    def test_valid(self, spec, expected):
        assert parse_index_spec(spec) == expected

    @pytest.mark.parametrize("spec", ["a", "1:b", "6:1", "0", "0:3"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_index_spec(spec)


class TestSelection:
    def test_defaults(self):
        sel = Selection()
        assert sel.orbitals == []
        assert sel.ions == []
        assert sel.type_index == 0

    def test_indices_sorted_and_deduplicated(self):
        sel = Selection(orbitals=[8, 4, 4], ions=[2, 0])
        assert sel.orbitals == [4, 8]
        assert sel.ions == [0, 2]

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            Selection(orbitals=[-1])

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            Selection(ion_counts=[3, -1])

    def test_negative_type_index_rejected(self):
        with pytest.raises(ValidationError):
            Selection(type_index=-1)

    def test_from_user_input(self):
        sel = Selection.from_user_input("5:9", "1:6", ion_counts=[6, 2], type_index=1)
        assert sel.orbitals == [4, 5, 6, 7, 8]
        assert sel.ions == [0, 1, 2, 3, 4, 5]
        assert sel.ion_counts == [6, 2]
        assert sel.type_index == 1
