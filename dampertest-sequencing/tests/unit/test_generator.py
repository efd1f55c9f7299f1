"""Tests for sequence generation."""

import pytest

from dampertest_core.errors import SequenceParameterError
from dampertest_core.types.sequence import SequenceItem

from dampertest_sequencing.generator import (
    SequenceParameters,
    format_floor,
    generate_sequence,
)


class TestFormatFloor:
    """Tests for format_floor."""

    @pytest.mark.parametrize(
        ("floor", "label"),
        [(0, "00"), (3, "03"), (11, "11"), (120, "120"), (-1, "-1")],
    )
    def test_padding(self, floor: int, label: str) -> None:
        """Test labels are zero-padded to at least 2 digits."""
        assert format_floor(floor) == label


class TestGenerateSequence:
    """Tests for generate_sequence."""

    def test_concrete_scenario(self) -> None:
        """Test two floors with one damper each."""
        items = generate_sequence(0, 2, 1, "Smoke Shaft", "SS1")

        assert items == [
            SequenceItem(floor_number="00", location="Smoke Shaft", shaft_id="SS1"),
            SequenceItem(floor_number="01", location="Smoke Shaft", shaft_id="SS1"),
        ]

    @pytest.mark.parametrize("floor_count", [1, 2, 7])
    @pytest.mark.parametrize("dampers", [1, 3, 12])
    def test_size(self, floor_count: int, dampers: int) -> None:
        """Test output size is floors times dampers."""
        items = generate_sequence(5, floor_count, dampers, "Smoke Shaft", "SS1")
        assert len(items) == floor_count * dampers

    def test_floor_major_order(self) -> None:
        """Test every damper on a floor precedes the next floor."""
        items = generate_sequence(4, 3, 2, "Smoke Shaft", "SS1")

        assert [i.floor_number for i in items] == ["04", "04", "05", "05", "06", "06"]
        assert [i.shaft_id for i in items] == ["SS1-1", "SS1-2"] * 3

    def test_single_damper_has_no_suffix(self) -> None:
        """Test a single damper per floor uses the prefix exactly."""
        items = generate_sequence(0, 4, 1, "Stair Core", "SC2")
        assert {i.shaft_id for i in items} == {"SC2"}

    def test_location_applied_to_all(self) -> None:
        """Test the location label is copied to each item."""
        items = generate_sequence(0, 2, 2, "Car Park", "CP")
        assert all(i.location == "Car Park" for i in items)
        assert not any(i.completed for i in items)

    def test_negative_start_floor(self) -> None:
        """Test basement floors are generated in ascending order."""
        items = generate_sequence(-2, 3, 1, "Smoke Shaft", "SS1")
        assert [i.floor_number for i in items] == ["-2", "-1", "00"]

    @pytest.mark.parametrize(("floor_count", "dampers"), [(0, 1), (1, 0), (-3, 1), (2, -1)])
    def test_rejects_counts_below_one(self, floor_count: int, dampers: int) -> None:
        """Test zero and negative counts are rejected."""
        with pytest.raises(SequenceParameterError):
            generate_sequence(0, floor_count, dampers, "Smoke Shaft", "SS1")

    def test_rejects_non_integer(self) -> None:
        """Test non-integer counts are rejected."""
        with pytest.raises(SequenceParameterError, match="floor_count"):
            generate_sequence(0, "3", 1, "Smoke Shaft", "SS1")  # type: ignore[arg-type]
        with pytest.raises(SequenceParameterError, match="dampers_per_floor"):
            generate_sequence(0, 3, True, "Smoke Shaft", "SS1")


class TestSequenceParameters:
    """Tests for SequenceParameters."""

    def test_defaults(self) -> None:
        """Test defaults match the new-session form."""
        params = SequenceParameters()

        assert params.start_floor == 0
        assert params.floor_count == 10
        assert params.dampers_per_floor == 1
        assert params.location == "Smoke Shaft"
        assert params.shaft_id_prefix == "SS1"

    def test_item_count(self) -> None:
        """Test the preview count."""
        assert SequenceParameters(floor_count=6, dampers_per_floor=3).item_count == 18

    def test_top_floor(self) -> None:
        """Test the highest floor covered."""
        assert SequenceParameters(start_floor=2, floor_count=5).top_floor == 6

    def test_generate(self) -> None:
        """Test generate() matches generate_sequence()."""
        params = SequenceParameters(start_floor=1, floor_count=2, dampers_per_floor=2)
        assert params.generate() == generate_sequence(1, 2, 2, "Smoke Shaft", "SS1")

    def test_validate(self) -> None:
        """Test validation rejects an empty layout."""
        SequenceParameters().validate()
        with pytest.raises(SequenceParameterError):
            SequenceParameters(floor_count=0).validate()
