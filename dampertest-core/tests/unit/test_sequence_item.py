"""Tests for sequence item types."""

import dataclasses

import pytest

from dampertest_core.types.sequence import SequenceItem


class TestSequenceItem:
    """Tests for SequenceItem."""

    @pytest.fixture
    def item(self) -> SequenceItem:
        """Create an uncompleted item."""
        return SequenceItem(floor_number="03", location="Smoke Shaft", shaft_id="SS1-2")

    def test_defaults(self, item: SequenceItem) -> None:
        """Test a new item is not completed and has no test."""
        assert item.completed is False
        assert item.test_id is None

    def test_frozen(self, item: SequenceItem) -> None:
        """Test items cannot be mutated in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.completed = True  # type: ignore[misc]

    def test_mark_completed(self, item: SequenceItem) -> None:
        """Test marking complete returns a new completed item."""
        done = item.mark_completed(test_id="t-42")

        assert done.completed is True
        assert done.test_id == "t-42"
        assert done.floor_number == "03"
        assert item.completed is False

    def test_mark_completed_without_test(self, item: SequenceItem) -> None:
        """Test marking complete with no test record."""
        done = item.mark_completed()
        assert done.completed is True
        assert done.test_id is None

    def test_reset(self, item: SequenceItem) -> None:
        """Test reset clears completion and test association."""
        reset = item.mark_completed("t-1").reset()
        assert reset == item

    def test_label(self, item: SequenceItem) -> None:
        """Test operator-facing label."""
        assert item.label == "Floor 03 · Smoke Shaft - SS1-2"

    def test_test_prefill(self, item: SequenceItem) -> None:
        """Test fields used to pre-populate a test record."""
        assert item.test_prefill("Block A") == {
            "building": "Block A",
            "location": "Smoke Shaft",
            "floor_number": "03",
            "shaft_id": "SS1-2",
        }

    def test_to_dict(self, item: SequenceItem) -> None:
        """Test serialization."""
        d = item.mark_completed("t-9").to_dict()
        assert d == {
            "floor_number": "03",
            "location": "Smoke Shaft",
            "shaft_id": "SS1-2",
            "completed": True,
            "test_id": "t-9",
        }

    def test_from_dict_defaults(self) -> None:
        """Test deserialization fills optional fields."""
        item = SequenceItem.from_dict(
            {"floor_number": "00", "location": "Lobby", "shaft_id": "SS2"}
        )
        assert item == SequenceItem(floor_number="00", location="Lobby", shaft_id="SS2")
