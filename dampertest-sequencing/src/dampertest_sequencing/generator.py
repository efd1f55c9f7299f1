"""Sequence generator.

Expands building layout parameters into the ordered list of damper
inspection points an operator walks on site. Traversal is floor-major,
damper-minor: every damper on a floor is visited before moving up a floor.

Example:
    >>> items = generate_sequence(0, 2, 1, "Smoke Shaft", "SS1")
    >>> [(i.floor_number, i.shaft_id) for i in items]
    [('00', 'SS1'), ('01', 'SS1')]
"""

from __future__ import annotations

from dataclasses import dataclass

from dampertest_core.errors import SequenceParameterError
from dampertest_core.types.sequence import SequenceItem

DEFAULT_START_FLOOR = 0
DEFAULT_FLOOR_COUNT = 10
DEFAULT_DAMPERS_PER_FLOOR = 1
DEFAULT_LOCATION = "Smoke Shaft"
DEFAULT_SHAFT_ID_PREFIX = "SS1"


def format_floor(floor: int) -> str:
    """Format a floor number as a label zero-padded to at least 2 digits."""
    return f"{floor:02d}"


def _require_int(name: str, value: object, minimum: int | None = None) -> None:
    # bool is an int subclass but never a meaningful floor or count
    if isinstance(value, bool) or not isinstance(value, int):
        raise SequenceParameterError(f"{name} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise SequenceParameterError(f"{name} must be at least {minimum}, got {value}")


def generate_sequence(
    start_floor: int,
    floor_count: int,
    dampers_per_floor: int,
    location: str,
    shaft_id_prefix: str,
) -> list[SequenceItem]:
    """Generate the ordered inspection sequence for a building.

    Args:
        start_floor: Lowest floor to inspect.
        floor_count: Number of consecutive floors, at least 1.
        dampers_per_floor: Dampers inspected on each floor, at least 1.
        location: Location label applied to every item.
        shaft_id_prefix: Shaft identifier; suffixed "-<n>" when there is
            more than one damper per floor.

    Returns:
        ``floor_count * dampers_per_floor`` items in walk order.

    Raises:
        SequenceParameterError: If a count is below 1 or not an integer.
    """
    _require_int("start_floor", start_floor)
    _require_int("floor_count", floor_count, minimum=1)
    _require_int("dampers_per_floor", dampers_per_floor, minimum=1)

    sequence: list[SequenceItem] = []
    for floor in range(start_floor, start_floor + floor_count):
        for damper in range(1, dampers_per_floor + 1):
            shaft_id = f"{shaft_id_prefix}-{damper}" if dampers_per_floor > 1 else shaft_id_prefix
            sequence.append(
                SequenceItem(
                    floor_number=format_floor(floor),
                    location=location,
                    shaft_id=shaft_id,
                )
            )
    return sequence


@dataclass(frozen=True)
class SequenceParameters:
    """Parameters describing the dampers to test in sequence.

    Defaults match the new-session form an operator starts from.

    Attributes:
        start_floor: Lowest floor to inspect.
        floor_count: Number of consecutive floors.
        dampers_per_floor: Dampers inspected on each floor.
        location: Default location label.
        shaft_id_prefix: Default shaft identifier.
    """

    start_floor: int = DEFAULT_START_FLOOR
    floor_count: int = DEFAULT_FLOOR_COUNT
    dampers_per_floor: int = DEFAULT_DAMPERS_PER_FLOOR
    location: str = DEFAULT_LOCATION
    shaft_id_prefix: str = DEFAULT_SHAFT_ID_PREFIX

    @property
    def item_count(self) -> int:
        """Return how many damper tests these parameters will create."""
        return self.floor_count * self.dampers_per_floor

    @property
    def top_floor(self) -> int:
        """Return the highest floor covered."""
        return self.start_floor + self.floor_count - 1

    def validate(self) -> None:
        """Check the parameters.

        Raises:
            SequenceParameterError: If any parameter is invalid.
        """
        _require_int("start_floor", self.start_floor)
        _require_int("floor_count", self.floor_count, minimum=1)
        _require_int("dampers_per_floor", self.dampers_per_floor, minimum=1)

    def generate(self) -> list[SequenceItem]:
        """Generate the sequence these parameters describe."""
        return generate_sequence(
            self.start_floor,
            self.floor_count,
            self.dampers_per_floor,
            self.location,
            self.shaft_id_prefix,
        )
