"""Room list editing helpers for the configuration step. All return new lists."""

from typing import List, Optional, Sequence

from models.room import Room
from config.defaults import (
    DEFAULT_BENCHES_PER_ROOM, DEFAULT_FIRST_ROOM_NUMBER,
    MIN_ROOM_NUMBER_BASE, MAX_ROOMS,
)


def build_default_rooms(
    count: int,
    first_number: int = DEFAULT_FIRST_ROOM_NUMBER,
    benches: int = DEFAULT_BENCHES_PER_ROOM,
) -> List[Room]:
    """Create ``count`` consecutively numbered rooms. Out-of-range counts give []."""
    if count < 1 or count > MAX_ROOMS:
        return []
    return [Room(str(first_number + i), benches) for i in range(count)]


def next_room_number(rooms: Sequence[Room]) -> str:
    """One past the highest numeric room number, never below base + 1."""
    numbers = [int(r.room_number) for r in rooms if r.room_number.strip().isdigit()]
    return str(max(numbers + [MIN_ROOM_NUMBER_BASE]) + 1)


def add_room(rooms: Sequence[Room], benches: int = DEFAULT_BENCHES_PER_ROOM) -> List[Room]:
    return [*rooms, Room(next_room_number(rooms), benches)]


def remove_room(rooms: Sequence[Room], index: int) -> List[Room]:
    return [r for i, r in enumerate(rooms) if i != index]


def update_room(
    rooms: Sequence[Room],
    index: int,
    room_number: Optional[str] = None,
    benches: Optional[int] = None,
) -> List[Room]:
    updated = [Room(r.room_number, r.benches) for r in rooms]
    if index < 0 or index >= len(updated):
        raise IndexError(f"No room at position {index}")
    if room_number is not None:
        updated[index].room_number = room_number.strip()
    if benches is not None:
        updated[index].benches = int(benches)
    return updated
