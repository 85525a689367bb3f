"""Random seat assignment — walks rooms and benches in order over a shuffled roster."""

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence

from models.room import Room
from models.seating import SeatingAssignment, SeatingPlan, SeatingSummary
from models.student import Student
from engine.errors import (
    DuplicateRoomError,
    EmptyRoomSetError,
    InsufficientCapacityError,
    InvalidRoomError,
    SeatingError,
)

LOG = logging.getLogger(__name__)


def total_capacity(rooms: Sequence[Room]) -> int:
    return sum(r.benches for r in rooms)


def check_preconditions(students: Sequence[Student], rooms: Sequence[Room]) -> None:
    """Raise a SeatingError if the inputs cannot produce a complete plan."""
    if not rooms:
        raise EmptyRoomSetError()

    for room in rooms:
        if room.benches < 0:
            raise InvalidRoomError(room.room_number, room.benches)

    counts = Counter(r.room_number for r in rooms)
    dupes = [num for num, n in counts.items() if n > 1]
    if dupes:
        raise DuplicateRoomError(dupes)

    capacity = total_capacity(rooms)
    if capacity < len(students):
        raise InsufficientCapacityError(capacity, len(students))


def shuffle_roster(students: Sequence[Student], rng: random.Random) -> List[Student]:
    """Return a uniformly shuffled copy of the roster; the input is left untouched."""
    shuffled = list(students)
    rng.shuffle(shuffled)
    return shuffled


def compute_summary(
    students: Sequence[Student],
    rooms: Sequence[Room],
    assignments: Sequence[SeatingAssignment],
) -> SeatingSummary:
    total_benches = total_capacity(rooms)
    occupied = len(assignments)
    return SeatingSummary(
        total_students=len(students),
        total_rooms=len(rooms),
        total_benches=total_benches,
        occupied_benches=occupied,
        empty_benches=total_benches - occupied,
    )


def assign_seats(
    students: Sequence[Student],
    rooms: Sequence[Room],
    rng: Optional[random.Random] = None,
) -> SeatingPlan:
    """Seat every student on a (room, bench) slot.

    Rooms are filled in the given order, benches 1..n within each room, from
    a random permutation of the roster. Pass a seeded ``random.Random`` for a
    reproducible plan; otherwise every call draws a fresh permutation.
    """
    try:
        check_preconditions(students, rooms)
    except SeatingError as e:
        LOG.warning("Rejected seating request: %s", e)
        raise

    rng = rng or random.Random()
    slots = ((room.room_number, bench) for room in rooms for bench in room.bench_numbers)
    # capacity checked above, so zip never truncates the roster
    assignments: List[SeatingAssignment] = [
        SeatingAssignment(room_number, bench, student)
        for (room_number, bench), student in zip(slots, shuffle_roster(students, rng))
    ]

    summary = compute_summary(students, rooms, assignments)
    LOG.info(
        "Seated %d students across %d rooms (%d empty benches)",
        summary.occupied_benches, summary.total_rooms, summary.empty_benches,
    )
    return SeatingPlan(assignments=assignments, summary=summary)


def regenerate_plan(
    students: Sequence[Student],
    rooms: Sequence[Room],
    rng: Optional[random.Random] = None,
) -> SeatingPlan:
    """Produce a fresh plan for the same roster and rooms (new shuffle, same topology)."""
    LOG.info("Regenerating seating plan for %d students", len(students))
    return assign_seats(students, rooms, rng)
