"""Read-only views over a seating plan for preview and export."""

from typing import Dict, Iterable, List, Optional, Sequence, Union

from models.room import Room
from models.seating import SeatingAssignment, SeatingPlan
from models.student import Student


def _assignments_of(source: Union[SeatingPlan, Iterable[SeatingAssignment]]) -> List[SeatingAssignment]:
    if isinstance(source, SeatingPlan):
        return list(source.assignments)
    return list(source)


def group_by_room(
    source: Union[SeatingPlan, Iterable[SeatingAssignment]],
) -> Dict[str, List[SeatingAssignment]]:
    """Group assignments by room, keeping room order and sorting each room by bench."""
    grouped: Dict[str, List[SeatingAssignment]] = {}
    for a in _assignments_of(source):
        grouped.setdefault(a.room_number, []).append(a)
    return {room: sorted(items, key=lambda a: a.bench_number) for room, items in grouped.items()}


def group_by_branch(
    source: Union[SeatingPlan, Iterable[SeatingAssignment]],
) -> Dict[str, List[SeatingAssignment]]:
    grouped: Dict[str, List[SeatingAssignment]] = {}
    for a in _assignments_of(source):
        grouped.setdefault(a.student.branch, []).append(a)
    return grouped


def filter_assignments(
    source: Union[SeatingPlan, Iterable[SeatingAssignment]],
    room_number: Optional[str] = None,
    branch: Optional[str] = None,
) -> List[SeatingAssignment]:
    """Filter by room and/or branch. None disables a filter; any other value must match exactly."""
    return [
        a for a in _assignments_of(source)
        if (room_number is None or a.room_number == room_number)
        and (branch is None or a.student.branch == branch)
    ]


def list_branches(students: Iterable[Student]) -> List[str]:
    """Distinct branches in first-seen order."""
    return list(dict.fromkeys(s.branch for s in students))


def list_classes(students: Iterable[Student]) -> List[str]:
    return list(dict.fromkeys(s.class_name for s in students))


def list_rooms(plan: SeatingPlan) -> List[str]:
    return list(dict.fromkeys(a.room_number for a in plan.assignments))


def room_occupancy(plan: SeatingPlan, rooms: Sequence[Room]) -> List[dict]:
    """Per-room capacity and occupancy, in configuration order.

    Returns list of dicts with: room_number, capacity, occupied, empty, utilization_pct
    """
    occupied: Dict[str, int] = {}
    for a in plan.assignments:
        occupied[a.room_number] = occupied.get(a.room_number, 0) + 1

    rows = []
    for room in rooms:
        used = occupied.get(room.room_number, 0)
        rows.append({
            "room_number": room.room_number,
            "capacity": room.benches,
            "occupied": used,
            "empty": room.benches - used,
            "utilization_pct": used / room.benches if room.benches > 0 else 0.0,
        })
    return rows


def utilization_pct(student_count: int, rooms: Sequence[Room]) -> int:
    """Share of total capacity the roster would fill, as a rounded percentage."""
    capacity = sum(r.benches for r in rooms)
    if capacity <= 0:
        return 0
    return round(student_count / capacity * 100)


def branch_counts_by_room(plan: SeatingPlan) -> Dict[str, Dict[str, int]]:
    """Nested counts: room -> branch -> number of students."""
    counts: Dict[str, Dict[str, int]] = {}
    for a in plan.assignments:
        room = counts.setdefault(a.room_number, {})
        room[a.student.branch] = room.get(a.student.branch, 0) + 1
    return counts
