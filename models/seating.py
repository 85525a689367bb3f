from dataclasses import dataclass, field
from typing import List, Tuple

from models.student import Student


@dataclass(frozen=True)
class SeatingAssignment:
    room_number: str
    bench_number: int     # 1-based within the room
    student: Student

    @property
    def slot(self) -> Tuple[str, int]:
        return (self.room_number, self.bench_number)


@dataclass
class SeatingSummary:
    total_students: int = 0
    total_rooms: int = 0
    total_benches: int = 0
    occupied_benches: int = 0
    empty_benches: int = 0


@dataclass
class SeatingPlan:
    """Result of one assignment run. Regeneration replaces the whole plan."""
    assignments: List[SeatingAssignment] = field(default_factory=list)
    summary: SeatingSummary = field(default_factory=SeatingSummary)

    @property
    def seated_roll_numbers(self) -> List[str]:
        return [a.student.roll_number for a in self.assignments]
