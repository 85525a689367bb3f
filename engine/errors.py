"""Precondition failures raised by the seating engine."""

from typing import List


class SeatingError(ValueError):
    """Base class for invalid seating inputs."""


class EmptyRoomSetError(SeatingError):
    def __init__(self):
        super().__init__("No rooms configured. Please configure at least one room.")


class InsufficientCapacityError(SeatingError):
    def __init__(self, capacity: int, student_count: int):
        self.capacity = capacity
        self.student_count = student_count
        super().__init__(
            f"Total room capacity ({capacity}) is less than "
            f"the number of students ({student_count})."
        )


class DuplicateRoomError(SeatingError):
    def __init__(self, room_numbers: List[str]):
        self.room_numbers = room_numbers
        super().__init__(f"Duplicate room numbers: {', '.join(room_numbers)}")


class InvalidRoomError(SeatingError):
    def __init__(self, room_number: str, benches: int):
        self.room_number = room_number
        self.benches = benches
        super().__init__(f"Room {room_number}: bench count cannot be negative ({benches}).")
