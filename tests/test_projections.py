"""Tests for seating plan projections and room configuration helpers."""

import random
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.student import Student
from models.room import Room
from models.seating import SeatingAssignment, SeatingPlan
from engine.seat_assigner import assign_seats
from engine.projections import (
    branch_counts_by_room,
    filter_assignments,
    group_by_branch,
    group_by_room,
    list_branches,
    list_classes,
    list_rooms,
    room_occupancy,
    utilization_pct,
)
from engine.room_config import (
    add_room,
    build_default_rooms,
    next_room_number,
    remove_room,
    update_room,
)


def make_student(roll="R1", branch="CSE"):
    return Student(roll, f"Name {roll}", "3rd Year", branch)


def make_plan():
    students = [
        make_student("R1", "CSE"),
        make_student("R2", "ECE"),
        make_student("R3", "CSE"),
        make_student("R4", "ME"),
        make_student("R5", "ECE"),
    ]
    rooms = [Room("101", 3), Room("102", 3)]
    return assign_seats(students, rooms, rng=random.Random(10)), students, rooms


class TestGrouping:
    def test_group_by_room_orders_by_bench(self):
        plan = SeatingPlan(assignments=[
            SeatingAssignment("102", 2, make_student("R1")),
            SeatingAssignment("101", 3, make_student("R2")),
            SeatingAssignment("102", 1, make_student("R3")),
            SeatingAssignment("101", 1, make_student("R4")),
        ])
        grouped = group_by_room(plan)

        assert list(grouped.keys()) == ["102", "101"]
        assert [a.bench_number for a in grouped["102"]] == [1, 2]
        assert [a.bench_number for a in grouped["101"]] == [1, 3]

    def test_group_by_room_does_not_mutate_plan(self):
        plan, _, _ = make_plan()
        before = list(plan.assignments)
        group_by_room(plan)
        group_by_branch(plan)
        assert plan.assignments == before

    def test_group_by_branch_covers_all_assignments(self):
        plan, _, _ = make_plan()
        grouped = group_by_branch(plan)

        assert set(grouped.keys()) == {"CSE", "ECE", "ME"}
        assert sum(len(v) for v in grouped.values()) == 5
        assert all(a.student.branch == "ECE" for a in grouped["ECE"])

    def test_branch_counts_by_room(self):
        plan, _, _ = make_plan()
        counts = branch_counts_by_room(plan)

        assert sum(sum(c.values()) for c in counts.values()) == 5
        assert sum(c.get("CSE", 0) for c in counts.values()) == 2


class TestFilters:
    def test_none_means_no_filter(self):
        plan, _, _ = make_plan()
        assert len(filter_assignments(plan)) == 5
        assert len(filter_assignments(plan, None, None)) == 5

    def test_values_named_all_are_filtered_literally(self):
        students = [make_student("R1", "all"), make_student("R2", "CSE"), make_student("R3", "all")]
        rooms = [Room("all", 2), Room("101", 2)]
        plan = assign_seats(students, rooms, rng=random.Random(5))

        by_branch = filter_assignments(plan, branch="all")
        assert sorted(a.student.roll_number for a in by_branch) == ["R1", "R3"]
        by_room = filter_assignments(plan, room_number="all")
        assert len(by_room) == 2
        assert all(a.room_number == "all" for a in by_room)

    def test_filter_by_room(self):
        plan, _, _ = make_plan()
        result = filter_assignments(plan, room_number="101")
        assert len(result) == 3
        assert all(a.room_number == "101" for a in result)

    def test_filter_by_room_and_branch(self):
        plan, _, _ = make_plan()
        result = filter_assignments(plan, room_number="102", branch="CSE")
        assert all(a.room_number == "102" and a.student.branch == "CSE" for a in result)

    def test_filter_with_no_match(self):
        plan, _, _ = make_plan()
        assert filter_assignments(plan, branch="CIVIL") == []

    def test_list_branches_first_seen_order(self):
        _, students, _ = make_plan()
        assert list_branches(students) == ["CSE", "ECE", "ME"]

    def test_list_classes_first_seen_order(self):
        students = [
            Student("R1", "Asha", "2nd Year", "CSE"),
            Student("R2", "Bilal", "1st Year", "ECE"),
            Student("R3", "Chen", "2nd Year", "ME"),
            Student("R4", "Dev", "", "CSE"),
        ]
        assert list_classes(students) == ["2nd Year", "1st Year", ""]

    def test_list_rooms_only_occupied(self):
        students = [make_student("R1")]
        plan = assign_seats(students, [Room("101", 2), Room("102", 2)], rng=random.Random(0))
        assert list_rooms(plan) == ["101"]


class TestOccupancy:
    def test_room_occupancy(self):
        plan, _, rooms = make_plan()
        rows = room_occupancy(plan, rooms)

        assert [r["room_number"] for r in rows] == ["101", "102"]
        assert rows[0]["occupied"] == 3 and rows[0]["empty"] == 0
        assert rows[1]["occupied"] == 2 and rows[1]["empty"] == 1
        assert rows[0]["utilization_pct"] == pytest.approx(1.0)

    def test_zero_bench_room_has_zero_utilization(self):
        plan = SeatingPlan()
        rows = room_occupancy(plan, [Room("101", 0)])
        assert rows[0]["utilization_pct"] == 0.0

    def test_utilization_pct(self):
        assert utilization_pct(15, [Room("101", 20)]) == 75
        assert utilization_pct(10, []) == 0


class TestRoomConfig:
    def test_build_default_rooms(self):
        rooms = build_default_rooms(3)
        assert [r.room_number for r in rooms] == ["101", "102", "103"]
        assert all(r.benches == 20 for r in rooms)

    def test_build_default_rooms_out_of_range(self):
        assert build_default_rooms(0) == []
        assert build_default_rooms(21) == []

    def test_next_room_number(self):
        assert next_room_number([]) == "101"
        assert next_room_number([Room("101", 5), Room("205", 5)]) == "206"
        assert next_room_number([Room("Lab-A", 5)]) == "101"

    def test_add_room_returns_new_list(self):
        rooms = build_default_rooms(2)
        updated = add_room(rooms)

        assert len(rooms) == 2
        assert updated[-1].room_number == "103"
        assert updated[-1].benches == 20

    def test_remove_room(self):
        rooms = build_default_rooms(3)
        updated = remove_room(rooms, 1)
        assert [r.room_number for r in updated] == ["101", "103"]

    def test_update_room_copies(self):
        rooms = build_default_rooms(2)
        updated = update_room(rooms, 0, room_number=" A-1 ", benches=12)

        assert updated[0].room_number == "A-1"
        assert updated[0].benches == 12
        assert rooms[0].room_number == "101"
        assert rooms[0].benches == 20

    def test_update_room_bad_index(self):
        with pytest.raises(IndexError):
            update_room(build_default_rooms(1), 5, benches=3)
