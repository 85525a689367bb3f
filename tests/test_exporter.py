"""Tests for tabular exports of a seating plan."""

import io
import random
import sys
import os
from datetime import date
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd

from models.exam import ExamInfo
from models.room import Room
from models.student import Student
from engine.seat_assigner import assign_seats
from data.exporter import (
    attendance_frame,
    build_attendance_csv,
    build_workbook,
    export_filename,
    room_frame,
    room_sheet_name,
    seating_list_frame,
    summary_frame,
    unique_sheet_name,
)
from engine.projections import group_by_room


def make_plan(n=7, rooms=None):
    students = [Student(f"R{i}", f"Name {i}", "1st Year", "CSE" if i % 2 else "ECE") for i in range(1, n + 1)]
    rooms = rooms or [Room("101", 4), Room("102", 4)]
    return assign_seats(students, rooms, rng=random.Random(3))


class TestFrames:
    def test_summary_frame(self):
        plan = make_plan()
        df = summary_frame(plan, ExamInfo("Mid Sem", "Evening"), generated_on=date(2024, 3, 1))
        values = dict(zip(df["Field"], df["Value"]))

        assert values["Exam Name"] == "Mid Sem"
        assert values["Shift"] == "Evening"
        assert values["Generated Date"] == "2024-03-01"
        assert values["Total Students"] == 7
        assert values["Empty Benches"] == 1

    def test_seating_list_sorted_by_room_then_bench(self):
        plan = make_plan()
        df = seating_list_frame(plan)

        assert len(df) == len(plan.assignments)
        keys = list(zip(df["Room"], df["Bench"]))
        assert keys == sorted(keys, key=lambda k: (int(k[0]), k[1]))
        assert set(df["Roll Number"]) == {a.student.roll_number for a in plan.assignments}

    def test_room_frame_ascending_bench(self):
        plan = make_plan()
        items = group_by_room(plan)["101"]
        df = room_frame(list(reversed(items)))
        assert list(df["Bench"]) == [1, 2, 3, 4]

    def test_attendance_frame(self):
        plan = make_plan()
        df = attendance_frame(group_by_room(plan)["102"])

        assert list(df.columns) == ["S.No.", "Roll Number", "Student Name", "Bench", "Signature"]
        assert list(df["S.No."]) == [1, 2, 3]
        assert list(df["Bench"]) == [1, 2, 3]
        assert (df["Signature"] == "").all()


class TestWorkbook:
    def test_workbook_sheets(self):
        plan = make_plan()
        data = build_workbook(plan, ExamInfo("Final Exam", "Morning"))
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")

        assert list(sheets.keys()) == ["Summary", "Complete Seating List", "Room 101", "Room 102"]
        assert len(sheets["Complete Seating List"]) == 7
        assert len(sheets["Room 101"]) == 4
        assert len(sheets["Room 102"]) == 3

    def test_empty_plan_workbook(self):
        plan = assign_seats([], [Room("101", 5)])
        data = build_workbook(plan, ExamInfo("Empty", "Morning"))
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")
        assert list(sheets.keys()) == ["Summary", "Complete Seating List"]

    def test_rooms_cleaning_to_same_sheet_name(self):
        plan = make_plan(n=4, rooms=[Room("A/B", 2), Room("A-B", 2)])
        data = build_workbook(plan, ExamInfo("Final Exam", "Morning"))
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")

        assert list(sheets.keys())[2:] == ["Room A-B", "Room A-B (2)"]
        assert len(sheets["Room A-B"]) == 2
        assert len(sheets["Room A-B (2)"]) == 2

    def test_rooms_differing_only_in_case(self):
        plan = make_plan(n=4, rooms=[Room("a1", 2), Room("A1", 2)])
        data = build_workbook(plan, ExamInfo("Final Exam", "Morning"))
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")

        assert list(sheets.keys())[2:] == ["Room a1", "Room A1 (2)"]

    def test_attendance_csv(self):
        plan = make_plan()
        text = build_attendance_csv(plan, "101").decode("utf-8")
        lines = text.strip().splitlines()

        assert lines[0] == "S.No.,Roll Number,Student Name,Bench,Signature"
        assert len(lines) == 5

    def test_attendance_csv_unknown_room(self):
        plan = make_plan()
        text = build_attendance_csv(plan, "999").decode("utf-8")
        assert text.strip().splitlines() == ["S.No.,Roll Number,Student Name,Bench,Signature"]


class TestNames:
    def test_export_filename(self):
        assert export_filename("Mid  Sem Exam", "Seating_Plan.xlsx") == "Mid_Sem_Exam_Seating_Plan.xlsx"
        assert export_filename("   ", "Seating_Plan.xlsx") == "Exam_Seating_Plan.xlsx"

    def test_room_sheet_name_limits(self):
        assert room_sheet_name("101") == "Room 101"
        assert room_sheet_name("A/B") == "Room A-B"
        assert len(room_sheet_name("X" * 40)) == 31

    def test_unique_sheet_name_suffix_fits_limit(self):
        taken = {"summary"}
        first = unique_sheet_name("X" * 40, taken)
        second = unique_sheet_name("x" * 40, taken)
        third = unique_sheet_name("X" * 40, taken)

        assert first == "Room " + "X" * 26
        assert second.endswith(" (2)") and len(second) == 31
        assert third.endswith(" (3)") and len(third) == 31
        assert len(taken) == 4
