"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from models.student import Student
from models.room import Room
from models.exam import ExamInfo
from models.seating import SeatingPlan
from config.defaults import DEFAULT_SHIFT


STEPS = ["upload", "configure", "preview", "generate"]


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "students": [],
        "rooms": [],
        "configured_rooms": [],
        "exam_info": ExamInfo(name="", shift=DEFAULT_SHIFT),
        "seating_plan": None,
        "final_plan": None,
        "current_step": "upload",
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_students() -> List[Student]:
    return st.session_state.get("students", [])


def get_draft_rooms() -> List[Room]:
    return st.session_state.get("rooms", [])


def get_configured_rooms() -> List[Room]:
    return st.session_state.get("configured_rooms", [])


def get_exam_info() -> ExamInfo:
    return st.session_state.get("exam_info", ExamInfo())


def get_seating_plan() -> Optional[SeatingPlan]:
    return st.session_state.get("seating_plan")


def get_final_plan() -> Optional[SeatingPlan]:
    return st.session_state.get("final_plan")


def get_room_editor_version() -> int:
    return st.session_state.get("room_editor_version", 0)


def get_current_step() -> str:
    return st.session_state.get("current_step", "upload")


# --- Setters ---

def set_roster(students: List[Student], exam_info: ExamInfo):
    """A new roster invalidates any rooms and plans built for the old one."""
    st.session_state["students"] = students
    st.session_state["exam_info"] = exam_info
    st.session_state["configured_rooms"] = []
    st.session_state["seating_plan"] = None
    st.session_state["final_plan"] = None
    st.session_state["current_step"] = "configure"


def set_draft_rooms(rooms: List[Room]):
    """Replace the editable room list; bumps the editor version so stale edits are dropped."""
    st.session_state["rooms"] = rooms
    st.session_state["room_editor_version"] = get_room_editor_version() + 1


def set_configured_rooms(rooms: List[Room]):
    st.session_state["configured_rooms"] = rooms
    st.session_state["seating_plan"] = None
    st.session_state["final_plan"] = None
    st.session_state["current_step"] = "preview"


def set_seating_plan(plan: SeatingPlan):
    st.session_state["seating_plan"] = plan


def set_final_plan(plan: SeatingPlan):
    st.session_state["final_plan"] = plan
    st.session_state["current_step"] = "generate"


def step_completed(step: str) -> bool:
    if step == "upload":
        return bool(get_students())
    if step == "configure":
        return bool(get_configured_rooms())
    if step == "preview":
        return get_final_plan() is not None
    return False
