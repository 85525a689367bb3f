from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    roll_number: str
    name: str
    class_name: str = ""   # cohort label, e.g. "3rd Year"
    branch: str = ""       # department, e.g. "CSE"
