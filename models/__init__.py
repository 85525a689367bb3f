from models.student import Student
from models.room import Room
from models.seating import SeatingAssignment, SeatingPlan, SeatingSummary
from models.exam import ExamInfo
