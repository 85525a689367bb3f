"""Default configuration constants for the Exam Seating Planner."""

# Room configuration
DEFAULT_BENCHES_PER_ROOM = 20
DEFAULT_FIRST_ROOM_NUMBER = 101
MIN_ROOM_NUMBER_BASE = 100   # next_room_number never goes below base + 1
MAX_ROOMS = 20               # upper bound for the "number of rooms" input

# Exam sessions
EXAM_SHIFTS = ["Morning", "Evening"]
DEFAULT_SHIFT = "Morning"

# Roster preview
ROSTER_PREVIEW_ROWS = 10

# Spreadsheet export
EXCEL_SHEET_NAME_LIMIT = 31
SEATING_LIST_COLUMNS = ["Room", "Bench", "Roll Number", "Name", "Class", "Branch"]
ROOM_SHEET_COLUMNS = ["Bench", "Roll Number", "Name", "Class", "Branch"]
ATTENDANCE_COLUMNS = ["S.No.", "Roll Number", "Student Name", "Bench", "Signature"]

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = "INFO"
