"""Sample datasets for trying the Exam Seating Planner without an upload."""

import pandas as pd
import os


SAMPLE_STUDENTS = [
    ("2021CSE001", "Aarav Sharma", "3rd Year", "CSE"),
    ("2021CSE002", "Vivaan Singh", "3rd Year", "CSE"),
    ("2021ECE001", "Aditya Kumar", "3rd Year", "ECE"),
    ("2021ECE002", "Vihaan Patel", "3rd Year", "ECE"),
    ("2021ME001", "Arjun Gupta", "3rd Year", "ME"),
    ("2021ME002", "Sai Reddy", "3rd Year", "ME"),
    ("2021CSE003", "Ishaan Verma", "3rd Year", "CSE"),
    ("2021ECE003", "Shivansh Jain", "3rd Year", "ECE"),
    ("2021ME003", "Aryan Mishra", "3rd Year", "ME"),
    ("2021CSE004", "Rudra Agarwal", "3rd Year", "CSE"),
    ("2021ECE004", "Aadhya Sharma", "3rd Year", "ECE"),
    ("2021ME004", "Kiara Singh", "3rd Year", "ME"),
    ("2021CSE005", "Diya Patel", "3rd Year", "CSE"),
    ("2021ECE005", "Ananya Kumar", "3rd Year", "ECE"),
    ("2021ME005", "Saanvi Gupta", "3rd Year", "ME"),
]


def generate_roster_df() -> pd.DataFrame:
    """Sample roster: 15 third-year students across CSE, ECE and ME."""
    return pd.DataFrame(SAMPLE_STUDENTS, columns=["Roll Number", "Name", "Class", "Branch"])


def generate_rooms_df(count: int = 3, benches: int = 5) -> pd.DataFrame:
    """Sample room list numbered from 101."""
    return pd.DataFrame(
        [{"Room Number": str(101 + i), "Benches": benches} for i in range(count)]
    )


def generate_sample_csvs(output_dir: str):
    """Write sample CSVs to disk."""
    os.makedirs(output_dir, exist_ok=True)
    generate_roster_df().to_csv(os.path.join(output_dir, "roster.csv"), index=False)
    generate_rooms_df().to_csv(os.path.join(output_dir, "rooms.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample roster as an Excel workbook."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "roster.xlsx")
    generate_roster_df().to_excel(path, sheet_name="Roster", index=False, engine="openpyxl")


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
