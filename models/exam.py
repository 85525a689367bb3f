from dataclasses import dataclass


@dataclass
class ExamInfo:
    name: str = ""
    shift: str = "Morning"   # "Morning" or "Evening"

    @property
    def title(self) -> str:
        return f"{self.name} ({self.shift} Shift)"
