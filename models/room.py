from dataclasses import dataclass


@dataclass
class Room:
    room_number: str
    benches: int          # bench capacity, numbered 1..benches

    @property
    def bench_numbers(self) -> range:
        return range(1, self.benches + 1)
