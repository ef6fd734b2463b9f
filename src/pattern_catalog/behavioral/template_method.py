"""
Template Method: a fixed read -> write -> save flow with pluggable steps.

The varying steps live in a ``ProcessingSteps`` record instead of subclass
overrides; ``DataProcessor.process_file`` owns the order.
"""

from dataclasses import dataclass
from typing import Callable, List

Step = Callable[[], str]


def save_files() -> str:
    return "Save the files"


@dataclass(frozen=True)
class ProcessingSteps:
    name: str
    read: Step
    write: Step
    save: Step = save_files


class DataProcessor:
    def __init__(self, steps: ProcessingSteps):
        self.steps = steps

    def process_file(self) -> List[str]:
        return [self.steps.read(), self.steps.write(), self.steps.save()]


EXCEL_STEPS = ProcessingSteps(
    name="excel",
    read=lambda: "Read excel data",
    write=lambda: "Write to excel",
)

CSV_STEPS = ProcessingSteps(
    name="csv",
    read=lambda: "Read csv data",
    write=lambda: "Write to csv",
)


def demo() -> List[str]:
    lines = DataProcessor(EXCEL_STEPS).process_file()
    lines.append("")
    lines.extend(DataProcessor(CSV_STEPS).process_file())
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
