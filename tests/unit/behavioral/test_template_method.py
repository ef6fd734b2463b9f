from pattern_catalog.behavioral.template_method import (
    CSV_STEPS,
    EXCEL_STEPS,
    DataProcessor,
    ProcessingSteps,
    demo,
)


def test_excel_processing_runs_steps_in_order():
    assert DataProcessor(EXCEL_STEPS).process_file() == [
        "Read excel data",
        "Write to excel",
        "Save the files",
    ]


def test_csv_processing_runs_steps_in_order():
    assert DataProcessor(CSV_STEPS).process_file() == [
        "Read csv data",
        "Write to csv",
        "Save the files",
    ]


def test_save_step_can_be_replaced():
    calls = []

    def step(name):
        def run():
            calls.append(name)
            return name
        return run

    steps = ProcessingSteps(name="json", read=step("read"), write=step("write"), save=step("save"))

    DataProcessor(steps).process_file()

    assert calls == ["read", "write", "save"]


def test_demo_output():
    lines = demo()

    assert lines[3] == ""
    assert len(lines) == 7
