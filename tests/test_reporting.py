from pathlib import Path

import pytest

from core.services.reporting import ReportGenerator


class _ReportGeneratorWithPersistence:
    """Negative example: one class that both builds and stores the report.

    Kept here only to contrast with the separated collaborators; its
    `generate_report` cannot be reused without dragging file I/O along.
    """

    def generate_report(self, data: str) -> str:
        return f"Report based on: {data}"

    def save_to_file(self, report: str, file_path: Path) -> None:
        file_path.write_text(report, encoding="utf-8")


def test_generate_report_returns_expected_string():
    generator = ReportGenerator()

    result = generator.generate_report("Test Data")

    assert result == "Report based on: Test Data"


@pytest.mark.parametrize(
    "data",
    ["", "Sample Data", "  padded  ", "línea 1\nlínea 2", "{data} {0}", "x" * 10_000],
)
def test_generate_report_uses_fixed_template(data):
    assert ReportGenerator().generate_report(data) == "Report based on: " + data


def test_generate_report_accepts_empty_string():
    assert ReportGenerator().generate_report("") == "Report based on: "


def test_generate_report_is_pure(isolated_cwd):
    generator = ReportGenerator()

    first = generator.generate_report("Test Data")
    second = generator.generate_report("Test Data")

    assert first == second
    assert list(isolated_cwd.iterdir()) == []
    assert vars(generator) == {}


def test_combined_class_produces_same_text_but_owns_io(tmp_path):
    combined = _ReportGeneratorWithPersistence()
    separated = ReportGenerator()

    assert combined.generate_report("Test Data") == separated.generate_report("Test Data")
    # The combined unit exposes persistence on the same object as generation.
    assert hasattr(combined, "save_to_file")
    assert not hasattr(separated, "save_to_file")
