"""Report Card Rendering: fixed text layout for one student's report.

Invariants:
    - render_report is PURE: the timestamp is passed in, never read from the clock
    - Each mark is labelled by position; positions past the configured names use "Subject<n>"
    - report_filename depends on the roll number only
"""

from datetime import datetime

from srms.core.record import Record
from srms.core.subjects import SubjectConfiguration


REPORT_HEADER = "----- Report Card -----"


def report_filename(roll_number: int) -> str:
    return f"report_roll_{roll_number}.txt"


def render_report(
    record: Record, subjects: SubjectConfiguration, generated_at: datetime,
) -> str:
    lines = [
        REPORT_HEADER,
        f"Roll Number: {record.roll_number}",
        f"Name: {record.name}",
    ]
    for i, mark in enumerate(record.marks):
        lines.append(f"{subjects.label(i):<12} : {mark:.2f}")
    lines += [
        f"Total       : {record.total:.2f}",
        f"Percentage  : {record.percentage:.2f}",
        f"Grade       : {record.grade.value}",
        f"Generated on: {generated_at.ctime()}",
    ]
    return "\n".join(lines) + "\n"
