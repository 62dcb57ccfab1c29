"""Student score report: reads ``id,fullName,score`` lines, writes graded lines.

Input format, one student per line (blank lines ignored):

    101,Alice Smith,84
    102,Bob Johnson,67

Output format:

    Alice Smith (ID: 101): Score = 84, Grade = A
"""

from __future__ import annotations

import logging
from pathlib import Path

from recordbook.exceptions import InvalidEncodingError, InvalidScoreFormatError, MissingFieldError
from recordbook.models import Student

logger = logging.getLogger(__name__)


def _parse_int(raw: str) -> int:
    """Convert a plain ASCII decimal, optionally negative, to int.

    Rejects forms int() would take, like "8_0" or non-ASCII digits.
    """
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(raw)
    return int(raw)


def parse_student_line(line: str, line_number: int) -> Student:
    """Parse one input line into a Student.

    Raises:
        MissingFieldError: fewer than three comma-separated fields.
        InvalidScoreFormatError: id or score is not an integer.
    """
    fields = [f.strip() for f in line.split(",")]
    if len(fields) < 3:
        raise MissingFieldError(line_number, line)

    raw_id, full_name, raw_score = fields[0], fields[1], fields[2]
    try:
        student_id = _parse_int(raw_id)
    except ValueError:
        raise InvalidScoreFormatError(line_number, line, "id", raw_id) from None
    try:
        score = _parse_int(raw_score)
    except ValueError:
        raise InvalidScoreFormatError(line_number, line, "score", raw_score) from None

    return Student(id=student_id, full_name=full_name, score=score)


def read_students(path: Path) -> list[Student]:
    """Read every student from a score file.

    Lines are decoded one at a time so an encoding error can name its line.
    A missing file raises FileNotFoundError; a malformed line raises its
    RecordFormatError and no students are returned.
    """
    students: list[Student] = []
    for n, raw_bytes in enumerate(Path(path).read_bytes().splitlines(), 1):
        try:
            raw = raw_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(n, raw_bytes, e.reason) from None
        line = raw.strip()
        if not line:
            continue
        students.append(parse_student_line(line, n))
    logger.debug("Read %d students from %s", len(students), path)
    return students


def write_report(students: list[Student], path: Path) -> Path:
    """Write one report line per student. Returns the path written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [s.report_line() for s in students]
    path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
    logger.info("Report for %d students written to %s", len(students), path)
    return path


def process_report(input_path: Path, output_path: Path) -> list[Student]:
    """Read input_path and write the graded report to output_path."""
    students = read_students(input_path)
    write_report(students, output_path)
    return students
