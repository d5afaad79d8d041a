"""Record file parsing and date handling utilities."""

import logging
import re
from pathlib import Path

from models import MalformedRecordError, Record

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 49
MAX_BIRTH_DATE_LENGTH = 11

# Month name mappings (handle abbreviations and full names)
MONTH_MAP = {
    "JAN": 1,
    "JANUARY": 1,
    "FEB": 2,
    "FEBRUARY": 2,
    "MAR": 3,
    "MARCH": 3,
    "APR": 4,
    "APRIL": 4,
    "MAY": 5,
    "JUN": 6,
    "JUNE": 6,
    "JUL": 7,
    "JULY": 7,
    "AUG": 8,
    "AUGUST": 8,
    "SEP": 9,
    "SEPT": 9,
    "SEPTEMBER": 9,
    "OCT": 10,
    "OCTOBER": 10,
    "NOV": 11,
    "NOVEMBER": 11,
    "DEC": 12,
    "DECEMBER": 12,
}


def _parse_int(value: str, field_name: str, line_number: int | None) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedRecordError(f"{field_name} is not an integer: {value!r}", line_number) from None


def _check_text(value: str, field_name: str, max_length: int, line_number: int | None) -> str:
    if not value:
        raise MalformedRecordError(f"{field_name} is empty", line_number)
    if len(value) > max_length:
        raise MalformedRecordError(
            f"{field_name} is longer than {max_length} characters: {value!r}", line_number
        )
    return value


def parse_record_line(line: str, line_number: int | None = None) -> Record:
    """
    Parse one `id,name,surname,age,birthDate,parentId` line into a Record.

    The parentId field may be omitted or left empty for a root person.
    Raises MalformedRecordError on anything else.
    """
    fields = [f.strip() for f in line.strip().split(",")]
    if len(fields) == 5:
        fields.append("")
    if len(fields) != 6:
        raise MalformedRecordError(f"expected 6 fields, got {len(fields)}", line_number)

    raw_id, name, surname, raw_age, birth_date, raw_parent_id = fields

    person_id = _parse_int(raw_id, "id", line_number)
    if person_id <= 0:
        raise MalformedRecordError(f"id must be positive, got {person_id}", line_number)

    parent_id = _parse_int(raw_parent_id, "parentId", line_number) if raw_parent_id else 0
    if parent_id < 0:
        raise MalformedRecordError(f"parentId must not be negative, got {parent_id}", line_number)

    return Record(
        id=person_id,
        name=_check_text(name, "name", MAX_NAME_LENGTH, line_number),
        surname=_check_text(surname, "surname", MAX_NAME_LENGTH, line_number),
        age=_parse_int(raw_age, "age", line_number),
        birth_date=_check_text(birth_date, "birthDate", MAX_BIRTH_DATE_LENGTH, line_number),
        parent_id=parent_id,
    )


def read_records(filepath: Path) -> list[Record]:
    """
    Read all records from a UTF-8 comma-separated file, skipping its header line.

    Raises MalformedRecordError for a line that does not parse or is not valid UTF-8.
    """
    records: list[Record] = []
    with open(filepath, "rb") as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedRecordError(f"not valid UTF-8 ({e.reason})", line_number) from None
            if line_number == 1:
                logger.debug("Skipping header: %s", line.strip())
                continue
            if not line.strip():
                continue
            records.append(parse_record_line(line, line_number))

    logger.info("Read %d records from %s", len(records), filepath)
    return records


def parse_date_string(date_str: str | None) -> str | None:
    """
    Parse a birth date string into ISO format (YYYY-MM-DD).
    Returns None if the date cannot be parsed.

    Handles formats like:
    - "1980-01-01"
    - "01.02.1980"
    - "01/27/1920"
    - "25 NOV 1954"
    - "1698"
    """
    if not date_str:
        return None

    s = date_str.strip()
    if not s:
        return None

    # Pattern 0: ISO format "1839-08-29"
    match = re.match(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", s)
    if match:
        year, month, day = (int(g) for g in match.groups())
        if 1 <= month <= 12 and 1 <= day <= 31:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return None

    # Pattern 1: "29.08.1839" (DD.MM.YYYY)
    match = re.match(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$", s)
    if match:
        day, month, year = (int(g) for g in match.groups())
        if 1 <= month <= 12 and 1 <= day <= 31:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return None

    # Pattern 2: "01/27/1920" (MM/DD/YYYY)
    match = re.match(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", s)
    if match:
        month, day, year = (int(g) for g in match.groups())
        if 1 <= month <= 12 and 1 <= day <= 31:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return None

    # Pattern 3: "25 NOV 1954" (day month year)
    match = re.match(r"^(\d{1,2})\s+([A-Za-z]+)\.?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(2).upper())
        if month:
            return f"{int(match.group(3)):04d}-{month:02d}-{int(match.group(1)):02d}"
        return None

    # Pattern 4: "1698" (year only)
    match = re.match(r"^(\d{4})$", s)
    if match:
        return f"{int(match.group(1)):04d}-01-01"

    return None
