"""Parser for the submission status table of the practice area."""

import math
import re

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.exceptions import StatusParsingError
from domain.models import TaskStatus

ROW_SELECTOR = "table.zs-tasklist tr"
UNSUBMITTED_CLASS = "zs-unsubmitted"
SUBMITTED_CLASS = "zs-submitted"

# earned may be a placeholder such as "–", "—" or "-"
SCORE_PATTERN = re.compile(r"([^/\s]+) */ *(\d+)")

ID_CELL, TYPE_CELL, NAME_CELL, SCORE_CELL = 0, 1, 2, 4


class StatusTableParser:
    """Parser for ``table.zs-tasklist`` rows."""

    @classmethod
    def parse(cls, document: BeautifulSoup) -> list[TaskStatus]:
        """
        Parse all task rows of the status table, header row excluded.

        Raises:
            StatusParsingError: If a row does not have the expected structure
        """
        rows = document.select(ROW_SELECTOR)[1:]
        statuses = [cls._parse_row(row) for row in rows]
        logger.debug(f"Parsed {len(statuses)} task status row(s)")
        return statuses

    @classmethod
    def _parse_row(cls, row: Tag) -> TaskStatus:
        classes = row.get("class") or []
        cells = row.find_all(["td", "th"], recursive=False)
        if len(cells) <= SCORE_CELL:
            raise StatusParsingError(f"Status row has {len(cells)} cell(s), expected at least 5")

        score_text = cells[SCORE_CELL].get_text().strip()
        match = SCORE_PATTERN.search(score_text)
        if not match:
            raise StatusParsingError(f"Unrecognized score: {score_text!r}")

        earned, max_points = match.groups()
        try:
            max_points_value = int(max_points)
        except ValueError as e:
            raise StatusParsingError(f"Unrecognized maximum points: {score_text!r}") from e

        return TaskStatus(
            id=cells[ID_CELL].get_text().strip(),
            type=cells[TYPE_CELL].get_text().strip(),
            name=cells[NAME_CELL].get_text().strip(),
            submitted=UNSUBMITTED_CLASS not in classes,
            solved=SUBMITTED_CLASS in classes,
            points=parse_points(earned),
            max_points=max_points_value,
        )


def parse_points(text: str) -> int:
    """Parse earned points, placeholders and malformed numbers count as zero."""
    try:
        return int(text)
    except ValueError:
        pass

    try:
        return math.floor(float(text))
    except (ValueError, OverflowError):
        return 0


def parse_statuses(document: BeautifulSoup) -> list[TaskStatus]:
    """Convenience function to parse the status table."""
    return StatusTableParser.parse(document)
