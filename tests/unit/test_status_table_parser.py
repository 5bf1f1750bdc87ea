"""Unit tests for the submission status table parser."""

import pytest
from bs4 import BeautifulSoup

from domain.exceptions import StatusParsingError
from domain.models import TaskStatus
from domain.parsers.status_table import StatusTableParser, parse_points, parse_statuses

STATUS_PAGE = """
<html><body>
<table class="zs-tasklist">
<tr><th>Úloha</th><th>Typ</th><th>Název</th><th>Odevzdáno</th><th>Body</th></tr>
<tr class="zs-submitted"><td>32-1-1</td><td>teoretická</td><td> Hrady </td><td>ano</td><td>7 / 10</td></tr>
<tr class="zs-unsubmitted"><td>32-1-2</td><td>praktická</td><td>Písky</td><td></td><td>– / 12</td></tr>
<tr><td>32-1-3</td><td>praktická</td><td>Mosty</td><td>ano</td><td>2.5/8</td></tr>
</table>
<table class="other"><tr><td>ignored</td></tr></table>
</body></html>
"""


def make_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def score_row(score: str) -> BeautifulSoup:
    return make_document(
        '<table class="zs-tasklist"><tr><th>h</th></tr>'
        f"<tr><td>1-1-1</td><td>t</td><td>n</td><td></td><td>{score}</td></tr></table>"
    )


class TestStatusTableParser:
    """Test parsing of status table rows."""

    def test_parses_all_rows_except_header(self):
        statuses = StatusTableParser.parse(make_document(STATUS_PAGE))

        assert [s.id for s in statuses] == ["32-1-1", "32-1-2", "32-1-3"]

    def test_solved_row(self):
        status = parse_statuses(make_document(STATUS_PAGE))[0]

        assert status == TaskStatus(
            id="32-1-1",
            name="Hrady",
            type="teoretická",
            submitted=True,
            solved=True,
            points=7,
            max_points=10,
        )

    def test_unsubmitted_row_with_placeholder_points(self):
        status = parse_statuses(make_document(STATUS_PAGE))[1]

        assert status.submitted is False
        assert status.solved is False
        assert status.points == 0
        assert status.max_points == 12

    def test_submitted_but_not_solved(self):
        status = parse_statuses(make_document(STATUS_PAGE))[2]

        assert status.submitted is True
        assert status.solved is False
        assert status.points == 2
        assert status.max_points == 8

    def test_score_without_slash_raises(self):
        document = make_document(
            '<table class="zs-tasklist"><tr><th>h</th></tr>'
            "<tr><td>1-1-1</td><td>t</td><td>n</td><td></td><td>nic</td></tr></table>"
        )

        with pytest.raises(StatusParsingError, match="nic"):
            parse_statuses(document)

    def test_short_row_raises(self):
        document = make_document(
            '<table class="zs-tasklist"><tr><th>h</th></tr><tr><td>1-1-1</td></tr></table>'
        )

        with pytest.raises(StatusParsingError):
            parse_statuses(document)

    @pytest.mark.parametrize("score", ["— / 12", "- / 12", "–/12", "? / 12"])
    def test_any_placeholder_counts_as_zero(self, score):
        status = parse_statuses(score_row(score))[0]

        assert status.points == 0
        assert status.max_points == 12

    def test_huge_earned_points_do_not_fail(self):
        status = parse_statuses(score_row("9" * 400 + " / 12"))[0]

        assert status.points == int("9" * 400)

        status = parse_statuses(score_row("9" * 400 + ".5 / 12"))[0]

        assert status.points == 0

    def test_unreadable_max_points_raises(self):
        with pytest.raises(StatusParsingError):
            parse_statuses(score_row("1 / " + "9" * 5000))

    def test_missing_table_gives_no_rows(self):
        assert parse_statuses(make_document("<p>Nic tu není.</p>")) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7", 7),
        ("007", 7),
        ("–", 0),
        ("—", 0),
        ("-", 0),
        (".", 0),
        ("1.2.3", 0),
        ("3.9", 3),
        ("9" * 400 + ".5", 0),
        ("9" * 5000, 0),
    ],
)
def test_parse_points(text, expected):
    assert parse_points(text) == expected
