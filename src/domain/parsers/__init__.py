"""Parsers for task ids and KSP pages."""

from .links import document_base_url, fix_all_links, html_encode
from .status_table import StatusTableParser, parse_statuses
from .task_id import TaskIdParser, parse_task_id, resolve_location
from .task_page import TaskPageParser, extract_task

__all__ = [
    "StatusTableParser",
    "TaskIdParser",
    "TaskPageParser",
    "document_base_url",
    "extract_task",
    "fix_all_links",
    "html_encode",
    "parse_statuses",
    "parse_task_id",
    "resolve_location",
]
