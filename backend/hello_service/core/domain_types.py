"""Domain Types - enums that replace bare strings in settings and routing.

Invariants:
    - All valid modes encoded as Enums - no raw string matching

Design Decisions:
    - str Enums: compare and serialize as plain strings (env vars, JSON)
"""

from enum import Enum


class ResponseFormat(str, Enum):
    """Body variant served by GET /."""
    JSON = "json"
    TEXT = "text"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    TEXT = "text"
