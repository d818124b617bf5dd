"""Ballot selection state and validity rules."""

from .offices import COLUMN_CONFIGS, MAX_PREFERENCES, ColumnConfig, column_config
from .rules import THRESHOLD, VOTING_RULES, alliance_threshold
from .selection import BallotSelection, ColumnSelection
from .validator import (
    BallotClassification,
    ColumnResult,
    VoteStatus,
    validate_ballot,
    validate_column,
)

__all__ = [
    "BallotClassification",
    "BallotSelection",
    "COLUMN_CONFIGS",
    "ColumnConfig",
    "ColumnResult",
    "ColumnSelection",
    "MAX_PREFERENCES",
    "THRESHOLD",
    "VOTING_RULES",
    "VoteStatus",
    "alliance_threshold",
    "column_config",
    "validate_ballot",
    "validate_column",
]
