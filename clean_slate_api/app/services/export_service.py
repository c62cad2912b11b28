"""
CSV export of participant records.

The header row is fixed and rows follow store order.  Text cells are
always quoted and embedded double quotes are doubled, so names or
offices containing commas or quotes survive a round trip through a
spreadsheet.  List answers are flattened: adjectives and traits with
``", "`` and priorities with ``"; "``.  Answers that were never sent
are left empty.
"""

from __future__ import annotations

import csv
import io
import time
from typing import Iterable, List

from ..schemas.participant import Participant, join_text

CSV_HEADER = [
    "ID",
    "Name",
    "Congressional Office",
    "Profile",
    "Primary Concern",
    "Adjectives",
    "Priorities",
    "Selected Traits",
    "Timestamp",
]

UNKNOWN_OFFICE = "Unknown"


class ExportService:
    """Service rendering participants as CSV."""

    @classmethod
    def to_csv(cls, participants: Iterable[Participant]) -> str:
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="\n").writerow(CSV_HEADER)
        writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        for participant in participants:
            writer.writerow(cls._row(participant))
        return buffer.getvalue()

    @staticmethod
    def _row(participant: Participant) -> List[object]:
        return [
            participant.id,
            participant.display("name"),
            participant.office_name or UNKNOWN_OFFICE,
            participant.display("audience_profile"),
            participant.display("primary_concern"),
            join_text(participant.adjectives, ", "),
            join_text(participant.priorities, "; "),
            join_text(participant.selected_traits, ", "),
            participant.timestamp,
        ]

    @staticmethod
    def export_filename() -> str:
        """Attachment name stamped with the current epoch milliseconds."""
        return f"participants-{time.time_ns() // 1_000_000}.csv"
