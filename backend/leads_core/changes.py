"""Change detection and audit logging for lead replacements"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from leads_core.schemas import LEAD_FIELDS, LeadSchema

logger = logging.getLogger(__name__)

INSERTED = "inserted"
REPLACED = "replaced"
UNCHANGED = "unchanged"


@dataclass(frozen=True)
class FieldChange:
    """A single field that differs between two leads"""
    field: str
    previous: Optional[str]
    current: Optional[str]


@dataclass
class ChangeEvent:
    """What happened to one key during a reduction"""
    key: str
    action: str
    existing: Optional[LeadSchema] = None
    candidate: Optional[LeadSchema] = None
    changes: List[FieldChange] = field(default_factory=list)


class ChangeDetector:
    """Detect and log differences when one lead replaces another"""

    def __init__(self, diff_fields: str = "all"):
        """
        Initialize change detector

        Args:
            diff_fields: 'all' to compare every lead field, 'entry_date' to
                compare only the entry timestamp
        """
        if diff_fields not in ("all", "entry_date"):
            raise ValueError(f"Unknown diff_fields: {diff_fields}")
        self.diff_fields = diff_fields
        self.events: List[ChangeEvent] = []

    def detect_changes(self, existing: LeadSchema, current: LeadSchema) -> List[FieldChange]:
        """
        List fields that differ between the kept lead and its replacement

        Args:
            existing: Lead currently stored for the key
            current: Lead replacing it

        Returns:
            Field changes in output field order
        """
        if self.diff_fields == "entry_date":
            if existing.entry_datetime == current.entry_datetime:
                return []
            return [FieldChange("entryDate", existing.entryDate, current.entryDate)]

        previous_data = existing.to_json_dict()
        current_data = current.to_json_dict()
        return [
            FieldChange(name, previous_data[name], current_data[name])
            for name in LEAD_FIELDS
            if previous_data[name] != current_data[name]
        ]

    def record_insert(self, key: str, lead: LeadSchema):
        self.events.append(ChangeEvent(key=key, action=INSERTED, candidate=lead))
        logger.info(f"New record for field: {key}")

    def record_replace(self, key: str, existing: LeadSchema, current: LeadSchema):
        """Log a replacement with the fields it changes"""
        changes = self.detect_changes(existing, current)
        self.events.append(ChangeEvent(
            key=key,
            action=REPLACED,
            existing=existing,
            candidate=current,
            changes=changes,
        ))

        lines = [
            f"Updating record for field: {key}",
            f"Existing Record: {existing}",
            f"New Record: {current}",
            "Field Changes:",
        ]
        for change in changes:
            lines.append(f"    - {change.field}: {change.previous} -> {change.current}")
        logger.info("\n".join(lines))

    def record_unchanged(self, key: str, existing: LeadSchema, candidate: LeadSchema):
        self.events.append(ChangeEvent(
            key=key,
            action=UNCHANGED,
            existing=existing,
            candidate=candidate,
        ))
        logger.info(f"No update for {key}: Existing record is newer or the same.")

    def summary(self) -> dict:
        """Count events by action"""
        counts = {INSERTED: 0, REPLACED: 0, UNCHANGED: 0}
        for event in self.events:
            counts[event.action] += 1
        return counts
