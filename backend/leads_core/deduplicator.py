"""Most-recent-wins deduplication of leads"""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from leads_core.changes import ChangeDetector
from leads_core.schemas import LeadSchema

logger = logging.getLogger(__name__)

FieldSelector = Callable[[LeadSchema], str]


def select_id(lead: LeadSchema) -> str:
    return lead.id


def select_email(lead: LeadSchema) -> str:
    return lead.email


class Deduplicator:
    """Keep the latest lead per key"""

    @staticmethod
    def latest_by(
        leads: Iterable[LeadSchema],
        selector: FieldSelector,
        changes: Optional[ChangeDetector] = None
    ) -> Dict[str, LeadSchema]:
        """
        Reduce leads to the most recent one per selected key

        A stored lead is only replaced by a strictly later one, so on equal
        timestamps the lead seen first is kept.

        Args:
            leads: Leads in input order
            selector: Function returning the key of a lead (e.g. select_id)
            changes: Change detector receiving insert/replace/unchanged events

        Returns:
            Mapping of key to latest lead, in order of first appearance

        Raises:
            ParseError: If any lead's entryDate cannot be parsed
        """
        if changes is None:
            changes = ChangeDetector()

        latest: Dict[str, LeadSchema] = {}
        timestamps: Dict[str, datetime] = {}

        for lead in leads:
            key = selector(lead)
            entry_time = lead.entry_datetime

            if key not in latest:
                latest[key] = lead
                timestamps[key] = entry_time
                changes.record_insert(key, lead)
            elif entry_time > timestamps[key]:
                changes.record_replace(key, latest[key], lead)
                latest[key] = lead
                timestamps[key] = entry_time
            else:
                changes.record_unchanged(key, latest[key], lead)

        return latest

    @staticmethod
    def filter_by_id_and_email(
        leads: Iterable[LeadSchema],
        changes: Optional[ChangeDetector] = None
    ) -> List[LeadSchema]:
        """
        Keep the latest lead per id, then the latest of those per email

        Args:
            leads: Leads in input order
            changes: Change detector shared by both stages

        Returns:
            Surviving leads, ordered by first appearance of their email among
            the per-id winners
        """
        if changes is None:
            changes = ChangeDetector()

        by_id = Deduplicator.latest_by(leads, select_id, changes)
        by_email = Deduplicator.latest_by(by_id.values(), select_email, changes)

        logger.info(f"Filtering complete. Total unique leads: {len(by_email)}")
        return list(by_email.values())
