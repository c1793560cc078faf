"""Document-level lead processing"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from leads_core.changes import ChangeDetector
from leads_core.deduplicator import Deduplicator
from leads_core.errors import LeadsError
from leads_core.output import OutputWriter
from leads_core.schemas import LeadDataSchema
from leads_core.validator import Validator

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of one processing run"""
    read: int
    written: int
    replaced: int
    unchanged: int
    output_path: Union[str, Path, None] = None

    @property
    def removed(self) -> int:
        return self.read - self.written


class LeadProcessor:
    """Decode a lead document, deduplicate it and encode the result"""

    def __init__(self, diff_fields: str = "all"):
        """
        Args:
            diff_fields: Fields compared when logging replacements ('all' or 'entry_date')
        """
        self.diff_fields = diff_fields

    def dedupe(self, data: LeadDataSchema) -> tuple[LeadDataSchema, ProcessResult]:
        """Run both deduplication stages over a validated document"""
        changes = ChangeDetector(self.diff_fields)
        filtered = Deduplicator.filter_by_id_and_email(data.leads, changes)
        summary = changes.summary()
        result = ProcessResult(
            read=len(data.leads),
            written=len(filtered),
            replaced=summary["replaced"],
            unchanged=summary["unchanged"],
        )
        return LeadDataSchema(leads=filtered), result

    def process_document(self, raw: bytes) -> bytes:
        """
        Deduplicate a JSON lead document held in memory

        Raises:
            FormatError: Malformed document
            EmptyInputError: Document holds no leads
            ParseError: A lead has an invalid entryDate
        """
        data = Validator().decode(raw)
        filtered, _ = self.dedupe(data)
        return OutputWriter.encode(filtered)

    def process_leads(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        dry_run: bool = False
    ) -> ProcessResult:
        """
        Read leads from a file, deduplicate them and write the result

        Nothing is written unless every step succeeds.

        Args:
            input_path: JSON file holding {"leads": [...]}
            output_path: Destination JSON file
            dry_run: Process without writing the output file

        Returns:
            Processing counts

        Raises:
            LeadsError: Any read, format, date or write failure
        """
        try:
            raw = OutputWriter.read_bytes(input_path)
            data = Validator().decode(raw)
            filtered, result = self.dedupe(data)

            if dry_run:
                logger.info(f"Dry run: {result.written} of {result.read} leads would be written")
                return result

            OutputWriter.write_json(filtered, output_path)
            result.output_path = output_path
            logger.info(f"Filtered leads have been written to '{output_path}'")
            return result

        except LeadsError as e:
            logger.error(f"An error occurred while processing leads: {e}")
            raise
