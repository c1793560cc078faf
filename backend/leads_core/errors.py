"""Error types raised while processing lead documents"""

from typing import Optional


class LeadsError(Exception):
    """Base class for lead processing failures"""


class FormatError(LeadsError, ValueError):
    """Input is not JSON or does not have the expected document shape"""


class EmptyInputError(LeadsError, ValueError):
    """Document parsed but holds no leads"""


class ParseError(LeadsError, ValueError):
    """A lead's entryDate is not an ISO-8601 offset date-time"""

    def __init__(self, lead_id: Optional[str], value: str):
        self.lead_id = lead_id
        self.value = value
        super().__init__(
            f"Invalid entryDate {value!r} for lead {lead_id!r}: "
            f"expected ISO-8601 date-time with offset"
        )


class LeadIOError(LeadsError, OSError):
    """Reading or writing a lead document failed"""
