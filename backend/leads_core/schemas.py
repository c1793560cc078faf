"""Pydantic schemas for lead documents"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from leads_core.errors import ParseError

# Output order of lead fields, by JSON name
LEAD_FIELDS = ("_id", "email", "firstName", "lastName", "address", "entryDate")


def parse_entry_date(value: str) -> datetime:
    """
    Parse an ISO-8601 offset date-time

    Args:
        value: Date string such as "2024-01-02T12:00:00Z" or "2014-05-07T17:30:20+00:00"

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value is not a date-time or carries no offset
    """
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        raise ValueError(f"Missing UTC offset: {value}")
    return parsed


class LeadSchema(BaseModel):
    """Lead record schema"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    id: str = Field(alias="_id")
    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    address: Optional[str] = None
    entryDate: str

    @field_validator('id', 'email', 'entryDate')
    @classmethod
    def must_not_be_blank(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('Field is required')
        return v

    @property
    def entry_datetime(self) -> datetime:
        """Entry timestamp used for comparison"""
        try:
            return parse_entry_date(self.entryDate)
        except ValueError as e:
            raise ParseError(self.id, self.entryDate) from e

    def to_json_dict(self) -> dict:
        """Serialize with JSON field names in output order"""
        data = self.model_dump(by_alias=True)
        return {field: data[field] for field in LEAD_FIELDS}

    def __str__(self) -> str:
        return (
            f"Lead{{id='{self.id}', email='{self.email}', firstName='{self.firstName}', "
            f"lastName='{self.lastName}', address='{self.address}', "
            f"entryDate='{self.entryDate}'}}"
        )


class LeadDataSchema(BaseModel):
    """Lead document schema"""
    leads: Optional[List[LeadSchema]] = None

    def to_json_dict(self) -> dict:
        return {"leads": [lead.to_json_dict() for lead in self.leads or []]}
