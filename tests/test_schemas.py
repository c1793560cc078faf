"""Tests for lead schemas and entry date parsing."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from leads_core.errors import ParseError
from leads_core.schemas import LEAD_FIELDS, LeadSchema, parse_entry_date


class TestParseEntryDate:

    def test_accepts_zulu_suffix(self):
        assert parse_entry_date("2024-01-02T12:00:00Z") == datetime(
            2024, 1, 2, 12, 0, tzinfo=timezone.utc
        )

    def test_accepts_numeric_offset(self):
        parsed = parse_entry_date("2014-05-07T17:30:20+00:00")
        assert parsed.utcoffset().total_seconds() == 0

    def test_compares_as_instants(self):
        # 10:00 at +02:00 is 08:00 UTC
        assert parse_entry_date("2024-01-01T10:00:00+02:00") < parse_entry_date("2024-01-01T09:00:00Z")

    def test_rejects_missing_offset(self):
        with pytest.raises(ValueError):
            parse_entry_date("2024-01-01T10:00:00")

    def test_accepts_nanosecond_fraction(self):
        parsed = parse_entry_date("2024-01-01T10:00:00.123456789Z")
        assert parsed == datetime(2024, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_entry_date("not-a-date")


class TestLeadSchema:

    def test_reads_id_from_underscore_field(self, make_lead):
        lead = make_lead("abc", "a@x.com", "2024-01-01T00:00:00Z")
        assert lead.id == "abc"

    def test_leads_are_immutable(self, make_lead):
        lead = make_lead("abc", "a@x.com", "2024-01-01T00:00:00Z")
        with pytest.raises(ValidationError):
            lead.email = "b@x.com"

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            LeadSchema.model_validate({"_id": "1", "entryDate": "2024-01-01T00:00:00Z"})
        with pytest.raises(ValidationError):
            LeadSchema.model_validate({"_id": " ", "email": "a@x.com", "entryDate": "2024-01-01T00:00:00Z"})

    def test_passenger_fields_optional(self):
        lead = LeadSchema.model_validate(
            {"_id": "1", "email": "a@x.com", "entryDate": "2024-01-01T00:00:00Z"}
        )
        assert lead.firstName is None
        assert lead.address is None

    def test_entry_datetime_raises_parse_error(self, make_lead):
        lead = make_lead("bad", "a@x.com", "not-a-date")
        with pytest.raises(ParseError) as exc_info:
            lead.entry_datetime
        assert exc_info.value.lead_id == "bad"
        assert "not-a-date" in str(exc_info.value)

    def test_json_dict_uses_output_field_order(self):
        lead = LeadSchema.model_validate({
            "entryDate": "2024-01-01T00:00:00Z",
            "address": "1 Road",
            "email": "a@x.com",
            "_id": "1",
            "lastName": "Smith",
            "firstName": "Ann",
            "unknown": "ignored",
        })
        data = lead.to_json_dict()
        assert tuple(data) == LEAD_FIELDS
        assert data["entryDate"] == "2024-01-01T00:00:00Z"

    def test_str_lists_all_fields(self, make_lead):
        lead = make_lead("1", "a@x.com", "2024-01-01T00:00:00Z")
        assert str(lead) == (
            "Lead{id='1', email='a@x.com', firstName='John', lastName='Smith', "
            "address='123 Street St', entryDate='2024-01-01T00:00:00Z'}"
        )
