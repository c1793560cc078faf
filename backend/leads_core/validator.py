"""Decoding and validation of lead documents"""

import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from leads_core.errors import EmptyInputError, FormatError
from leads_core.schemas import LeadDataSchema, LeadSchema

logger = logging.getLogger(__name__)


class Validator:
    """Validate decoded lead documents against schemas"""

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def validate_leads(self, leads: List[Any]) -> List[LeadSchema]:
        """Validate lead records, collecting every invalid one"""
        validated = []
        for idx, lead in enumerate(leads):
            if not isinstance(lead, dict):
                self.errors.append({
                    'index': idx,
                    'error': f"expected an object, got {type(lead).__name__}",
                    'data': lead,
                })
                continue
            try:
                validated.append(LeadSchema.model_validate(lead))
            except ValidationError as e:
                self.errors.append({
                    'index': idx,
                    'error': '; '.join(
                        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                        for err in e.errors()
                    ),
                    'data': lead,
                })
                logger.warning(f"Invalid lead {idx}: {e}")

        return validated

    def validate_document(self, document: Any) -> LeadDataSchema:
        """
        Validate a decoded lead document

        Args:
            document: Decoded JSON value

        Returns:
            Validated document holding at least one lead

        Raises:
            FormatError: If the document or any lead has the wrong shape
            EmptyInputError: If the document holds no leads
        """
        self.clear_errors()

        if not isinstance(document, dict):
            raise FormatError("Expected a JSON object with a 'leads' array")

        leads = document.get('leads')
        if leads is None or leads == []:
            raise EmptyInputError("The input JSON contains no leads to process.")
        if not isinstance(leads, list):
            raise FormatError("'leads' must be an array")

        validated = self.validate_leads(leads)
        if self.errors:
            details = ', '.join(f"lead {e['index']}: {e['error']}" for e in self.errors)
            raise FormatError(f"Invalid leads ({len(self.errors)}): {details}")

        return LeadDataSchema(leads=validated)

    def decode(self, raw: bytes) -> LeadDataSchema:
        """
        Decode JSON bytes into a validated lead document

        Raises:
            FormatError: If the bytes are not JSON or not a lead document
            EmptyInputError: If the document holds no leads
        """
        if not raw or not raw.strip():
            raise EmptyInputError("The input is empty.")
        try:
            document = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FormatError(f"Input is not valid JSON: {e}") from e
        return self.validate_document(document)

    def get_errors(self) -> List[Dict[str, Any]]:
        return self.errors

    def clear_errors(self):
        self.errors = []
