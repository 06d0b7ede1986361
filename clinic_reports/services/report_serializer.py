"""
Report Serializer
Encodes reports as JSON message bodies and decodes them back
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import ValidationError

from clinic_reports.core.error_handling import SerializationException
from clinic_reports.schemas.report import PetClinicReport

logger = logging.getLogger(__name__)


class ReportSerializer(ABC):
    """Turns a report into a message body and back"""

    @abstractmethod
    def serialize(self, report: PetClinicReport) -> str:
        """Encode a report as a message body"""

    @abstractmethod
    def deserialize(self, payload: str) -> PetClinicReport:
        """Decode a message body into a report"""


class JSONReportSerializer(ReportSerializer):
    """
    JSON serializer for pet clinic reports

    Field names are the camelCase aliases, nesting follows the schema,
    counts stay JSON integers and metrics always carry a fractional part.
    Indentation is cosmetic only.
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def serialize(self, report: PetClinicReport) -> str:
        """
        Serialize report to JSON

        Raises:
            SerializationException: if the report is not a PetClinicReport or
                contains values JSON cannot represent (NaN, infinity)
        """
        if not isinstance(report, PetClinicReport):
            raise SerializationException(
                f"Cannot serialize object of type {type(report).__name__} as a report"
            )

        data = report.model_dump(by_alias=True)
        try:
            return json.dumps(data, indent=self.indent, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize report {report.report_id}: {str(e)}")
            raise SerializationException(
                f"Failed to serialize report {report.report_id}: {str(e)}",
                details={"report_id": report.report_id}
            ) from e

    def deserialize(self, payload: str) -> PetClinicReport:
        """
        Deserialize JSON payload into a report

        Raises:
            SerializationException: if the payload is not valid JSON or does
                not match the report schema
        """
        try:
            return PetClinicReport.model_validate_json(payload)
        except ValidationError as e:
            raise SerializationException(
                "Failed to deserialize report payload",
                details={"errors": e.errors(include_url=False)}
            ) from e
