"""
Pydantic schemas for pet clinic activity reports

Field aliases are the camelCase names consumers see on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


REPORT_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class ReportPeriod(BaseModel):
    """Reporting window covered by a report"""
    model_config = REPORT_MODEL_CONFIG

    start_date: str = Field(..., alias="startDate", description="Period start (ISO-8601)")
    end_date: str = Field(..., alias="endDate", description="Period end (ISO-8601)")


class ReportInfo(BaseModel):
    """Identification and provenance of a report"""
    model_config = REPORT_MODEL_CONFIG

    report_id: str = Field(..., alias="reportId", description="Caller supplied unique id")
    clinic_name: str = Field(..., alias="clinicName")
    report_date: str = Field(..., alias="reportDate", description="Generation timestamp (ISO-8601)")
    report_period: ReportPeriod = Field(..., alias="reportPeriod")
    generated_by: str = Field(..., alias="generatedBy")
    report_type: str = Field(..., alias="reportType", description="Free-form category, e.g. MONTHLY_SUMMARY")


class ClinicSummary(BaseModel):
    """Summary statistics for the reporting period"""
    model_config = REPORT_MODEL_CONFIG

    # Counts
    total_appointments: StrictInt = Field(..., alias="totalAppointments")
    new_patients: StrictInt = Field(..., alias="newPatients")
    returning_patients: StrictInt = Field(..., alias="returningPatients")
    canceled_appointments: StrictInt = Field(..., alias="canceledAppointments")
    no_shows: StrictInt = Field(..., alias="noShows")
    emergency_cases: StrictInt = Field(..., alias="emergencyCases")

    # Metrics
    average_wait_time: StrictFloat = Field(..., alias="averageWaitTime", description="Minutes")
    average_visit_duration: StrictFloat = Field(..., alias="averageVisitDuration", description="Minutes")
    patient_satisfaction_score: StrictFloat = Field(..., alias="patientSatisfactionScore")

    @field_validator(
        "average_wait_time", "average_visit_duration", "patient_satisfaction_score"
    )
    @classmethod
    def keep_fractional(cls, value: float) -> float:
        # Integral input must still go out as a JSON float
        return float(value)


class PetClinicReport(BaseModel):
    """A clinic activity report, published once as a queue message"""
    model_config = REPORT_MODEL_CONFIG

    report_info: ReportInfo = Field(..., alias="reportInfo")
    clinic_summary: ClinicSummary = Field(..., alias="clinicSummary")

    @property
    def report_id(self) -> str:
        return self.report_info.report_id
