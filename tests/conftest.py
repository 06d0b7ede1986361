"""
Pytest configuration and fixtures
"""
import pytest

from clinic_reports.schemas import PetClinicReport, ReportInfo, ReportPeriod, ClinicSummary
from clinic_reports.services import InMemoryTransport, ReportPublisher


FIFO_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/pet-clinic-reports.fifo"
STANDARD_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/pet-clinic-reports"


@pytest.fixture
def sample_report() -> PetClinicReport:
    """
    Monthly summary report for a single clinic
    """
    return PetClinicReport(
        report_info=ReportInfo(
            report_id="PCR-2025-04-22-12345",
            clinic_name="Pawsome Pet Care Clinic",
            report_date="2025-04-22T14:30:00Z",
            report_period=ReportPeriod(
                start_date="2025-03-01T00:00:00Z",
                end_date="2025-03-31T23:59:59Z"
            ),
            generated_by="Dr. John Smith",
            report_type="MONTHLY_SUMMARY"
        ),
        clinic_summary=ClinicSummary(
            total_appointments=342,
            new_patients=28,
            returning_patients=314,
            canceled_appointments=17,
            no_shows=8,
            emergency_cases=12,
            average_wait_time=12.5,
            average_visit_duration=28.3,
            patient_satisfaction_score=4.8
        )
    )


@pytest.fixture
def memory_transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def fifo_publisher(memory_transport):
    """
    Publisher bound to a FIFO queue and the in-memory transport
    """
    publisher = ReportPublisher(FIFO_QUEUE_URL, transport=memory_transport)
    yield publisher
    publisher.shutdown()


@pytest.fixture
def standard_publisher(memory_transport):
    """
    Publisher bound to a standard queue and the in-memory transport
    """
    publisher = ReportPublisher(STANDARD_QUEUE_URL, transport=memory_transport)
    yield publisher
    publisher.shutdown()
