"""
Clinic Report Publisher
Publishes clinic activity reports to Amazon SQS for asynchronous consumers
"""

from .schemas import PetClinicReport, ReportInfo, ReportPeriod, ClinicSummary
from .services import (
    ReportPublisher,
    JSONReportSerializer,
    QueueTransport,
    SQSTransport,
    InMemoryTransport,
)

__version__ = "1.0.0"

__all__ = [
    'PetClinicReport',
    'ReportInfo',
    'ReportPeriod',
    'ClinicSummary',
    'ReportPublisher',
    'JSONReportSerializer',
    'QueueTransport',
    'SQSTransport',
    'InMemoryTransport',
]
