"""
Report Schemas
Pydantic models for the clinic report message payload
"""

from .report import ReportPeriod, ReportInfo, ClinicSummary, PetClinicReport

__all__ = [
    'ReportPeriod',
    'ReportInfo',
    'ClinicSummary',
    'PetClinicReport'
]
