"""
Publish a sample pet clinic report to the configured queue

Usage:
    python main.py [--delay SECONDS] [--queue-url URL] [--dry-run]

Examples:
    python main.py                      # Publish to REPORT_QUEUE_URL
    python main.py --delay 60           # Visible to consumers after one minute
    python main.py --dry-run            # Use the in-memory transport, print the payload
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file FIRST, before settings are built
load_dotenv()

from config import settings
from clinic_reports.core.logging_config import configure_logging
from clinic_reports.core.monitoring import init_sentry
from clinic_reports.schemas import PetClinicReport, ReportInfo, ReportPeriod, ClinicSummary
from clinic_reports.services import ReportPublisher, InMemoryTransport

logger = logging.getLogger(__name__)


def build_sample_report() -> PetClinicReport:
    """Monthly summary used to exercise the publisher"""
    period = ReportPeriod(
        start_date="2025-03-01T00:00:00Z",
        end_date="2025-03-31T23:59:59Z"
    )
    info = ReportInfo(
        report_id="PCR-2025-04-22-12345",
        clinic_name="Pawsome Pet Care Clinic",
        report_date="2025-04-22T14:30:00Z",
        report_period=period,
        generated_by="Dr. John Smith",
        report_type="MONTHLY_SUMMARY"
    )
    summary = ClinicSummary(
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
    return PetClinicReport(report_info=info, clinic_summary=summary)


def main(argv=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Publish a sample pet clinic report",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=None,
        help="Delay in seconds (0-900) before the message is visible"
    )
    parser.add_argument(
        "--queue-url",
        default=None,
        help="Override REPORT_QUEUE_URL"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Publish to the in-memory transport instead of SQS"
    )
    args = parser.parse_args(argv)

    configure_logging(settings.LOG_LEVEL)
    if init_sentry(settings):
        logger.info("Sentry monitoring initialized")

    overrides = {}
    if args.queue_url:
        overrides["REPORT_QUEUE_URL"] = args.queue_url
    if args.dry_run:
        overrides["REPORT_TRANSPORT"] = "memory"
    run_settings = settings.model_copy(update=overrides) if overrides else settings

    report = build_sample_report()

    try:
        with ReportPublisher.from_settings(run_settings) as publisher:
            if args.delay is None:
                message_id = publisher.publish_report(report)
            else:
                message_id = publisher.publish_report_with_delay(report, args.delay)

            if isinstance(publisher.transport, InMemoryTransport):
                print(publisher.transport.messages[-1].body)
    except Exception as e:
        logger.error(f"Error publishing report: {str(e)}", exc_info=True)
        return 1

    print(f"Published report with message ID: {message_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
