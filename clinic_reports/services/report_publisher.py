"""
Report Publisher
Publishes pet clinic reports to a message queue (Amazon SQS by default)
"""

import logging
import re
import uuid
from typing import Callable, Dict, Optional, Union

from clinic_reports.core.error_handling import (
    InvalidArgumentException,
    PublisherClosedException,
    log_error,
)
from clinic_reports.schemas.report import PetClinicReport
from clinic_reports.services.queue_transport import (
    MESSAGE_DEDUPLICATION_ID,
    MESSAGE_GROUP_ID,
    InMemoryTransport,
    QueueTransport,
)
from clinic_reports.services.report_serializer import JSONReportSerializer, ReportSerializer
from clinic_reports.services.sqs_transport import SQSTransport

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_GROUP_ID = "pet-clinic-reports"
FIFO_QUEUE_SUFFIX = ".fifo"
MAX_DELAY_SECONDS = 900
MAX_MESSAGE_GROUP_ID_LENGTH = 128

# SQS group ids allow printable ASCII without spaces
_GROUP_ID_INVALID_CHARS = re.compile(r"[^\x21-\x7e]+")

GroupIdSource = Union[str, Callable[[PetClinicReport], str]]


def clinic_message_group_id(report: PetClinicReport) -> str:
    """
    Message group id derived from the clinic name, so ordering is kept per
    clinic instead of across every report
    """
    group_id = _GROUP_ID_INVALID_CHARS.sub("-", report.report_info.clinic_name.strip())
    return group_id[:MAX_MESSAGE_GROUP_ID_LENGTH]


class ReportPublisher:
    """
    Publishes PetClinicReport objects to a queue

    FIFO queues (URL ending in ".fifo") get a fresh deduplication id and the
    configured message group id on every send. Transport errors propagate
    unchanged; nothing is retried here.

    Use as a context manager so the transport is released on every exit path:

        with ReportPublisher(queue_url, region="us-east-1") as publisher:
            publisher.publish_report(report)
    """

    def __init__(
        self,
        queue_url: str,
        region: Optional[str] = None,
        transport: Optional[QueueTransport] = None,
        serializer: Optional[ReportSerializer] = None,
        message_group_id: GroupIdSource = DEFAULT_MESSAGE_GROUP_ID
    ):
        """
        Args:
            queue_url: URL of the queue to publish to
            region: AWS region, only used to build the default SQS transport
            transport: Queue transport; an SQSTransport for `region` if omitted
            serializer: Report serializer; pretty-printed JSON if omitted
            message_group_id: FIFO group id, or a callable deriving it from
                the report (see clinic_message_group_id)
        """
        if not isinstance(queue_url, str) or not queue_url.strip():
            raise InvalidArgumentException("Queue URL cannot be empty")

        self.queue_url = queue_url
        self.region = region
        self.serializer = serializer or JSONReportSerializer()
        self.message_group_id = message_group_id
        self._transport = transport if transport is not None else SQSTransport(region=region)

        logger.info(f"Report publisher ready for queue {queue_url} (fifo: {self.is_fifo})")

    @classmethod
    def from_settings(cls, settings) -> "ReportPublisher":
        """Build a publisher from application settings"""
        transport_kind = settings.REPORT_TRANSPORT.lower()
        if transport_kind == "memory":
            transport = InMemoryTransport()
        elif transport_kind == "sqs":
            transport = SQSTransport(
                region=settings.AWS_REGION,
                endpoint_url=settings.SQS_ENDPOINT_URL,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY
            )
        else:
            raise InvalidArgumentException(
                f"Unknown report transport: {settings.REPORT_TRANSPORT}",
                details={"supported": ["sqs", "memory"]}
            )

        if settings.REPORT_GROUP_BY_CLINIC:
            message_group_id = clinic_message_group_id
        else:
            message_group_id = settings.REPORT_MESSAGE_GROUP_ID

        return cls(
            settings.REPORT_QUEUE_URL,
            region=settings.AWS_REGION,
            transport=transport,
            serializer=JSONReportSerializer(indent=settings.REPORT_JSON_INDENT),
            message_group_id=message_group_id
        )

    @property
    def is_fifo(self) -> bool:
        """Whether the queue is an ordered (FIFO) queue"""
        return self.queue_url.endswith(FIFO_QUEUE_SUFFIX)

    @property
    def transport(self) -> Optional[QueueTransport]:
        """Bound transport, None after shutdown"""
        return self._transport

    def publish_report(self, report: PetClinicReport) -> str:
        """
        Publish a report to the queue

        Args:
            report: The report to publish

        Returns:
            Message id issued by the queue

        Raises:
            InvalidArgumentException: report is None or not a PetClinicReport
            SerializationException: report could not be encoded
            PublisherClosedException: publisher was shut down
            Any transport error, unchanged
        """
        self._validate_report(report)
        message_id = self._send(report)

        logger.info(
            f"Successfully published report {report.report_id} "
            f"to queue with message ID: {message_id}"
        )
        return message_id

    def publish_report_with_delay(self, report: PetClinicReport, delay_seconds: int) -> str:
        """
        Publish a report that becomes visible to consumers after a delay

        Args:
            report: The report to publish
            delay_seconds: Delay in seconds, 0 to 900 inclusive

        Returns:
            Message id issued by the queue
        """
        self._validate_report(report)
        self._validate_delay(delay_seconds)
        message_id = self._send(report, delay_seconds=delay_seconds)

        logger.info(
            f"Successfully published report {report.report_id} "
            f"to queue with message ID: {message_id} (delayed by {delay_seconds} seconds)"
        )
        return message_id

    def build_attributes(self, report: PetClinicReport) -> Dict[str, str]:
        """
        Delivery attributes for one send

        Empty for standard queues. FIFO queues get a new random
        deduplication id on every call and the resolved group id.
        """
        if not self.is_fifo:
            return {}

        return {
            MESSAGE_DEDUPLICATION_ID: str(uuid.uuid4()),
            MESSAGE_GROUP_ID: self._resolve_group_id(report),
        }

    def shutdown(self) -> None:
        """Close the transport; safe to call more than once"""
        if self._transport is not None:
            self._transport.close()
            self._transport = None
            logger.info(f"Report publisher for {self.queue_url} shut down")

    def __enter__(self) -> "ReportPublisher":
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.shutdown()

    def _send(self, report: PetClinicReport, delay_seconds: Optional[int] = None) -> str:
        transport = self._transport
        if transport is None:
            raise PublisherClosedException(details={"queue_url": self.queue_url})

        body = self.serializer.serialize(report)
        attributes = self.build_attributes(report)

        try:
            return transport.send(
                self.queue_url,
                body,
                attributes=attributes or None,
                delay_seconds=delay_seconds
            )
        except Exception as e:
            log_error(e, {
                "report_id": report.report_id,
                "queue_url": self.queue_url,
                "delay_seconds": delay_seconds,
            })
            raise

    def _resolve_group_id(self, report: PetClinicReport) -> str:
        if callable(self.message_group_id):
            group_id = self.message_group_id(report)
        else:
            group_id = self.message_group_id

        if not group_id:
            raise InvalidArgumentException(
                f"Empty message group id for report {report.report_id}"
            )
        return group_id

    @staticmethod
    def _validate_report(report) -> None:
        if report is None:
            raise InvalidArgumentException("Report cannot be null")
        if not isinstance(report, PetClinicReport):
            raise InvalidArgumentException(
                f"Expected PetClinicReport, got {type(report).__name__}"
            )

    @staticmethod
    def _validate_delay(delay_seconds) -> None:
        # bool is an int subclass but never a valid delay
        if (
            delay_seconds is None
            or isinstance(delay_seconds, bool)
            or not isinstance(delay_seconds, int)
            or delay_seconds < 0
            or delay_seconds > MAX_DELAY_SECONDS
        ):
            raise InvalidArgumentException(
                f"Delay must be between 0 and {MAX_DELAY_SECONDS} seconds",
                details={"delay_seconds": delay_seconds}
            )
