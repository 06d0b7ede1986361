"""
Report Publishing Services
Serialization, queue transports and the report publisher
"""

from .report_serializer import ReportSerializer, JSONReportSerializer
from .queue_transport import QueueTransport, InMemoryTransport, SentMessage
from .sqs_transport import SQSTransport
from .report_publisher import (
    ReportPublisher,
    DEFAULT_MESSAGE_GROUP_ID,
    clinic_message_group_id,
)

__all__ = [
    'ReportSerializer',
    'JSONReportSerializer',
    'QueueTransport',
    'InMemoryTransport',
    'SentMessage',
    'SQSTransport',
    'ReportPublisher',
    'DEFAULT_MESSAGE_GROUP_ID',
    'clinic_message_group_id',
]
