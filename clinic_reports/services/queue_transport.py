"""
Queue Transport
Transport contract used by the report publisher, plus an in-memory transport
for tests and dry runs
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from clinic_reports.core.error_handling import TransportException

logger = logging.getLogger(__name__)

# Attribute keys understood by every transport (SQS parameter names)
MESSAGE_DEDUPLICATION_ID = "MessageDeduplicationId"
MESSAGE_GROUP_ID = "MessageGroupId"


class QueueTransport(ABC):
    """Sends message bodies to a queue"""

    @abstractmethod
    def send(
        self,
        queue_url: str,
        body: str,
        attributes: Optional[Dict[str, str]] = None,
        delay_seconds: Optional[int] = None
    ) -> str:
        """
        Send one message

        Args:
            queue_url: Queue address
            body: Message body
            attributes: Optional delivery attributes keyed by
                MESSAGE_DEDUPLICATION_ID / MESSAGE_GROUP_ID
            delay_seconds: Optional delivery delay

        Returns:
            Message id issued by the queue
        """

    @abstractmethod
    def close(self) -> None:
        """Release connections held by the transport"""


@dataclass(frozen=True)
class SentMessage:
    """Message accepted by the in-memory transport"""
    queue_url: str
    body: str
    message_id: str
    attributes: Dict[str, str] = field(default_factory=dict)
    delay_seconds: Optional[int] = None


class InMemoryTransport(QueueTransport):
    """Records sent messages instead of talking to a queue service"""

    def __init__(self):
        self._lock = threading.Lock()
        self._messages: List[SentMessage] = []
        self._next_error: Optional[Exception] = None
        self.closed = False

    @property
    def messages(self) -> List[SentMessage]:
        """Messages sent so far, oldest first"""
        with self._lock:
            return list(self._messages)

    def fail_next_send(self, error: Exception) -> None:
        """Make the next send raise `error`"""
        with self._lock:
            self._next_error = error

    def send(
        self,
        queue_url: str,
        body: str,
        attributes: Optional[Dict[str, str]] = None,
        delay_seconds: Optional[int] = None
    ) -> str:
        with self._lock:
            if self.closed:
                raise TransportException(
                    "In-memory transport is closed",
                    details={"queue_url": queue_url}
                )
            if self._next_error is not None:
                error, self._next_error = self._next_error, None
                raise error

            message = SentMessage(
                queue_url=queue_url,
                body=body,
                message_id=str(uuid.uuid4()),
                attributes=dict(attributes or {}),
                delay_seconds=delay_seconds
            )
            self._messages.append(message)

        logger.debug(f"Recorded message {message.message_id} for {queue_url}")
        return message.message_id

    def close(self) -> None:
        with self._lock:
            self.closed = True
