"""
AWS SQS transport tests
Uses a mocked boto3 client, no AWS access required
"""
import pytest
from unittest.mock import MagicMock, patch
from botocore.exceptions import ClientError, EndpointConnectionError

from clinic_reports.core.error_handling import TransportException
from clinic_reports.services import SQSTransport


QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/pet-clinic-reports.fifo"


@pytest.mark.unit
class TestSQSTransport:
    """Test suite for the SQS transport"""

    def setup_method(self):
        """Set up test fixtures"""
        self.client = MagicMock()
        self.client.send_message.return_value = {
            "MessageId": "5fea7756-0ea4-451a-a703-a558b933e274",
            "MD5OfMessageBody": "fafb00f5732ab283681e124bf8747ed1",
        }
        self.transport = SQSTransport(client=self.client)

    def test_send_minimal(self):
        """Only queue URL and body are sent when nothing else is given"""
        message_id = self.transport.send(QUEUE_URL, '{"reportInfo": {}}')

        assert message_id == "5fea7756-0ea4-451a-a703-a558b933e274"
        self.client.send_message.assert_called_once_with(
            QueueUrl=QUEUE_URL,
            MessageBody='{"reportInfo": {}}'
        )

    def test_send_with_attributes_and_delay(self):
        """FIFO attributes and delay map to SendMessage parameters"""
        self.transport.send(
            QUEUE_URL,
            "{}",
            attributes={
                "MessageDeduplicationId": "dedup-1",
                "MessageGroupId": "pet-clinic-reports",
            },
            delay_seconds=0
        )

        self.client.send_message.assert_called_once_with(
            QueueUrl=QUEUE_URL,
            MessageBody="{}",
            DelaySeconds=0,
            MessageDeduplicationId="dedup-1",
            MessageGroupId="pet-clinic-reports"
        )

    def test_client_error_propagates(self):
        """SQS errors reach the caller unchanged"""
        error = ClientError(
            {"Error": {"Code": "AWS.SimpleQueueService.NonExistentQueue", "Message": "Queue does not exist"}},
            "SendMessage"
        )
        self.client.send_message.side_effect = error

        with pytest.raises(ClientError) as exc_info:
            self.transport.send(QUEUE_URL, "{}")

        assert exc_info.value is error

    def test_connection_error_propagates(self):
        self.client.send_message.side_effect = EndpointConnectionError(endpoint_url="https://sqs.us-east-1.amazonaws.com")

        with pytest.raises(EndpointConnectionError):
            self.transport.send(QUEUE_URL, "{}")

    def test_close_is_idempotent(self):
        self.transport.close()
        self.transport.close()

        self.client.close.assert_called_once()
        assert self.transport.client is None

    def test_send_after_close(self):
        self.transport.close()

        with pytest.raises(TransportException):
            self.transport.send(QUEUE_URL, "{}")


@pytest.mark.unit
@patch("clinic_reports.services.sqs_transport.boto3.client")
def test_client_created_for_region(mock_client):
    """Region hint is passed to boto3"""
    transport = SQSTransport(region="sa-east-1")

    mock_client.assert_called_once_with("sqs", region_name="sa-east-1")
    assert transport.client is mock_client.return_value
    assert transport.region == "sa-east-1"


@pytest.mark.unit
@patch("clinic_reports.services.sqs_transport.boto3.client")
def test_partial_credentials_ignored(mock_client):
    """An access key without a secret key is left to boto3's credential chain"""
    SQSTransport(region="us-east-1", aws_access_key_id="AKIAEXAMPLE")

    mock_client.assert_called_once_with("sqs", region_name="us-east-1")


@pytest.mark.unit
@patch("clinic_reports.services.sqs_transport.boto3.client")
def test_injected_client_skips_boto3(mock_client):
    client = MagicMock()

    transport = SQSTransport(region="us-east-1", client=client)

    mock_client.assert_not_called()
    assert transport.client is client
