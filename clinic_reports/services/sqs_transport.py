"""
AWS SQS Transport
Sends report messages to Amazon SQS through boto3
"""

import logging
from typing import Dict, Optional

import boto3
from botocore.exceptions import ClientError

from clinic_reports.core.error_handling import TransportException
from clinic_reports.services.queue_transport import QueueTransport

logger = logging.getLogger(__name__)


class SQSTransport(QueueTransport):
    """
    Queue transport backed by a boto3 SQS client

    Errors raised by botocore (ClientError, BotoCoreError) are not wrapped,
    callers see exactly what SQS reported.
    """

    def __init__(
        self,
        region: Optional[str] = None,
        client=None,
        endpoint_url: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None
    ):
        """
        Initialize SQS client

        Args:
            region: AWS region; boto3's default resolution is used when omitted
            client: Ready-made SQS client, skips client creation
            endpoint_url: Custom endpoint (LocalStack, VPC endpoint)
            aws_access_key_id: Explicit access key, used with the secret key only
            aws_secret_access_key: Explicit secret key
        """
        self.region = region

        if client is None:
            client_kwargs = {}
            if region:
                client_kwargs["region_name"] = region
            if endpoint_url:
                client_kwargs["endpoint_url"] = endpoint_url
            if aws_access_key_id and aws_secret_access_key:
                client_kwargs["aws_access_key_id"] = aws_access_key_id
                client_kwargs["aws_secret_access_key"] = aws_secret_access_key

            client = boto3.client("sqs", **client_kwargs)
            logger.info(f"AWS SQS client initialized. Region: {region or 'default'}")

        self.client = client

    def send(
        self,
        queue_url: str,
        body: str,
        attributes: Optional[Dict[str, str]] = None,
        delay_seconds: Optional[int] = None
    ) -> str:
        if self.client is None:
            raise TransportException(
                "SQS client has been closed",
                details={"queue_url": queue_url}
            )

        params = {
            "QueueUrl": queue_url,
            "MessageBody": body,
        }
        if delay_seconds is not None:
            params["DelaySeconds"] = delay_seconds
        if attributes:
            params.update(attributes)

        try:
            response = self.client.send_message(**params)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            logger.error(f"SQS send error ({error_code}): {error_message}")
            raise

        return response["MessageId"]

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
