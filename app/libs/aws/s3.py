import logging
from io import BytesIO
from typing import Optional

import boto3
from botocore.exceptions import NoCredentialsError, PartialCredentialsError, ClientError

from main.config import settings

logger = logging.getLogger(__name__)


class S3Service:
    """S3 service for handling public uploads"""

    def __init__(self):
        """Initialize S3 client with credentials from settings"""
        try:
            self.s3 = boto3.client(
                "s3",
                aws_access_key_id=settings.AWS_ACCESS_KEY,
                aws_secret_access_key=settings.AWS_SECRET_KEY,
                region_name=settings.AWS_REGION,
            )
            self.bucket = settings.AWS_S3_BUCKET
            self.cdn_domain = settings.CDN_DOMAIN
            self.default_acl = "public-read"

        except (NoCredentialsError, PartialCredentialsError) as e:
            logger.error(f"AWS credentials not found: {e}")
            raise

    def upload_fileobj(
        self,
        file_obj: BytesIO,
        s3_key: str,
        content_type: Optional[str] = None,
        acl: str = None,
    ) -> str:
        """
        Upload a file object to the configured bucket

        Args:
            file_obj: File-like object (BytesIO, file handle, etc.)
            s3_key: S3 object key
            content_type: MIME type of the file
            acl: Access control list (default: public-read)

        Returns:
            Public URL of the uploaded file
        """
        extra_args = {"ACL": acl or self.default_acl}
        if content_type:
            extra_args["ContentType"] = content_type

        try:
            self.s3.upload_fileobj(file_obj, self.bucket, s3_key, ExtraArgs=extra_args)
        except ClientError as e:
            logger.error(f"Failed to upload file object to {s3_key}: {e}")
            raise

        s3_url = self._generate_url(s3_key)
        logger.info(f"Successfully uploaded file object to {s3_url}")
        return s3_url

    def _generate_url(self, s3_key: str) -> str:
        if self.cdn_domain:
            return f"https://{self.cdn_domain}/{s3_key}"
        return f"https://{self.bucket}.s3.amazonaws.com/{s3_key}"


_s3_service = None


def get_s3_service() -> S3Service:
    """Process-wide S3 service, created on first use"""
    global _s3_service
    if _s3_service is None:
        _s3_service = S3Service()
    return _s3_service
