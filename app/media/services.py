import logging
import mimetypes
import os
from io import BytesIO

from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app
from PIL import Image
from werkzeug.utils import secure_filename

from app.libs.aws.s3 import get_s3_service
from app.libs.constants import MESSAGES
from app.libs.errors import ValidationError
from app.libs.helpers import generate_random_string
from .errors import UploadError, FileTooLargeError, UnsupportedMediaError

logger = logging.getLogger(__name__)

UPLOAD_PREFIX = "uploads"
ALLOWED_IMAGE_FORMATS = {"JPEG", "PNG", "GIF", "WEBP"}


class UploadService:
    @staticmethod
    def build_key(filename, content_type):
        """``uploads/<stem>-<random>.<ext>``; the suffix keeps repeated names apart"""
        stem, ext = os.path.splitext(secure_filename(filename))
        if not ext:
            ext = mimetypes.guess_extension(content_type) or ""
        suffix = generate_random_string(8).lower()
        return f"{UPLOAD_PREFIX}/{stem or 'file'}-{suffix}{ext.lower()}"

    @staticmethod
    def _inspect_image(data):
        """Return the MIME type of ``data`` or raise if it is not a supported image"""
        try:
            with Image.open(BytesIO(data)) as img:
                image_format = img.format
                img.verify()
        except Exception as e:
            logger.warning(f"Rejected upload, not a readable image: {e}")
            raise UnsupportedMediaError()

        if image_format not in ALLOWED_IMAGE_FORMATS:
            logger.warning(f"Rejected upload with image format {image_format}")
            raise UnsupportedMediaError()
        return Image.MIME.get(image_format, f"image/{image_format.lower()}")

    @staticmethod
    def upload_image(filename, stream, content_length=None, user_id=None):
        """
        Validate and store an image in the public upload bucket.

        Args:
            filename: Client supplied file name, used for the key stem
            stream: Request body stream
            content_length: Declared body size, checked before reading
            user_id: Uploader, for logging

        Returns:
            dict with ``url``, ``pathname`` and ``content_type``
        """
        if not filename or not filename.strip():
            raise ValidationError(MESSAGES["FILENAME_REQUIRED"])

        max_size = current_app.config["MAX_UPLOAD_SIZE"]
        if content_length is not None and content_length > max_size:
            raise FileTooLargeError(payload={"maxSize": max_size})

        # At most one byte over the limit is read, whatever the header says
        data = stream.read(max_size + 1)
        if not data:
            raise ValidationError(MESSAGES["FILE_MISSING"])
        if len(data) > max_size:
            raise FileTooLargeError(payload={"maxSize": max_size})

        content_type = UploadService._inspect_image(data)
        key = UploadService.build_key(filename, content_type)

        try:
            url = get_s3_service().upload_fileobj(BytesIO(data), key, content_type)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 upload failed for {key}: {e}")
            raise UploadError()

        logger.info(f"User {user_id} uploaded {key} ({len(data)} bytes)")
        return {"url": url, "pathname": key, "content_type": content_type}
