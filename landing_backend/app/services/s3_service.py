"""
S3 upload service for uploaded files (application CVs).
Stores files under {folder}/{file_name}; the public object URL is what gets persisted.
"""
import boto3
from botocore.exceptions import ClientError

from landing_backend.app.core.config import settings
from landing_backend.app.core.logging_config import get_logger

logger = get_logger("services.s3")


def _get_s3_client():
    """Get configured S3 client."""
    if not settings.aws_access_key_id or not settings.aws_secret_access_key:
        raise ValueError("AWS credentials not configured (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY)")
    return boto3.client(
        "s3",
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )


def build_public_url(key: str) -> str:
    return f"https://{settings.aws_bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"


def upload_file(
    file_buffer: bytes,
    file_name: str,
    folder: str | None = None,
    mime_type: str = "application/octet-stream",
) -> str:
    """
    Upload file to S3 under {folder}/{file_name}.

    Args:
        file_buffer: File content as bytes
        file_name: Object name (e.g. uuid.pdf)
        folder: Key prefix (default: s3_key_prefix)
        mime_type: Content type

    Returns:
        Public URL of the stored object
    """
    prefix = (folder or settings.s3_key_prefix).strip("/")
    key = f"{prefix}/{file_name}"

    logger.info(
        "S3 upload started bucket=%s region=%s key=%s size_bytes=%d",
        settings.aws_bucket_name,
        settings.aws_region,
        key,
        len(file_buffer),
    )

    try:
        s3 = _get_s3_client()
        s3.put_object(
            Bucket=settings.aws_bucket_name,
            Key=key,
            Body=file_buffer,
            ContentType=mime_type,
        )
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "")
        msg = e.response.get("Error", {}).get("Message", str(e))
        logger.error(
            "S3 upload failed bucket=%s key=%s error_code=%s error_message=%s",
            settings.aws_bucket_name,
            key,
            code,
            msg,
        )
        raise RuntimeError(f"S3 upload failed - {code}: {msg}") from e

    url = build_public_url(key)
    logger.info("S3 upload success bucket=%s key=%s url=%s", settings.aws_bucket_name, key, url)
    return url


def parse_s3_key_from_url(url: str | None) -> str | None:
    """Extract S3 object key from a URL built by upload_file. None if it points elsewhere."""
    if not url or not url.startswith("http"):
        return None
    parts = url.replace("https://", "").replace("http://", "").split("/", 1)
    if len(parts) != 2:
        return None
    host, path = parts
    if not host.startswith(f"{settings.aws_bucket_name}.") or not path:
        return None
    return path.split("?", 1)[0]


def delete_file(url: str | None) -> bool:
    """Delete object from S3 by its URL. Returns True on success, False on foreign URL/error."""
    key = parse_s3_key_from_url(url)
    if not key:
        return False
    try:
        s3 = _get_s3_client()
        s3.delete_object(Bucket=settings.aws_bucket_name, Key=key)
        logger.info("S3 delete success bucket=%s key=%s", settings.aws_bucket_name, key)
        return True
    except (ClientError, ValueError) as e:
        logger.warning("S3 delete failed key=%s error=%s", key, e)
        return False
