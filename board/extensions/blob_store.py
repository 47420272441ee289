import logging

import urllib3
from flask import current_app
from minio import Minio

from board.errors import StorageError


logger = logging.getLogger(__name__)

PUBLIC_READ_HEADERS = {"x-amz-acl": "public-read"}
UNKNOWN_LENGTH_PART_SIZE = 10 * 1024 * 1024
EXTENSION_KEY = "board.blob_store"


class MinioBlobStore:
    """Key-addressed put/delete of binary objects in one MinIO bucket."""

    def __init__(self, client, bucket: str, public_read: bool = True):
        self.client = client
        self.bucket = bucket
        self.public_read = public_read
        self._bucket_ready = False

    @classmethod
    def from_app(cls, app):
        config = app.config
        # No retries: a failed transfer surfaces to the caller immediately.
        http_client = urllib3.PoolManager(
            timeout=urllib3.Timeout(
                connect=config["MINIO_CONNECT_TIMEOUT"],
                read=config["MINIO_READ_TIMEOUT"],
            ),
            retries=False,
            maxsize=config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
        )
        client = Minio(
            config["MINIO_ENDPOINT"],
            access_key=config["MINIO_ACCESS_KEY"],
            secret_key=config["MINIO_SECRET_KEY"],
            secure=config["MINIO_SECURE"],
            http_client=http_client,
        )
        return cls(
            client,
            config["MINIO_BUCKET"],
            public_read=config.get("MINIO_PUBLIC_READ", True),
        )

    def _ensure_bucket(self):
        if self._bucket_ready:
            return
        if not self.client.bucket_exists(self.bucket):
            self.client.make_bucket(self.bucket)
        self._bucket_ready = True

    def put(self, key: str, data, length: int, content_type: str | None = None):
        upload_kwargs = {
            "bucket_name": self.bucket,
            "object_name": key,
            "data": data,
            "length": length,
            "content_type": content_type or "application/octet-stream",
        }
        if length == -1:
            upload_kwargs["part_size"] = UNKNOWN_LENGTH_PART_SIZE
        if self.public_read:
            upload_kwargs["metadata"] = dict(PUBLIC_READ_HEADERS)

        try:
            self._ensure_bucket()
            self.client.put_object(**upload_kwargs)
        except Exception as e:
            logger.error("Upload of %s to bucket %s failed: %s", key, self.bucket, e)
            raise StorageError("File upload failed") from e

        logger.debug("Stored %s (%s bytes)", key, length)

    def delete(self, key: str):
        try:
            self.client.remove_object(bucket_name=self.bucket, object_name=key)
        except Exception as e:
            raise StorageError(f"Could not delete {key}") from e

        logger.debug("Deleted %s", key)


def get_blob_store():
    """Return the blob store of the current app, built once from its MINIO_* settings."""
    app = current_app._get_current_object()
    store = app.extensions.get(EXTENSION_KEY)
    if store is None:
        store = MinioBlobStore.from_app(app)
        app.extensions[EXTENSION_KEY] = store
    return store
