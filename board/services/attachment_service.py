import logging

from flask import current_app

from board.errors import StorageError
from board.extensions.blob_store import get_blob_store
from board.repositories import attachment_repository


logger = logging.getLogger(__name__)


def object_key(post_id: int, name: str) -> str:
    namespace = current_app.config["BOARD_OBJECT_NAMESPACE"].strip("/")
    return f"{namespace}/{post_id}/{name}"


def public_path(post_id: int, name: str) -> str:
    return current_app.config["IMAGE_PREFIX"] + object_key(post_id, name)


def _clean_name(name) -> str:
    # keep the uploaded name but never let it add key segments
    return (name or "").replace("\\", "/").rsplit("/", 1)[-1]


def _file_name(file_storage) -> str:
    return _clean_name(getattr(file_storage, "filename", None))


def _get_stream_and_length(file_storage):
    stream = getattr(file_storage, "stream", file_storage)
    try:
        stream.seek(0, 2)
        length = stream.tell()
        stream.seek(0)
        return stream, length
    except (AttributeError, OSError):
        return stream, -1


def add(post_id: int, file_storage) -> str | None:
    """Store one uploaded file for a post and return its key.

    Returns None without touching anything for a missing, nameless or
    empty file. The blob is written before the row is recorded, so a failed
    upload leaves no row pointing at a missing object.
    """
    if file_storage is None:
        return None

    name = _file_name(file_storage)
    if not name.strip():
        return None

    stream, length = _get_stream_and_length(file_storage)
    if length == 0:
        return None

    key = object_key(post_id, name)
    get_blob_store().put(
        key,
        stream,
        length,
        content_type=getattr(file_storage, "mimetype", None),
    )
    attachment_repository.save(post_id, name)
    return key


def remove(post_id: int, name: str) -> str | None:
    """Delete the row for a file if present and return the key whose blob must go.

    The blob itself is left for ``delete_blobs`` so the caller can run it
    once the row deletion is committed. The key is returned even when no
    row existed.
    """
    name = _clean_name(name)
    if not name.strip():
        return None

    attachment_repository.delete_by_composite_id(post_id, name)
    return object_key(post_id, name)


def delete_blobs(keys) -> list[str]:
    """Best-effort blob deletes; returns the keys that could not be deleted."""
    blob_store = get_blob_store()
    failed_keys = []
    for key in keys:
        try:
            blob_store.delete(key)
        except StorageError as e:
            logger.warning("Skipping blob delete for %s: %s", key, e.__cause__ or e)
            failed_keys.append(key)
    return failed_keys


def list_file_names(post_id: int) -> list[str]:
    return attachment_repository.list_file_names_by_post(post_id)


def purge(post_id: int) -> list[str]:
    """Delete every attachment of a post and return the keys whose blob delete failed."""
    # read all names first; the row set is not touched until the blobs are gone
    names = list_file_names(post_id)
    failed_keys = delete_blobs(object_key(post_id, name) for name in names)

    attachment_repository.delete_by_post(post_id)
    return failed_keys
