import io
import unittest
from unittest.mock import patch


class FakeMinio:
    def __init__(self, bucket_exists=True, fail_with=None):
        self._bucket_exists = bucket_exists
        self.fail_with = fail_with
        self.made_buckets = []
        self.put_calls = []
        self.removed = []

    def bucket_exists(self, bucket_name):
        return self._bucket_exists

    def make_bucket(self, bucket_name):
        self.made_buckets.append(bucket_name)
        self._bucket_exists = True

    def put_object(self, **kwargs):
        if self.fail_with:
            raise self.fail_with
        self.put_calls.append(kwargs)

    def remove_object(self, bucket_name, object_name):
        if self.fail_with:
            raise self.fail_with
        self.removed.append((bucket_name, object_name))


class TestMinioBlobStore(unittest.TestCase):
    def setUp(self):
        from board.extensions import blob_store

        self.blob_store = blob_store

    def test_put_creates_missing_bucket_and_marks_object_public(self):
        client = FakeMinio(bucket_exists=False)
        store = self.blob_store.MinioBlobStore(client, "board")

        store.put("prj3/board/1/a.png", io.BytesIO(b"abc"), 3, content_type="image/png")

        self.assertEqual(client.made_buckets, ["board"])
        self.assertEqual(len(client.put_calls), 1)
        call = client.put_calls[0]
        self.assertEqual(call["bucket_name"], "board")
        self.assertEqual(call["object_name"], "prj3/board/1/a.png")
        self.assertEqual(call["length"], 3)
        self.assertEqual(call["content_type"], "image/png")
        self.assertEqual(call["metadata"], {"x-amz-acl": "public-read"})
        self.assertNotIn("part_size", call)

    def test_put_with_unknown_length_uses_multipart_size(self):
        client = FakeMinio()
        store = self.blob_store.MinioBlobStore(client, "board", public_read=False)

        store.put("k", io.BytesIO(b"abc"), -1)

        call = client.put_calls[0]
        self.assertEqual(call["part_size"], 10 * 1024 * 1024)
        self.assertEqual(call["content_type"], "application/octet-stream")
        self.assertNotIn("metadata", call)

    def test_transport_failures_become_storage_errors(self):
        from board.errors import ErrorKind, StorageError

        store = self.blob_store.MinioBlobStore(FakeMinio(fail_with=RuntimeError("down")), "board")

        with self.assertRaises(StorageError) as put_error:
            store.put("k", io.BytesIO(b"x"), 1)
        self.assertIs(put_error.exception.kind, ErrorKind.STORAGE)
        self.assertIsInstance(put_error.exception.__cause__, RuntimeError)

        with self.assertRaises(StorageError):
            store.delete("k")

    def test_delete_removes_object_by_key(self):
        client = FakeMinio()
        store = self.blob_store.MinioBlobStore(client, "board")

        store.delete("prj3/board/1/a.png")

        self.assertEqual(client.removed, [("board", "prj3/board/1/a.png")])

    def test_bucket_is_checked_once_per_store(self):
        client = FakeMinio(bucket_exists=False)
        store = self.blob_store.MinioBlobStore(client, "board")

        store.put("a", io.BytesIO(b"a"), 1)
        store.put("b", io.BytesIO(b"b"), 1)

        self.assertEqual(client.made_buckets, ["board"])
        self.assertEqual(len(client.put_calls), 2)

    def test_get_blob_store_builds_client_from_app_config_once(self):
        from flask import Flask

        from board.config import Config

        app = Flask(__name__)
        app.config.from_object(Config)
        app.config.update(
            MINIO_ENDPOINT="minio.internal:9000",
            MINIO_ACCESS_KEY="key",
            MINIO_SECRET_KEY="secret",
            MINIO_SECURE=True,
            MINIO_BUCKET="attachments",
            MINIO_PUBLIC_READ=False,
        )
        client = FakeMinio()

        with app.app_context(), patch.object(self.blob_store, "Minio", return_value=client) as minio_cls:
            store = self.blob_store.get_blob_store()
            again = self.blob_store.get_blob_store()

        self.assertIs(store, again)
        self.assertIs(store.client, client)
        self.assertEqual(store.bucket, "attachments")
        self.assertFalse(store.public_read)
        minio_cls.assert_called_once()
        args, kwargs = minio_cls.call_args
        self.assertEqual(args, ("minio.internal:9000",))
        self.assertEqual(kwargs["access_key"], "key")
        self.assertEqual(kwargs["secret_key"], "secret")
        self.assertTrue(kwargs["secure"])


if __name__ == "__main__":
    unittest.main()
