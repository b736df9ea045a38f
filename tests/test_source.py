import io
import os
import tempfile
import unittest

from hexmix.core.source import SourceError, read_bytes, read_stream


class TestSource(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "tiny.bin")
        with open(self.path, "wb") as handle:
            handle.write(bytes(range(20)))

    def tearDown(self):
        self._tmp.cleanup()

    def test_read_all(self):
        self.assertEqual(read_bytes(self.path), bytes(range(20)))

    def test_read_limit(self):
        self.assertEqual(read_bytes(self.path, 5), bytes(range(5)))

    def test_zero_limit_is_unbounded(self):
        self.assertEqual(len(read_bytes(self.path, 0)), 20)

    def test_limit_past_end(self):
        self.assertEqual(len(read_bytes(self.path, 100)), 20)

    def test_missing_file(self):
        with self.assertRaises(SourceError) as ctx:
            read_bytes(os.path.join(self._tmp.name, "missing-file"))
        self.assertIn("no such file", str(ctx.exception))

    def test_directory(self):
        with self.assertRaises(SourceError) as ctx:
            read_bytes(self._tmp.name)
        self.assertIn("is a directory", str(ctx.exception))

    def test_read_stream(self):
        stream = io.BytesIO(b"012345")
        self.assertEqual(read_stream(stream, 3), b"012")
        self.assertEqual(read_stream(io.BytesIO(b""), None), b"")


if __name__ == "__main__":
    unittest.main()
