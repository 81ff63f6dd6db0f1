"""
Tests for the command-line interface.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from nexus_api.cli import main, parse_args, run
from nexus_api.network.client import NexusConnection, Page


def _connection():
    connection = MagicMock(spec=NexusConnection)
    connection.last_failure = None
    connection.paginate = False
    return connection


class TestParseArgs(unittest.TestCase):
    def test_get_command(self):
        args = parse_args(["--host", "nexus.example.com", "get", "repositories"])
        self.assertEqual(args.host, "nexus.example.com")
        self.assertEqual(args.command, "get")
        self.assertEqual(args.endpoint, "repositories")
        self.assertFalse(args.all)

    def test_download_requires_output(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), patch("sys.stderr", io.StringIO()):
                parse_args(["download", "https://cdn.example.com/a.jar"])


class TestRun(unittest.TestCase):
    def _run(self, argv, connection):
        out = io.StringIO()
        with redirect_stdout(out):
            code = run(parse_args(argv), connection)
        return code, out.getvalue()

    def test_get_prints_json(self):
        connection = _connection()
        connection.get_response.return_value = [{"id": 1}]
        code, out = self._run(["get", "assets?repository=x"], connection)
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [{"id": 1}])
        connection.get_response.assert_called_once_with("assets?repository=x")

    def test_get_all_walks_pages(self):
        connection = _connection()
        connection.iter_pages.return_value = iter([Page([1], "p2"), Page([2, 3])])
        with patch("sys.stderr", io.StringIO()):
            code, out = self._run(["get", "assets?repository=x", "--all"], connection)
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [1, 2, 3])

    def test_get_failure_exit_code(self):
        connection = _connection()
        connection.get_response.return_value = {}
        connection.last_failure = MagicMock()
        code, _ = self._run(["get", "repositories"], connection)
        self.assertEqual(code, 1)

    def test_post_with_data(self):
        connection = _connection()
        connection.post.return_value = True
        code, out = self._run(["post", "tags", "--data", '{"name":"v1"}'], connection)
        self.assertEqual((code, out.strip()), (0, "OK"))
        connection.post.assert_called_once_with("tags", parameters='{"name":"v1"}')

    def test_delete_failure(self):
        connection = _connection()
        connection.delete.return_value = False
        code, out = self._run(["delete", "components/abc"], connection)
        self.assertEqual((code, out.strip()), (1, "FAILED"))

    def test_content_length(self):
        connection = _connection()
        connection.content_length.return_value = 2048
        code, out = self._run(["content-length", "https://cdn.example.com/a.jar"], connection)
        self.assertEqual((code, out.strip()), (0, "2048"))

    def test_download_writes_file(self):
        connection = _connection()
        response = MagicMock(spec=requests.Response)
        response.content = b"PK\x03\x04"
        connection.download.return_value = response
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "nested" / "a.jar"
            code, _ = self._run(
                ["download", "https://cdn.example.com/a.jar", "--output", str(target)],
                connection,
            )
            self.assertEqual(code, 0)
            self.assertEqual(target.read_bytes(), b"PK\x03\x04")


class TestMain(unittest.TestCase):
    @patch("nexus_api.cli.NexusConnection")
    def test_main_builds_connection_from_args(self, mock_connection):
        mock_connection.return_value.delete.return_value = True
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main([
                "--host", "nexus.example.com",
                "--user", "admin",
                "--password", "admin123",
                "delete", "components/abc",
            ])
        self.assertEqual(ctx.exception.code, 0)
        mock_connection.assert_called_once_with(
            username="admin", password="admin123", hostname="nexus.example.com",
        )

    def test_main_requires_host(self):
        with self.assertRaises(SystemExit) as ctx:
            main(["--host", "", "get", "repositories"])
        self.assertIn("NEXUS_HOSTNAME", str(ctx.exception.code))


if __name__ == "__main__":
    unittest.main()
