"""Unit tests for the atomfeed command line."""

import json
import os
from unittest.mock import patch

import pytest

from atomfeed.cli import build_parser, main

FEED = {
    "id": "https://example.com/",
    "title": {"type": "text", "value": "Example Feed"},
    "updated": "2024-01-01T10:00:00Z",
    "authors": [{"name": "Jane Doe"}],
    "entries": [
        {
            "id": "https://example.com/posts/1",
            "title": {"value": "First post"},
            "updated": "2024-01-01T10:00:00Z",
            "content": {"type": "text", "value": "Hello"},
        }
    ],
}


@pytest.fixture(autouse=True)
def quiet_environment():
    with patch.dict(os.environ, {}, clear=True), patch(
        "atomfeed.cli.setup_structured_logging"
    ) as setup_logging:
        yield setup_logging


def write_json(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestCliUnit:
    """Unit tests for the validate command."""

    def test_valid_feed(self, tmp_path, capsys, quiet_environment):
        path = write_json(tmp_path, "feed.json", FEED)

        assert main(["validate", path]) == 0

        out = capsys.readouterr().out
        assert out.strip() == "valid feed https://example.com/ (1 entries)"
        quiet_environment.assert_called_once_with("INFO")

    def test_valid_entry(self, tmp_path, capsys):
        path = write_json(tmp_path, "entry.json", FEED["entries"][0])

        assert main(["validate", path, "--kind", "entry"]) == 0
        assert capsys.readouterr().out.strip() == "valid entry https://example.com/posts/1"

    def test_normalize_prints_canonical_encoding(self, tmp_path, capsys):
        path = write_json(tmp_path, "feed.json", FEED)

        assert main(["validate", path, "--normalize"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["updated"] == "2024-01-01T10:00:00.000Z"
        assert data["entries"][0]["title"] == {"type": "text", "value": "First post"}

    def test_incomplete_feed_exits_with_one(self, tmp_path, capsys):
        feed = {key: value for key, value in FEED.items() if key != "authors"}
        path = write_json(tmp_path, "feed.json", feed)

        assert main(["validate", path]) == 1
        assert "FeedIncomplete" in capsys.readouterr().err

    def test_malformed_json_exits_with_one(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        assert "invalid document" in capsys.readouterr().err

    def test_non_utf8_file_exits_with_one(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"id": "caf\xe9"}')

        assert main(["validate", str(path)]) == 1
        assert "invalid document" in capsys.readouterr().err

    def test_missing_file_exits_with_two(self, tmp_path, capsys):
        assert main(["validate", str(tmp_path / "missing.json")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_parser_rejects_unknown_kind(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["validate", "feed.json", "--kind", "source"])
