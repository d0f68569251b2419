"""Tests for CLI module."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from file_sorter import __version__
from file_sorter.cli import PrintableLogFilter, cli
from file_sorter.models.config import PATH_ENV_VAR


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv(PATH_ENV_VAR, raising=False)
    return CliRunner()


@pytest.fixture
def inbox(tmp_path):
    source = tmp_path / "inbox"
    source.mkdir()
    for name in ("photo.JPG", "notes.md", "song.flac", "clip.mp4", "archive.zip"):
        (source / name).write_bytes(b"data")
    return source


class TestCli:
    """Test the file-sorter command."""

    def test_organizes_directory(self, runner, inbox):
        """Test a full run from the command line."""
        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "Moving photo.JPG to" in result.output
        assert "✓ Moved notes.md" in result.output
        assert "All files have been organized." in result.output
        assert (inbox / "organized" / "images" / "photo.JPG").exists()
        assert (inbox / "organized" / "documents" / "notes.md").exists()
        assert (inbox / "organized" / "music" / "song.flac").exists()
        assert (inbox / "organized" / "videos" / "clip.mp4").exists()
        assert (inbox / "organized" / "others" / "archive.zip").exists()

    def test_directory_from_environment(self, runner, inbox):
        """Test FILE_SORTER_PATH supplies the directory."""
        result = runner.invoke(cli, [], env={PATH_ENV_VAR: str(inbox)})

        assert result.exit_code == 0, result.output
        assert (inbox / "organized" / "music" / "song.flac").exists()

    def test_directory_from_config_file(self, runner, inbox, tmp_path):
        """Test the config file supplies the directory."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"source_directory": str(inbox)}))

        result = runner.invoke(cli, ["--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert (inbox / "organized" / "videos" / "clip.mp4").exists()

    def test_missing_config_file(self, runner, tmp_path):
        """Test an unreadable config file is a configuration error."""
        result = runner.invoke(cli, ["--config", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read config file" in result.output

    def test_missing_directory_argument(self, runner):
        """Test a configuration error without any directory."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "No directory to organize" in result.output

    def test_directory_does_not_exist(self, runner, tmp_path):
        """Test a listing failure exits non-zero."""
        result = runner.invoke(cli, [str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Cannot list" in result.output
        assert "All files have been organized." not in result.output

    def test_per_file_failures_exit_zero(self, runner, inbox):
        """Test failed files are reported but the run succeeds."""
        existing = inbox / "organized" / "documents" / "notes.md"
        existing.parent.mkdir(parents=True)
        existing.write_text("taken")
        blocker = inbox / "organized" / "music"
        blocker.write_text("not a folder")

        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "Skipped notes.md" in result.output
        assert "Error moving song.flac" in result.output
        assert "Files not moved:" in result.output
        assert (inbox / "notes.md").exists()
        assert (inbox / "organized" / "images" / "photo.JPG").exists()

    def test_duplicate_is_reported(self, runner, inbox):
        """Test a failed delete after copy is worded as a duplicate."""
        for name in ("photo.JPG", "notes.md", "song.flac", "clip.mp4"):
            (inbox / name).unlink()

        with patch("file_sorter.core.mover.os.rename", side_effect=OSError(18, "Invalid cross-device link")), \
                patch("file_sorter.core.mover.os.remove", side_effect=PermissionError(13, "Permission denied")):
            result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "Duplicate: archive.zip" in result.output

    def test_empty_directory(self, runner, tmp_path):
        """Test an empty directory."""
        result = runner.invoke(cli, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No files to organize" in result.output
        assert "All files have been organized." in result.output

    def test_second_run(self, runner, inbox):
        """Test a second run has nothing to do."""
        runner.invoke(cli, [str(inbox)])
        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0
        assert "Moving" not in result.output

    def test_unexpected_error(self, runner, inbox):
        """Test unexpected errors exit non-zero."""
        with patch("file_sorter.cli.FileOrganizer.organize", side_effect=RuntimeError("boom")):
            result = runner.invoke(cli, [str(inbox), "--verbose"])

        assert result.exit_code == 1
        assert "Unexpected error: boom" in result.output
        assert "Traceback" in result.output

    def test_version(self, runner):
        """Test --version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestUnusualNames:
    """Test narration of file names that are awkward to print."""

    @pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="needs byte file names")
    def test_undecodable_name_does_not_stop_run(self, runner, tmp_path):
        """Test a name that is not valid UTF-8 is moved and the run carries on."""
        inbox = tmp_path / "inbox"
        inbox.mkdir()
        (inbox / "a.txt").write_text("a")
        (inbox / "c.mp3").write_bytes(b"mp3")
        with open(os.path.join(os.fsencode(inbox), b"b\xff.jpg"), "wb") as f:
            f.write(b"jpg")

        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "b�.jpg" in result.output
        assert "All files have been organized." in result.output
        assert (inbox / "organized" / "documents" / "a.txt").exists()
        assert (inbox / "organized" / "music" / "c.mp3").exists()
        assert os.listdir(os.fsencode(inbox / "organized" / "images")) == [b"b\xff.jpg"]
        assert sorted(os.listdir(inbox)) == ["organized"]

    def test_markup_in_name_is_printed_literally(self, runner, tmp_path):
        """Test rich markup in a file name is not interpreted."""
        inbox = tmp_path / "inbox"
        inbox.mkdir()
        (inbox / "[red]x.txt").write_text("x")

        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "Moving [red]x.txt to" in result.output
        assert "✓ Moved [red]x.txt" in result.output
        assert (inbox / "organized" / "documents" / "[red]x.txt").exists()

    def test_markup_in_name_of_failed_file(self, runner, tmp_path):
        """Test error lines and the error list escape names too."""
        inbox = tmp_path / "inbox"
        inbox.mkdir()
        (inbox / "[bold]y.txt").write_text("new")
        existing = inbox / "organized" / "documents" / "[bold]y.txt"
        existing.parent.mkdir(parents=True)
        existing.write_text("old")

        result = runner.invoke(cli, [str(inbox)])

        assert result.exit_code == 0, result.output
        assert "Skipped [bold]y.txt" in result.output
        assert "• [bold]y.txt: target file already exists" in result.output
        assert existing.read_text() == "old"

    def test_log_filter_makes_message_printable(self):
        """Test log records with undecodable names are made printable."""
        record = logging.LogRecord("file_sorter", logging.WARNING, __file__, 1,
                                   "Skipped %s", ("/inbox/b\udcff.jpg",), None)

        assert PrintableLogFilter().filter(record) is True
        assert record.getMessage() == "Skipped /inbox/b�.jpg"
        record.getMessage().encode("utf-8")
