from __future__ import annotations

import os
import socket
from pathlib import Path

import pytest

from chat_markdown.filesystem import (
    contains_symlink,
    ensure_regular_file,
    get_max_file_size,
    get_max_line_length,
    normalize_filepath,
    read_markdown,
    resolve_output_path,
    write_html,
)


def test_get_max_file_size_uses_default_when_unset(monkeypatch):
    monkeypatch.delenv("CHAT_MARKDOWN_MAX_FILE_SIZE", raising=False)
    assert get_max_file_size(default=123) == 123


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv("CHAT_MARKDOWN_MAX_FILE_SIZE", "2048")
    assert get_max_file_size() == 2048


def test_get_max_file_size_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("CHAT_MARKDOWN_MAX_FILE_SIZE", "invalid")
    with pytest.raises(ValueError):
        get_max_file_size()


def test_get_max_line_length_rejects_non_positive(monkeypatch):
    monkeypatch.setenv("CHAT_MARKDOWN_MAX_LINE_LENGTH", "0")
    with pytest.raises(ValueError):
        get_max_line_length()


def test_normalize_filepath_accepts_markdown_file(tmp_path: Path):
    target = tmp_path / "chat.markdown"
    target.write_text("hi\n", encoding="utf-8")

    assert normalize_filepath(str(target), tmp_path.resolve()) == target.resolve()


def test_normalize_filepath_missing_file(tmp_path: Path):
    with pytest.raises(ValueError):
        normalize_filepath(str(tmp_path / "missing.md"), tmp_path)


def test_normalize_filepath_rejects_directory(tmp_path: Path):
    folder = tmp_path / "folder.md"
    folder.mkdir()
    with pytest.raises(ValueError):
        normalize_filepath(str(folder), tmp_path)


def test_normalize_filepath_rejects_symlink(tmp_path: Path):
    target = tmp_path / "actual.md"
    target.write_text("hi\n", encoding="utf-8")
    link = tmp_path / "alias.md"
    os.symlink(target, link)

    with pytest.raises(ValueError) as exc_info:
        normalize_filepath(str(link), tmp_path)
    assert "Symlinks are not supported" in str(exc_info.value)


def test_contains_symlink_handles_oserror(monkeypatch, tmp_path: Path):
    probe = tmp_path / "probe.md"
    probe.write_text("hi\n", encoding="utf-8")
    original_is_symlink = Path.is_symlink
    call_count = {"count": 0}

    def _flaky_is_symlink(self):
        if self == probe and call_count["count"] == 0:
            call_count["count"] += 1
            raise OSError("stat boom")
        return original_is_symlink(self)

    monkeypatch.setattr(Path, "is_symlink", _flaky_is_symlink)
    assert contains_symlink(probe) is False


def test_ensure_regular_file_handles_missing_file(tmp_path: Path):
    with pytest.raises(IOError):
        ensure_regular_file(tmp_path / "missing.md")


def test_ensure_regular_file_rejects_symlink(tmp_path: Path):
    target = tmp_path / "actual.md"
    target.write_text("hi\n", encoding="utf-8")
    link = tmp_path / "alias.md"
    os.symlink(target, link)

    with pytest.raises(IOError):
        ensure_regular_file(link)


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="Unix sockets not available")
def test_ensure_regular_file_rejects_socket(tmp_path: Path):
    socket_path = tmp_path / "socket.md"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(socket_path))
    except OSError:  # pragma: no cover
        pytest.skip("Unable to create socket")
    finally:
        sock.close()

    with pytest.raises(IOError) as exc_info:
        ensure_regular_file(socket_path)
    assert "is not a regular file" in str(exc_info.value)


def test_read_markdown_returns_text(tmp_path: Path):
    target = tmp_path / "chat.md"
    target.write_text("# Hi\n", encoding="utf-8")

    assert read_markdown(target) == "# Hi\n"


def test_read_markdown_raises_for_directory(tmp_path: Path):
    directory = tmp_path / "folder"
    directory.mkdir()

    with pytest.raises(IOError):
        read_markdown(directory)


def test_read_markdown_rejects_symlink(tmp_path: Path):
    target = tmp_path / "actual.md"
    target.write_text("hi\n", encoding="utf-8")
    link = tmp_path / "alias.md"
    os.symlink(target, link)

    with pytest.raises(IOError) as exc_info:
        read_markdown(link)
    assert "Symlinks are not supported" in str(exc_info.value)


def test_resolve_output_path_for_directory(tmp_path: Path):
    source = tmp_path / "chat.md"

    assert resolve_output_path(str(tmp_path), source, ".html") == tmp_path / "chat.html"


def test_resolve_output_path_rejects_symlink(tmp_path: Path):
    real = tmp_path / "real.html"
    real.write_text("", encoding="utf-8")
    link = tmp_path / "link.html"
    os.symlink(real, link)

    with pytest.raises(ValueError):
        resolve_output_path(str(link), tmp_path / "chat.md", ".html")


def test_write_html_leaves_no_temporary_files(tmp_path: Path):
    target = tmp_path / "chat.html"

    write_html(target, "<p>x</p>")

    assert target.read_text(encoding="utf-8") == "<p>x</p>"
    assert [path.name for path in tmp_path.iterdir()] == ["chat.html"]
