"""Filesystem helpers for chat-markdown."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "CHAT_MARKDOWN_MAX_FILE_SIZE"
MAX_LINE_LENGTH_ENV_VAR = "CHAT_MARKDOWN_MAX_LINE_LENGTH"


def _positive_int_from_env(name: str, default: int) -> int:
    env_value = os.environ.get(name)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {name}: {env_value} (expected positive integer)"
        raise ValueError(error_message) from error

    if value <= 0:
        error_message = f"{name} must be a positive integer, got {value}."
        raise ValueError(error_message)

    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed input size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["CHAT_MARKDOWN_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def get_max_line_length(default: int = DEFAULT_MAX_LINE_LENGTH) -> int:
    """Resolve the maximum allowed line length.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    return _positive_int_from_env(MAX_LINE_LENGTH_ENV_VAR, default)


def contains_symlink(path: Path) -> bool:
    """Return True when `path` or one of its ancestors is a symlink."""
    candidates = (path, *path.parents)
    for candidate in candidates:
        try:
            is_link = candidate.is_symlink()
        except OSError:
            is_link = False
        if is_link:
            return True
    return False


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Turn a command-line path into the absolute path of a Markdown file.

    The file must exist, live under `base_dir`, carry one of the
    `MARKDOWN_EXTENSIONS` and be reachable without following symlinks.

    Raises:
        ValueError: With a user-facing message when any check fails.

    Examples:
        normalize_filepath("notes/chat.md", Path.cwd())
    """
    path = Path(raw_path).expanduser()
    if contains_symlink(path):
        raise ValueError(f"Symlinks are not supported for security reasons: {path}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")
    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        supported = ", ".join(MARKDOWN_EXTENSIONS)
        raise ValueError(f"{resolved} is not a Markdown file (expected one of: {supported}).")
    return resolved


def ensure_regular_file(filepath: Path) -> os.stat_result:
    """Stat `filepath` without following links and require a plain file.

    Raises:
        IOError: If the path cannot be stat'ed, is a symlink, or is a
            directory, socket, FIFO or device.
    """
    try:
        stat_result = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    mode = stat_result.st_mode
    if stat.S_ISLNK(mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(mode):
        raise IOError(f"{filepath} is not a regular file.")
    return stat_result


def read_markdown(filepath: Path) -> str:
    """Read a Markdown file as UTF-8 text after `ensure_regular_file`.

    Size and line limits are applied to the decoded text by the converter.

    Raises:
        IOError: If the path is not a readable regular file.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    ensure_regular_file(filepath)
    try:
        with open(filepath, "r", encoding="UTF-8") as handle:
            return handle.read()
    except OSError as error:
        raise IOError(f"Error reading {filepath}: {error}") from error


def resolve_output_path(raw_output: str, input_path: Path, suffix: str) -> Path:
    """Work out where the HTML for `input_path` should be written.

    A directory target receives ``<input stem><suffix>``; any other path is
    used as given.

    Raises:
        ValueError: If the target is a symlink or is the input file itself.

    Examples:
        resolve_output_path("out/", Path("chat.md"), ".html")  # out/chat.html
    """
    output = Path(raw_output).expanduser()
    if output.is_dir():
        output = output / f"{input_path.stem}{suffix}"

    if output.is_symlink():
        error_message = f"Refusing to write through a symlink: {output}"
        raise ValueError(error_message)

    if output.exists() and output.resolve() == input_path.resolve():
        error_message = f"Output {output} would overwrite the input file."
        raise ValueError(error_message)

    return output


def write_html(filepath: Path, html: str):
    """Write rendered HTML atomically.

    The content goes to a temporary file in the destination directory that is
    then moved over `filepath`, keeping the permissions of an existing file.

    Raises:
        IOError: If the destination cannot be written or replaced.

    Examples:
        write_html(Path("chat.html"), "<p>hello</p>")
    """
    permissions: int | None = None
    if filepath.exists():
        permissions = stat.S_IMODE(ensure_regular_file(filepath).st_mode)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(html)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            if permissions is not None:
                os.chmod(tmp_file.name, permissions)

        os.replace(temp_path, filepath)
    except OSError as error:
        error_message = f"Error writing {filepath}: {error}"
        raise IOError(error_message) from error
    finally:
        if temp_path is not None:
            try:
                Path(temp_path).unlink(missing_ok=True)
            except OSError:
                pass
