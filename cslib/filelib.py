"""Portable helpers for file names, search paths and directories.

Path arguments may use either forward or reverse slashes as directory
separators, and search paths may separate directories with colons or
semicolons.
"""

from __future__ import annotations

import functools
import os
import re
from typing import IO, Iterator

__all__ = [
    "directory_path_separator",
    "search_path_separator",
    "get_root",
    "get_extension",
    "get_head",
    "get_tail",
    "default_extension",
    "open_on_path",
    "find_on_path",
    "delete_file",
    "rename_file",
    "file_exists",
    "is_file",
    "is_symbolic_link",
    "is_directory",
    "create_directory",
    "create_directory_path",
    "set_current_directory",
    "get_current_directory",
    "expand_pathname",
    "list_directory",
    "iter_directory",
    "iter_directory_tree",
    "match_filename_pattern",
    "get_file_type",
    "get_file_creator",
]

_SEPARATORS = "/\\"


def directory_path_separator() -> str:
    """Return the directory separator used on this platform."""
    return os.sep


def search_path_separator() -> str:
    """Return the search path separator used on this platform."""
    return os.pathsep


def _last_separator(pathname: str) -> int:
    return max(pathname.rfind("/"), pathname.rfind("\\"))


def _extension_dot(filename: str) -> int:
    """Index of the dot starting the extension of the last component, or -1."""
    dot = filename.rfind(".")
    if dot < _last_separator(filename):
        return -1
    return dot


def get_root(filename: str) -> str:
    """Return everything in ``filename`` before the extension's dot."""
    dot = _extension_dot(filename)
    return filename if dot == -1 else filename[:dot]


def get_extension(filename: str) -> str:
    """Return the extension of ``filename``, including its dot, or ''."""
    dot = _extension_dot(filename)
    return "" if dot == -1 else filename[dot:]


def get_head(pathname: str) -> str:
    """Return all but the last component of a path name."""
    sep = _last_separator(pathname)
    if sep == -1:
        return ""
    if sep == 0:
        return pathname[0]
    return pathname[:sep]


def get_tail(pathname: str) -> str:
    """Return the last component of a path name."""
    return pathname[_last_separator(pathname) + 1:]


def default_extension(filename: str, ext: str) -> str:
    """Add ``ext`` to ``filename`` unless it already has an extension.

    A leading ``*`` on ``ext`` replaces any existing extension.
    """
    force = ext.startswith("*")
    if force:
        ext = ext[1:]
    dot = _extension_dot(filename)
    if dot == -1:
        return filename + ext
    if force:
        return filename[:dot] + ext
    return filename


def _is_absolute(filename: str) -> bool:
    return (
        filename.startswith(("/", "\\", "~"))
        or os.path.isabs(filename)
    )


def _split_search_path(path: str) -> list[str]:
    if os.name == "nt":
        return path.split(";")
    return re.split(r"[:;]", path)


def _candidates(path: str, filename: str) -> Iterator[str]:
    if _is_absolute(filename):
        yield expand_pathname(filename)
        return
    for directory in _split_search_path(path):
        if directory:
            yield expand_pathname(os.path.join(expand_pathname(directory), filename))
        else:
            yield expand_pathname(filename)


def open_on_path(path: str, filename: str, mode: str = "r") -> IO | None:
    """Open the first file found by searching the directories in ``path``.

    Returns None if no directory yields a file that can be opened.
    """
    for candidate in _candidates(path, filename):
        try:
            return open(candidate, mode)
        except OSError:
            continue
    return None


def find_on_path(path: str, filename: str) -> str | None:
    """Return the expanded name of the first match on ``path``, or None."""
    for candidate in _candidates(path, filename):
        if os.path.exists(candidate):
            return candidate
    return None


def delete_file(filename: str) -> None:
    """Delete a file, raising OSError on failure."""
    os.remove(expand_pathname(filename))


def rename_file(oldname: str, newname: str) -> None:
    """Rename a file, raising OSError on failure."""
    os.rename(expand_pathname(oldname), expand_pathname(newname))


def file_exists(pathname: str) -> bool:
    """Return True if the file exists."""
    return os.path.exists(expand_pathname(pathname))


def is_file(pathname: str) -> bool:
    """Return True if the path names a regular file."""
    return os.path.isfile(expand_pathname(pathname))


def is_symbolic_link(pathname: str) -> bool:
    """Return True if the path names a symbolic link."""
    return os.path.islink(expand_pathname(pathname))


def is_directory(pathname: str) -> bool:
    """Return True if the path names a directory."""
    return os.path.isdir(expand_pathname(pathname))


def create_directory(pathname: str) -> None:
    """Create a directory; an existing directory is not an error.

    Missing parent directories are not created and raise OSError.
    """
    expanded = expand_pathname(pathname)
    try:
        os.mkdir(expanded)
    except FileExistsError:
        if not os.path.isdir(expanded):
            raise


def create_directory_path(pathname: str) -> None:
    """Create a directory along with any missing parent directories."""
    os.makedirs(expand_pathname(pathname), exist_ok=True)


def set_current_directory(path: str) -> None:
    """Change the current working directory."""
    os.chdir(expand_pathname(path))


def get_current_directory() -> str:
    """Return the absolute path of the current working directory."""
    return os.getcwd()


def expand_pathname(filename: str) -> str:
    """Expand ``~`` and convert all separators to the platform's own."""
    if not filename:
        return filename
    normalized = re.sub(r"[/\\]", re.escape(os.sep), filename)
    return os.path.expanduser(normalized)


def list_directory(directory: str) -> list[str]:
    """Return the sorted names of the entries in ``directory``."""
    return sorted(os.listdir(expand_pathname(directory) or "."))


def iter_directory(directory: str) -> Iterator[str]:
    """Yield the names of the entries in ``directory`` in sorted order."""
    yield from list_directory(directory)


def iter_directory_tree(directory: str) -> Iterator[str]:
    """Walk ``directory`` recursively, yielding paths in sorted order.

    Each path is joined to ``directory``; a subdirectory is yielded
    before its contents.
    """
    for name in list_directory(directory):
        path = os.path.join(directory, name)
        yield path
        if os.path.isdir(expand_pathname(path)) and not os.path.islink(expand_pathname(path)):
            yield from iter_directory_tree(path)


def _class_to_regex(body: str, negate: bool) -> str:
    escaped = "".join("\\" + ch if ch in "\\[]^" else ch for ch in body)
    return "[" + ("^" if negate else "") + escaped + "]"


@functools.lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    pos = 0
    while pos < len(pattern):
        ch = pattern[pos]
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        elif ch == "[":
            start = pos + 1
            negate = pattern.startswith("^", start)
            if negate:
                start += 1
            # A ']' right after the opening bracket is a literal member.
            close = pattern.find("]", start + 1)
            if close == -1:
                parts.append(re.escape(ch))
            else:
                parts.append(_class_to_regex(pattern[start:close], negate))
                pos = close
        else:
            parts.append(re.escape(ch))
        pos += 1
    return re.compile("".join(parts), re.DOTALL)


def match_filename_pattern(filename: str, pattern: str) -> bool:
    """Return True if ``filename`` matches a shell-style wildcard pattern.

    Supports ``?``, ``*``, ``[...]`` and ``[^...]`` with ``a-z`` ranges.
    """
    return _compile_pattern(pattern).fullmatch(filename) is not None


def get_file_type(filename: str) -> str:
    """Return the four-character file type; ``????`` where unsupported."""
    return "????"


def get_file_creator(filename: str) -> str:
    """Return the four-character creator code; ``????`` where unsupported."""
    return "????"