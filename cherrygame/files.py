"""File-system helpers for locating configuration files and directories."""

from __future__ import annotations

import os
import sys
import traceback


def _join(*elems: str) -> str:
    """Join path elements, ignoring empty ones, and clean the result.

    An absolute element after the first is appended rather than
    replacing what came before it.
    """
    parts = [e for e in elems if e]
    if not parts:
        return ""
    return os.path.normpath(os.sep.join(parts))


def is_dir(dir_path: str) -> bool:
    """Return True if ``dir_path`` exists and is a directory."""
    return os.path.isdir(dir_path)


def is_file(full_path: str) -> bool:
    """Return True if ``full_path`` exists and is not a directory."""
    return os.path.exists(full_path) and not os.path.isdir(full_path)


def get_work_dir() -> str:
    """Return the current working directory."""
    return os.getcwd()


def get_current_directory() -> str:
    """Return the directory of the running program, with forward slashes."""
    program = sys.argv[0] if sys.argv else ""
    directory = os.path.abspath(os.path.dirname(program) or ".")
    return directory.replace("\\", "/")


def get_stack_dir() -> list[str]:
    """Return the distinct existing directories of source files on the call
    stacks of all running threads, sorted in reverse order."""
    found: list[str] = []
    for frame in sys._current_frames().values():
        for entry in traceback.extract_stack(frame):
            directory = os.path.dirname(entry.filename)
            if not directory or not os.path.exists(directory):
                continue
            if directory not in found:
                found.append(directory)
    return sorted(found, reverse=True)


def judge_path(file_path: str) -> str | None:
    """Locate a directory relative to the working directory, the program
    directory, the call-stack directories, or as given.

    Returns the first existing directory, or None.
    """
    candidates = [
        _join(get_work_dir(), file_path),
        _join(get_current_directory(), file_path),
    ]
    candidates.extend(_join(d, file_path) for d in get_stack_dir())
    for candidate in candidates:
        if is_dir(candidate):
            return candidate
    if is_dir(file_path):
        return file_path
    return None


def judge_file(file_path: str) -> str | None:
    """Locate a file whose directory is found by :func:`judge_path`.

    Returns the full path of the file, or None.
    """
    if not file_path:
        return None
    index = file_path.rfind("/")
    if index > 0:
        directory, name = file_path[:index], file_path[index + 1:]
    else:
        directory, name = "./", file_path
    found = judge_path(directory)
    if found is None:
        return None
    full = _join(found, name)
    return full if is_file(full) else None


def check_path(file_path: str) -> None:
    """Raise OSError (FileNotFoundError when missing) if ``file_path`` cannot be stat'ed."""
    os.stat(file_path)


def join_path(*args: str) -> str:
    """Join path elements and return the result; raise if it does not exist."""
    path = _join(*args)
    check_path(path)
    return path


def _base(file_path: str) -> str:
    if not file_path:
        return "."
    stripped = file_path.rstrip("/")
    if not stripped:
        return "/"
    return stripped[stripped.rfind("/") + 1:]


def get_file_name(file_path: str, remove_ext: bool) -> str:
    """Return the last element of a slash-separated path, optionally
    without its extension (everything from the last dot)."""
    name = _base(file_path)
    if not remove_ext:
        return name
    dot = name.rfind(".")
    return name[:dot] if dot >= 0 else name


def _walk(path: str, out: list[str], suffix: str) -> None:
    if not suffix or path.endswith(suffix):
        out.append(path)
    if not os.path.isdir(path) or os.path.islink(path):
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return
    for name in names:
        _walk(os.path.join(path, name), out, suffix)


def walk_files(root_path: str, file_suffix: str = "") -> list[str]:
    """Return every path under ``root_path`` (itself included), in lexical
    walk order, whose name ends with ``file_suffix`` when one is given."""
    root = judge_path(root_path)
    if root is None:
        return []
    files: list[str] = []
    _walk(root, files, file_suffix)
    return files


def read_dir(root_path: str, file_prefix: str = "", file_suffix: str = "") -> list[str]:
    """Return the sorted names of the non-directory entries directly in
    ``root_path`` that match the prefix and suffix.

    Raises FileNotFoundError when the directory cannot be located.
    """
    root = judge_path(root_path)
    if root is None:
        raise FileNotFoundError(f"path = {root_path}, file not found.")
    with os.scandir(root) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if not entry.is_dir(follow_symlinks=False)
        )
    return [
        name
        for name in names
        if (not file_prefix or name.startswith(file_prefix))
        and (not file_suffix or name.endswith(file_suffix))
    ]