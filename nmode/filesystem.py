"""Lookups of files, directories and executables on the file system."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_log = logging.getLogger(__name__)


class FileSystemError(Exception):
    """Raised when a required path is missing or cannot be created."""


def does_dir_exist(path):
    """True if ``path`` exists and is a directory."""
    return Path(path).is_dir()


def does_file_exist(path):
    """True if ``path`` exists and is not a directory."""
    candidate = Path(path)
    return candidate.exists() and not candidate.is_dir()


def _first_dir_containing(dirs, name, check):
    if Path(name).is_absolute():
        return "" if check(name) else None
    for directory in dirs:
        if does_dir_exist(directory) and check(Path(directory) / name):
            return directory
    return None


def first_dir_containing_dir(dirs, name):
    """First of ``dirs`` that holds the directory ``name``.

    An absolute ``name`` gives "" if it exists; None means not found.
    """
    return _first_dir_containing(dirs, name, does_dir_exist)


def first_dir_containing_file(dirs, name):
    """First of ``dirs`` that holds the file ``name``.

    An absolute ``name`` gives "" if it exists; None means not found.
    """
    return _first_dir_containing(dirs, name, does_file_exist)


def first_existing_dir(dirs):
    """First entry of ``dirs`` that is an existing directory, or None."""
    return next((d for d in dirs if does_dir_exist(d)), None)


def first_existing_file(files):
    """First entry of ``files`` that is an existing file, or None."""
    return next((f for f in files if does_file_exist(f)), None)


def check_valid_path(name, is_dir, fatal):
    """Resolve ``name`` to an absolute path and check that it exists.

    Returns the absolute path. A missing path raises FileSystemError when
    ``fatal`` is set and is logged as a warning otherwise.
    """
    path = os.path.abspath(name)
    exists = does_dir_exist(path) if is_dir else does_file_exist(path)
    if not exists:
        kind = "directory" if is_dir else "file"
        if fatal:
            raise FileSystemError(f"{kind} {path} does not exist")
        _log.warning("%s %s does not exist", kind, path)
    return path


def check_valid_path_from_alternatives(name, path_name, candidates, fatal):
    """Check ``name`` inside ``path_name``, the directory found for it.

    ``path_name`` of None means the search among ``candidates`` failed.
    Returns the absolute path, or None when no directory was found and the
    failure is not fatal.
    """
    if path_name is None:
        listing = ", ".join(str(c) for c in candidates)
        if fatal:
            raise FileSystemError(f"{name} could not be found in: {listing}")
        _log.warning("%s could not be found in: %s", name, listing)
        return None

    path = Path(name)
    if not path.is_absolute():
        path = Path(os.path.abspath(Path(path_name) / name))
    if not path.exists():
        if fatal:
            raise FileSystemError(f"{path} does not exist")
        _log.warning("%s does not exist", path)
    return str(path)


def create_dir(name):
    """Create the directory ``name``; it must not exist yet."""
    if os.path.exists(name):
        raise FileSystemError(f"The directory {name} already exists.")
    os.mkdir(name)


def executable_exists(exe):
    """True if ``exe`` is an executable found in one of the PATH entries."""
    search = os.environ.get("PATH", "")
    if not search:
        raise FileSystemError("Cannot read PATH system variable.")
    for entry in filter(None, search.split(os.pathsep)):
        if os.access(os.path.abspath(os.path.join(entry, exe)), os.X_OK):
            return True
    return False