"""Helpers for file paths and reading files."""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePath


def exec_dir() -> Path:
    """Return the directory holding the running interpreter's executable.

    Falls back to the current working directory when the executable path
    has no directory part.
    """
    executable = sys.executable
    if not executable:
        raise RuntimeError("Failed to get the executable path.")
    last_sep = max(executable.rfind("/"), executable.rfind("\\"))
    if last_sep == -1:
        return Path.cwd()
    return Path(executable[:last_sep])


def join_paths(root: str | os.PathLike[str], *args: str | os.PathLike[str]) -> str:
    """Join a root path with any number of further path components."""
    return str(Path(root).joinpath(*args))


def parent_directory(file_path: str) -> str:
    """Return the parent directory of an existing file path."""
    if not file_path:
        raise ValueError("File path is empty!")
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f'File does not exist: "{file_path}"')
    return str(path.parent)


def file_name(file_path: str, include_extension: bool = True) -> str:
    """Return the file name of a path, with or without its extension."""
    if not file_path:
        raise ValueError("File path is empty!")
    path = PurePath(file_path)
    return path.name if include_extension else path.stem


def file_extension(file_path: str) -> str:
    """Return the extension of a path, including the leading dot."""
    return PurePath(file_path).suffix


def _strip_root(path: PurePath) -> PurePath:
    if path.anchor:
        return PurePath(*path.parts[1:])
    return path


def read_file(file_path: str, working_directory: str = "") -> bytes:
    """Read a whole file in binary mode.

    When a working directory is given, the file path is treated as relative
    to it (any root of the file path is dropped).
    """
    if not file_path:
        raise ValueError("File path is empty!")

    if working_directory:
        full_path = Path(working_directory) / _strip_root(PurePath(file_path))
    else:
        full_path = Path(file_path)

    try:
        with open(full_path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        message = f'Failed to open file "{full_path}"!'
        if working_directory:
            message += (
                f' The file may not be in the directory "{working_directory}".'
                "\nTo change the working directory, please specify the full path to the file."
            )
        raise OSError(exc.errno, message, str(full_path)) from exc