"""Files loaded into memory, plus small path inspection helpers."""

from __future__ import annotations

import os
import stat
import sys
from enum import IntEnum
from pathlib import Path
from typing import BinaryIO, Union

PathLike = Union[str, os.PathLike]


class FileMode(IntEnum):
    READONLY = 0
    WRITEONLY = 1
    READWRITE = 2
    APPEND = 3


_OPEN_MODES = {
    FileMode.READONLY: "rb",
    FileMode.WRITEONLY: "wb",
    FileMode.READWRITE: "r+b",
    FileMode.APPEND: "a+b",
}


class AssetFile:
    """A file opened in one of the :class:`FileMode` modes.

    Unless the file is write-only, its whole content is read into memory on
    opening and again after every write.
    """

    def __init__(self) -> None:
        self._path = ""
        self._mode = FileMode.READONLY
        self._binary = True
        self._data = b""
        self._stream: BinaryIO | None = None

    def load(
        self,
        full_path: PathLike,
        mode: FileMode = FileMode.READONLY,
        binary: bool = True,
    ) -> bool:
        """Open the file at ``full_path``; raise OSError if it cannot be opened."""
        self._path = os.fspath(full_path)
        self._mode = FileMode(mode)
        self._binary = bool(binary)
        self._data = b""
        return self._open()

    def load_file(
        self,
        file_path: PathLike,
        files_dir: PathLike,
        mode: FileMode = FileMode.READONLY,
        binary: bool = True,
    ) -> bool:
        """Open a file given relative to the files directory."""
        return self.load(os.path.join(os.fspath(files_dir), os.fspath(file_path)), mode, binary)

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def write(self, content: str | bytes | bytearray) -> None:
        """Write text or bytes; the content is re-read in read-write and append modes."""
        if self._stream is None:
            raise ValueError("file is not open")
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self._stream.write(data)
        self._stream.flush()
        if self._mode in (FileMode.READWRITE, FileMode.APPEND):
            self._read()

    def _open(self) -> bool:
        self.close()
        self._stream = open(self._path, _OPEN_MODES[self._mode])
        if self._mode is not FileMode.WRITEONLY:
            self._read()
        return True

    def _read(self) -> None:
        assert self._stream is not None
        self._stream.flush()
        self._stream.seek(0)
        self._data = self._stream.read()

    @property
    def path(self) -> Path:
        return Path(self._path)

    @property
    def mode(self) -> FileMode:
        return self._mode

    @property
    def binary(self) -> bool:
        return self._binary

    @property
    def bytes(self) -> bytes:
        return self._data

    @property
    def text(self) -> str:
        if not self._data:
            return ""
        return self._data.decode("utf-8", errors="replace")

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def filename(self) -> str:
        return file_stem(self._path)

    @property
    def directory(self) -> str:
        return parent_directory(self._path)

    def exists(self) -> bool:
        return file_exists(self._path)

    def is_file(self) -> bool:
        return is_regular_file(self._path)

    def is_link(self) -> bool:
        return is_link(self._path)

    def is_directory(self) -> bool:
        return is_directory(self._path)

    def is_device(self) -> bool:
        return is_device(self._path)

    def __enter__(self) -> AssetFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def file_exists(path: PathLike) -> bool:
    text = os.fspath(path)
    if not text:
        return False
    return os.path.exists(text)


def is_regular_file(path: PathLike) -> bool:
    return os.path.isfile(os.fspath(path))


def is_link(path: PathLike) -> bool:
    return os.path.islink(os.fspath(path))


def is_directory(path: PathLike) -> bool:
    return os.path.isdir(os.fspath(path))


def is_device(path: PathLike) -> bool:
    """True when the path is a block device; always False on Windows."""
    if sys.platform.startswith("win"):
        return False
    try:
        mode = os.stat(os.fspath(path)).st_mode
    except OSError:
        return False
    return stat.S_ISBLK(mode)


def file_stem(path: PathLike) -> str:
    """The file name without its last extension."""
    return Path(os.fspath(path)).stem


def parent_directory(path: PathLike) -> str:
    """The parent directory of ``path``, ending with a separator."""
    return add_trailing_separator(os.path.dirname(os.fspath(path)))


def add_trailing_separator(path: PathLike) -> str:
    """Use the platform separator and make sure a non-empty path ends with one."""
    text = os.fspath(path)
    if os.altsep:
        text = text.replace(os.altsep, os.sep)
    if text and not text.endswith(os.sep):
        text += os.sep
    return text