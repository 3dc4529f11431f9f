"""Read-only filesystem access used during spec discovery."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Iterator


class FileSystem(ABC):
    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Return the file's content.

        Raises FileNotFoundError when the file does not exist, any other
        OSError for permission or I/O failures.
        """

    @abstractmethod
    def walk(self, directory: str) -> Iterator[str]:
        """Lazily yield every regular file below `directory`.

        Files of a directory come in sorted order, before its subdirectories.
        Missing or unreadable directories yield nothing.
        """


class LocalFileSystem(FileSystem):
    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def walk(self, directory: str) -> Iterator[str]:
        # os.walk skips directories it cannot list when onerror is unset
        for root, dirnames, filenames in os.walk(directory):
            dirnames.sort()
            for filename in sorted(filenames):
                yield os.path.normpath(os.path.join(root, filename))
