"""
Root-level conftest for all tests.

Provides an in-memory filesystem that counts reads, so tests can assert how
often discovery actually touched a file, and keeps the settings singleton
from leaking between tests.
"""
import os
import threading
import time
from collections import Counter

import pytest

from scalar_docs.main.config import reset_settings
from scalar_docs.specs.filesystem import FileSystem

VALID_JSON_SPEC = b'{"openapi":"3.0.0","info":{"title":"x"},"paths":{}}'

VALID_YAML_SPEC = b"""openapi: 3.0.0
info:
  title: x
  version: "1.0"
paths: {}
"""


class InMemoryFileSystem(FileSystem):
    def __init__(self, files=None, errors=None, read_delay: float = 0.0):
        self.files = {os.path.normpath(k): v for k, v in (files or {}).items()}
        self.errors = {os.path.normpath(k): v for k, v in (errors or {}).items()}
        self.read_delay = read_delay
        self.reads: Counter = Counter()
        self._lock = threading.Lock()

    @property
    def total_reads(self) -> int:
        return sum(self.reads.values())

    def read_bytes(self, path: str) -> bytes:
        path = os.path.normpath(path)
        with self._lock:
            self.reads[path] += 1
        if self.read_delay:
            time.sleep(self.read_delay)
        if path in self.errors:
            raise self.errors[path]
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def walk(self, directory: str):
        directory = os.path.normpath(directory)
        for path in sorted(self.files):
            if directory == "." or path.startswith(directory + os.sep):
                yield path


@pytest.fixture
def memory_fs():
    def _make(files=None, errors=None, read_delay=0.0):
        return InMemoryFileSystem(files=files, errors=errors, read_delay=read_delay)

    return _make


@pytest.fixture(autouse=True)
def _reset_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def valid_json_spec() -> bytes:
    return VALID_JSON_SPEC


@pytest.fixture
def valid_yaml_spec() -> bytes:
    return VALID_YAML_SPEC
