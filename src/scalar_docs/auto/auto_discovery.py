"""Zero-configuration spec discovery.

Walks the default directories, sniffs every .json/.yaml/.yml file and keeps
the first one that looks like an OpenAPI document. The winner is then served
by the regular middleware as an explicitly configured file.
"""

from __future__ import annotations

import os
import threading
from typing import Iterable, Iterator, Optional

from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from scalar_docs.main.config import (
    AUTO_SEARCH_DIRS,
    DEFAULT_SCALAR_DOCS_PATH,
    ScalarConfig,
)
from scalar_docs.main.exceptions import ScalarDocsException, SpecNotFoundException
from scalar_docs.main.logging import get_logger
from scalar_docs.server.middleware import NOT_FOUND_BODY, ScalarDocsMiddleware
from scalar_docs.specs.filesystem import FileSystem, LocalFileSystem
from scalar_docs.specs.spec_file import SpecFormat
from scalar_docs.specs.validator import format_for_path, looks_like_openapi

logger = get_logger(__name__)

DISCOVERY_FORMAT_ORDER = (SpecFormat.YAML, SpecFormat.JSON)


class AutoDiscovery:
    def __init__(
        self,
        search_dirs: Iterable[str] = AUTO_SEARCH_DIRS,
        fs: Optional[FileSystem] = None,
    ):
        self.search_dirs = tuple(search_dirs)
        self.fs = fs or LocalFileSystem()

        self.valid_spec_files: list[str] = []
        self.spec_file_content: bytes = b""
        self.spec_file_path: Optional[str] = None
        self.spec_file_url: Optional[str] = None

        self._lock = threading.Lock()
        self._done = False
        self._init_error: Optional[ScalarDocsException] = None
        self._initialized = False

    def find_openapi_files(self) -> Iterator[str]:
        """Lazily yield candidate files.

        YAML files come before JSON files, same as the middleware's own
        search; within a format, directories are visited in configured order.
        """
        for fmt in DISCOVERY_FORMAT_ORDER:
            for directory in self.search_dirs:
                for path in self.fs.walk(directory):
                    if format_for_path(path) is fmt:
                        yield path

    def validate_openapi_file(self, path: str) -> Optional[bytes]:
        """Return the file's content if it looks like an OpenAPI document."""
        fmt = format_for_path(path)
        if fmt is None:
            return None

        try:
            content = self.fs.read_bytes(path)
        except OSError as e:
            logger.debug(f"Skipping unreadable file {path}: {e}")
            return None

        if looks_like_openapi(content, fmt):
            return content
        return None

    def initialize(self) -> None:
        if self._done:
            return

        with self._lock:
            if self._done:
                return

            for path in self.find_openapi_files():
                content = self.validate_openapi_file(path)
                if content is None:
                    continue

                self.valid_spec_files.append(path)
                self.spec_file_content = content
                self.spec_file_path = path
                self.spec_file_url = "/" + os.path.basename(path)
                logger.info(f"Auto-discovered OpenAPI spec {path}")
                break

            if not self.valid_spec_files:
                self._init_error = SpecNotFoundException(
                    "no valid OpenAPI specification file found"
                )
                logger.warning(
                    f"No valid OpenAPI specification file found in {', '.join(self.search_dirs)}"
                )
            else:
                self._initialized = True

            self._done = True

    def get_found_spec_files(self) -> list[str]:
        self.initialize()
        return list(self.valid_spec_files)

    def get_init_error(self) -> Optional[ScalarDocsException]:
        self.initialize()
        return self._init_error

    def is_initialized(self) -> bool:
        self.initialize()
        return self._initialized

    def to_config(self, docs_path: str = DEFAULT_SCALAR_DOCS_PATH) -> ScalarConfig:
        """Build the middleware configuration for the discovered file."""
        if not self.is_initialized():
            return ScalarConfig(search_dirs=self.search_dirs, docs_path=docs_path)

        fmt = format_for_path(self.spec_file_path)
        if fmt is SpecFormat.JSON:
            return ScalarConfig(json_spec_path=self.spec_file_path, docs_path=docs_path)
        return ScalarConfig(yaml_spec_path=self.spec_file_path, docs_path=docs_path)


async def not_found_app(scope: Scope, receive: Receive, send: Send) -> None:
    response = PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    await response(scope, receive, send)


def auto_docs_app(
    fallback: Optional[ASGIApp] = None,
    discovery: Optional[AutoDiscovery] = None,
    docs_path: str = DEFAULT_SCALAR_DOCS_PATH,
) -> ScalarDocsMiddleware:
    """Discover a spec in the default directories and serve it in front of `fallback`."""
    discovery = discovery or AutoDiscovery()
    discovery.initialize()
    return ScalarDocsMiddleware(
        fallback or not_found_app,
        discovery.to_config(docs_path=docs_path),
        fs=discovery.fs,
    )
