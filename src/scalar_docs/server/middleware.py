from __future__ import annotations

from typing import Callable, Optional

from starlette.concurrency import run_in_threadpool
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from scalar_docs.main.config import DEFAULT_SEARCH_DIRS, ScalarConfig
from scalar_docs.main.logging import get_logger
from scalar_docs.specs.filesystem import FileSystem
from scalar_docs.specs.initializer import SpecInitializer
from scalar_docs.specs.spec_file import Failed, InitializationOutcome
from scalar_docs.specs.spec_resolver import SpecResolver

logger = get_logger(__name__)

NOT_FOUND_BODY = "404 page not found"


class ScalarDocsMiddleware:
    """Serve the Scalar docs UI and the discovered spec file(s) in front of `app`.

    Everything that is not the docs path or a spec path reaches `app`
    untouched, including when no spec could be found.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: Optional[ScalarConfig] = None,
        *,
        fs: Optional[FileSystem] = None,
        initializer: Optional[SpecInitializer] = None,
    ) -> None:
        self.app = app
        self.config = config or ScalarConfig()
        self.initializer = initializer or SpecInitializer(
            self.config, SpecResolver(fs=fs)
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        outcome = await self.get_outcome()
        response = self.dispatch(scope["path"], outcome)
        if response is None:
            await self.app(scope, receive, send)
            return

        await response(scope, receive, send)

    async def get_outcome(self) -> InitializationOutcome:
        if self.initializer.done:
            return self.initializer.outcome
        # File reads must not block the event loop
        return await run_in_threadpool(self.initializer.get)

    def dispatch(self, path: str, outcome: InitializationOutcome) -> Optional[Response]:
        if path.startswith(self.config.docs_path):
            if isinstance(outcome, Failed):
                return PlainTextResponse(
                    f"Scalar UI unavailable: {outcome.reason}", status_code=500
                )
            return HTMLResponse(outcome.rendered_html, status_code=200)

        if isinstance(outcome, Failed):
            return None

        spec = outcome.spec_for_path(path)
        if spec is None:
            return None

        if not spec.content:
            logger.warning(f"Spec file {spec.source_path} is empty")
            return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

        return Response(
            spec.content, status_code=200, media_type=spec.format.content_type
        )


def with_config(config: ScalarConfig, *, fs: Optional[FileSystem] = None) -> Callable[[ASGIApp], ScalarDocsMiddleware]:
    """Return a decorator wrapping an ASGI app with the docs middleware.

    Each wrapped app gets its own initializer, so nothing discovered for one
    configuration leaks into another.
    """

    def wrap(app: ASGIApp) -> ScalarDocsMiddleware:
        return ScalarDocsMiddleware(app, config, fs=fs)

    return wrap


def scalar_api_docs(app: ASGIApp) -> ScalarDocsMiddleware:
    """Wrap `app` with the default configuration (search in api, doc and .)."""
    return with_config(ScalarConfig(search_dirs=DEFAULT_SEARCH_DIRS))(app)
