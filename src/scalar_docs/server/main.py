import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from scalar_docs.main.config import Settings, get_settings
from scalar_docs.main.logging import get_logger
from scalar_docs.server.middleware import ScalarDocsMiddleware

logger = get_logger(__name__)


def get_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    config = settings.to_config()

    # Scalar is the only docs UI
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/hello-world", response_class=PlainTextResponse)
    async def hello_world():
        return "Hello, world from the main application!\n"

    app.add_middleware(ScalarDocsMiddleware, config=config)

    logger.info(f"Scalar docs UI mounted at {config.docs_path}")
    return app


def start():
    settings = get_settings()
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        "scalar_docs.server.main:get_application",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
