from scalar_docs.main.config import ScalarConfig
from scalar_docs.server.middleware import (
    ScalarDocsMiddleware,
    scalar_api_docs,
    with_config,
)

__all__ = ["ScalarConfig", "ScalarDocsMiddleware", "scalar_api_docs", "with_config"]
