"""FastAPI entry point for the checkout gateway."""

import uvicorn

from gateway.api import create_api
from gateway.core.config import settings
from gateway.core.logging import setup_logging

setup_logging()

app = create_api()


if __name__ == "__main__":
    uvicorn.run(
        "gateway.api_main:app",
        host=settings.host,
        port=settings.port,
    )
