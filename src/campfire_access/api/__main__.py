"""
campfire_access.api.__main__

Entrypoint for running the FastAPI application via `python -m campfire_access.api`.
"""

from __future__ import annotations

import uvicorn

from campfire_access.api.app import create_app
from campfire_access.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
