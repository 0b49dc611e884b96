#!/usr/bin/env python3
import logging

import uvicorn

from app.core.config import get_settings
from app.core.logging import init_logging

logger = logging.getLogger("run_server")


def main() -> None:
    settings = get_settings()
    init_logging(debug=settings.debug)
    logger.info(
        "starting server", extra={"host": settings.host, "port": settings.port}
    )
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
