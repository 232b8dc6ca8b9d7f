"""Start the API with uvicorn on the configured host and port.

Usage:
    python run.py
"""

import uvicorn

from skillloop.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "skillloop.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
