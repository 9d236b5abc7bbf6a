"""Run the service with uvicorn: ``python -m subtracker``."""

import uvicorn

from subtracker.config import settings


def main() -> None:
    uvicorn.run(
        "subtracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
