"""Run the service with ``python -m message_service``."""

import uvicorn

from message_service.config.settings import settings


def main() -> None:
    uvicorn.run(
        "message_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
