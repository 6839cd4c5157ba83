from __future__ import annotations

import uvicorn

from rpsls.config import settings
from rpsls.logging_setup import configure_logging


def main() -> None:
    configure_logging(settings.log_level)
    from rpsls.main import app

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
