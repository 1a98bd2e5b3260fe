"""
Run the server from the project root:

  python -m acme_auth

Listens on HOST:PORT (default 0.0.0.0:3000). Reads settings from the
environment and an optional .env file.
"""

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from acme_auth.core.config import get_settings
from acme_auth.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
