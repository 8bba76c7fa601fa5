"""Run the reader mode server with ``python -m readermode``."""
import logging
import os

import uvicorn

from readermode.logging_setup import normalise_level

logger = logging.getLogger(__name__)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000") or 3000)


def main() -> None:
    # Importing the app configures logging once for the whole run.
    from readermode.main import app

    logger.info("Server listening on port: %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=normalise_level(os.getenv("LOG_LEVEL")))


if __name__ == "__main__":
    main()
