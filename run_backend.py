#!/usr/bin/env python
"""Script to run the task list server."""
import logging

import uvicorn

from task_service.config import HOST, LOG_LEVEL, PORT
from task_service.logging_setup import setup_logging
from task_service.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(LOG_LEVEL)
    app = create_app()
    logger.info("Server listening on %s:%s", HOST, PORT)
    # uvicorn exits if the port cannot be bound.
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
