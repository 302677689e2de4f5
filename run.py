#!/usr/bin/env python3
"""Run the context engine API server."""

import uvicorn

from settings import API_HOST, API_PORT, LOG_LEVEL
from settings.logging import setup_logging
from web.server import create_app

setup_logging(level=LOG_LEVEL, to_file=True)

if __name__ == "__main__":
    uvicorn.run(create_app(), host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
