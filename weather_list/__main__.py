"""
Weather List service entry point.

Usage:
    python -m weather_list [port]

Host and default port come from WEATHER_LIST_HOST and PORT (127.0.0.1:8080).
"""

import logging
import sys

from .config import HOST, LOG_FORMAT, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    raw_port = sys.argv[1] if len(sys.argv) > 1 else PORT
    try:
        port = int(raw_port)
    except ValueError:
        logger.error(f"Invalid port: {raw_port}")
        sys.exit(1)

    logger.info(f"Starting Weather List on http://{HOST}:{port}")

    uvicorn.run("weather_list.app:app", host=HOST, port=port, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
