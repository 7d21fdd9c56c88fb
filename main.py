import uvicorn

from core.config import LOG_LEVEL, WEB_HOST, WEB_PORT
from core.logger import logging
from web import app


def main():
    # Configure web service
    config = uvicorn.Config(
        app=app, host=WEB_HOST, port=WEB_PORT, log_level=LOG_LEVEL.lower()
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except KeyboardInterrupt:
        logging.info("Server shutdown by keyboard interrupt")


if __name__ == "__main__":
    main()
