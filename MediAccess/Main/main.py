import logging

from Settings.config import API_HOST, API_PORT, LOG_LEVEL
from api_server import start_server

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    logger.info("Starting MediAccess signup API...")
    logger.info(f"FastAPI server listening on http://{API_HOST}:{API_PORT}")

    try:
        start_server()
    finally:
        logger.info("MediAccess signup API stopped")


if __name__ == '__main__':
    main()
