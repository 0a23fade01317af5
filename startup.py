import os
import sys
import uvicorn
import logging

# Configure logging to stdout until the app installs its own handler
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)


def main():
    from medilink.core.config import get_settings

    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port} "
                f"(storage backend: {settings.storage.backend})")
    uvicorn.run(
        "medilink.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
