import logging
import sys

import uvicorn
from pydantic import ValidationError

from shortit.app_factory import create_app
from shortit.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

try:
    settings = get_settings()
except ValidationError as e:
    logger.critical(f"Invalid configuration: {e}")
    sys.exit(1)

logging.getLogger().setLevel(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
