from dotenv import load_dotenv
import logging
import sys

from api.routes import create_app
from lib.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

load_dotenv()

settings = get_settings()
app = create_app(settings)

if __name__ == "__main__":
    logger.info(f"Server running on port {settings.port}")
    app.run(host="0.0.0.0", port=settings.port)
