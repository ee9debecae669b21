"""Run the API with uvicorn: ``python -m postboard``."""
import uvicorn

from postboard.core.config import get_settings
from postboard.main import app, setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
