"""Run the clinic service with uvicorn: ``python -m clinic``."""
import uvicorn

from clinic.main import create_app
from shared.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
