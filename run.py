"""Start the car service API with uvicorn.

Host and port come from the HOST and PORT settings (defaults 0.0.0.0:5000).

Usage:
    python run.py
"""
import uvicorn

from app.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
