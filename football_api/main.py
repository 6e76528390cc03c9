"""Server entrypoint."""
import uvicorn

from football_api.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "football_api.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # keep the JSON handlers installed by setup_logging
        reload=settings.RELOAD,
    )


if __name__ == "__main__":
    run()
