"""Run the API server: python -m pizzeria"""

import uvicorn

from pizzeria.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "pizzeria.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
