"""Run the Hello API with uvicorn: `python -m hello_api`."""

import uvicorn

from hello_api.config import settings


def main() -> None:
    uvicorn.run(
        "hello_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
