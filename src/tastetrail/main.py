"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from tastetrail.config import Settings


def main() -> None:
    """Run the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run("tastetrail.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
