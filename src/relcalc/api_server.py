"""Run the relcalc API server."""

from __future__ import annotations

from .api import create_app
from .config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app()
    app.run(host=settings.api_host, port=settings.api_port, debug=False)


if __name__ == "__main__":
    main()
