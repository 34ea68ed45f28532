"""Entry point for serving the Code Camp API.

Builds ``Settings`` once from the environment (and the optional JSON
file named by ``CODECAMP_CONFIG_FILE``), creates the application from
it and serves it with Uvicorn.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from code_camp_api.app.core.config import Settings
from code_camp_api.app.main import create_app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port are read from ``HOST`` and ``PORT``; defaults are
    ``0.0.0.0`` and ``8000``.
    """
    settings = Settings.load()
    app = create_app(settings)
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
