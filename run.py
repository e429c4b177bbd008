"""Serve the Chukgo lessons API with Uvicorn.

Host and port are read from the environment variables ``API_HOST`` and
``API_PORT`` (defaults ``0.0.0.0`` and ``8000``).  Other settings such
as ``SECRET_KEY`` or ``SEED_DATA`` are read by the application itself.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from chukgo_api.app.main import app


async def run_api() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
