"""Entry point for the montoks token analysis API."""

import asyncio

from loguru import logger

from montoks.api.server import run_api_server
from montoks.utils.logger import setup_logger


async def main() -> None:
    setup_logger(level="INFO")
    logger.info("Starting montoks API...")
    await run_api_server()
    logger.info("Shutdown complete")


if __name__ == "__main__":
    asyncio.run(main())
