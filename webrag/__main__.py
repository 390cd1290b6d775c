"""
Run the pipeline end to end: ingest the configured sources, then answer the
configured question.

Usage:
    python -m webrag
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from webrag.application import build_rag_service
from webrag.configs import get_settings
from webrag.core.exceptions import WebRagException
from webrag.observability import configure_logging

logger = logging.getLogger(__name__)


async def run() -> str:
    service = build_rag_service(get_settings())
    try:
        await service.ingest()
        result = await service.ask(service.settings.question)
    finally:
        await service.aclose()
    return result.answer


def main() -> int:
    load_dotenv()
    configure_logging(get_settings().log_level)
    try:
        answer = asyncio.run(run())
    except WebRagException as e:
        logger.error("%s:main - %s", __name__, e)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
