import asyncio
import logging
from pathlib import Path
from .config import load_settings, setup_logging
from .db import ensure_schema, make_engine

logger = logging.getLogger(__name__)

async def main():
    settings = load_settings()
    setup_logging(settings)
    if settings.database_url.startswith("sqlite"):
        Path("./data").mkdir(parents=True, exist_ok=True)

    engine = make_engine(settings)
    try:
        await ensure_schema(engine)
        logger.info("schema_ready url=%s", engine.url.render_as_string(hide_password=True))
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
