# studium/adapters/outbound/persistence/seeds/__main__.py

"""
Ponto de entrada para execução direta do módulo:
`python -m studium.adapters.outbound.persistence.seeds`
"""

import asyncio
import logging

from studium.adapters.configuration.config import settings
from studium.adapters.outbound.persistence.database import Database
from studium.adapters.outbound.persistence.seeds import run_all_seeds

logger = logging.getLogger(__name__)


async def main() -> None:
    database = Database.from_settings(settings)
    try:
        await database.create_all()
        async with database.session() as session:
            await run_all_seeds(session)
    finally:
        await database.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
