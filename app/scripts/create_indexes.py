"""
Script to create the MongoDB indexes of the employee directory.

Run with: python -m app.scripts.create_indexes
"""
import asyncio
import logging

from app.config import settings
from app.database import Database, Collections
from app.repositories.employee_repository import EmployeeRepository
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)


async def create_indexes() -> None:
    """Create the unique email index and the listing index."""
    db = Database.connect()
    try:
        logger.info(f"Creating indexes on {settings.DB_NAME}.{Collections.EMPLOYEES}")
        await EmployeeRepository(db[Collections.EMPLOYEES]).ensure_indexes()
    finally:
        Database.close()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(create_indexes())
