"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from core.application.services.order_service import OrderApplicationService  # noqa: E402
from core.infrastructure.database import config as database_config  # noqa: E402


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory bound to the global engine.

    Returns:
        async_sessionmaker instance
    """
    return database_config.get_session_factory()


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(get_session_factory())
