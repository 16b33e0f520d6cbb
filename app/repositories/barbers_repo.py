import sqlite3

from app.core.logging import get_logger
from app.domain.enums import StoreError
from app.domain.models import StoreResult
from app.repositories.db import Database

logger = get_logger(__name__)


def list_active_barbers(db: Database) -> StoreResult:
    """Barbeiros ativos por id. Em falha de banco, value=[]."""
    try:
        with db.connection() as conn:
            rows = conn.execute(
                "SELECT id, name, specialty FROM barbers WHERE is_active = 1 ORDER BY id"
            ).fetchall()
    except sqlite3.Error as e:
        logger.error(f"Erro ao listar barbeiros: {e}", exc_info=True)
        return StoreResult(value=[], error=StoreError.STORAGE)
    return StoreResult(value=[dict(r) for r in rows])
