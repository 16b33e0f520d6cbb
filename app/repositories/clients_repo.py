import sqlite3

from app.core.logging import get_logger
from app.domain.enums import StoreError
from app.domain.models import ClientCheck, StoreResult
from app.repositories.db import Database
from app.services.phone import normalize, phone_variants

logger = get_logger(__name__)


class ClientRegistry:
    """Registro de telefones que já falaram com a barbearia."""

    def __init__(self, db: Database):
        self.db = db

    def exists(self, phone: str) -> StoreResult:
        """
        value=True se o telefone (ou uma grafia equivalente) já está registrado.
        Em falha de banco, value=False para não bloquear o fluxo.
        """
        variants = phone_variants(phone)
        placeholders = ", ".join("?" for _ in variants)
        try:
            with self.db.connection() as conn:
                row = conn.execute(
                    f"SELECT COUNT(*) AS count FROM clients WHERE phone IN ({placeholders})",
                    variants,
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Erro ao verificar cliente {normalize(phone)}: {e}", exc_info=True)
            return StoreResult(value=False, error=StoreError.STORAGE)
        return StoreResult(value=row["count"] > 0)

    def insert(self, phone: str) -> StoreResult:
        """Registra o telefone. Telefone já registrado conta como sucesso."""
        clean_phone = normalize(phone)
        try:
            with self.db.connection() as conn:
                conn.execute("INSERT INTO clients(phone) VALUES(?)", (clean_phone,))
                conn.commit()
        except sqlite3.IntegrityError:
            logger.debug(f"Cliente {clean_phone} já registrado")
            return StoreResult(value=True)
        except sqlite3.Error as e:
            logger.error(f"Erro ao registrar cliente {clean_phone}: {e}", exc_info=True)
            return StoreResult(value=False, error=StoreError.STORAGE)
        return StoreResult(value=True)

    def check_or_create(self, phone: str) -> ClientCheck:
        found = self.exists(phone)
        if found.value:
            return ClientCheck(exists=True, is_new=False)

        inserted = self.insert(phone)
        if not inserted.value:
            return ClientCheck(exists=False, is_new=True, error=inserted.error)

        logger.info(f"Novo cliente registrado: {normalize(phone)}")
        return ClientCheck(exists=True, is_new=True)
