"""
Repositório de chats do WhatsApp.

Nenhuma operação levanta exceção para o chamador: falhas de banco viram
StoreResult com error=STORAGE e ficam registradas no log.
"""
import sqlite3

from app.core.logging import get_logger
from app.core.timezone import DEFAULT_TZ, now_iso
from app.domain.enums import ChatStatus, StoreError
from app.domain.models import AttendResult, Chat, ProcessResult, StoreResult
from app.repositories.db import Database
from app.services.phone import normalize, phone_variants

logger = get_logger(__name__)

_SELECT_COLUMNS = "id, phone, status, last_message, last_interaction, created_at"


def _latest_chat(conn: sqlite3.Connection, phone: str) -> sqlite3.Row | None:
    variants = phone_variants(phone)
    placeholders = ", ".join("?" for _ in variants)
    return conn.execute(
        f"""
        SELECT {_SELECT_COLUMNS}
        FROM chats
        WHERE phone IN ({placeholders})
        ORDER BY id DESC
        LIMIT 1
        """,
        variants,
    ).fetchone()


def _chat_by_id(conn: sqlite3.Connection, chat_id: int) -> sqlite3.Row | None:
    return conn.execute(
        f"SELECT {_SELECT_COLUMNS} FROM chats WHERE id = ?",
        (chat_id,),
    ).fetchone()


class ChatStore:
    def __init__(self, db: Database, tz_name: str = DEFAULT_TZ):
        self.db = db
        self.tz_name = tz_name

    def find_by_phone(self, phone: str) -> StoreResult:
        """Chat mais recente do telefone (considerando grafias equivalentes)."""
        try:
            with self.db.connection() as conn:
                row = _latest_chat(conn, phone)
        except sqlite3.Error as e:
            logger.error(f"Erro ao buscar chat de {normalize(phone)}: {e}", exc_info=True)
            return StoreResult(error=StoreError.STORAGE)

        if not row:
            return StoreResult(error=StoreError.NOT_FOUND)
        return StoreResult(value=Chat.from_row(row))

    def create(self, phone: str, message: str) -> StoreResult:
        """Cria um chat já em awaiting_barber e devolve a linha relida."""
        try:
            with self.db.connection() as conn:
                chat_id = self._insert(conn, normalize(phone), message)
                conn.commit()
                row = _chat_by_id(conn, chat_id)
        except sqlite3.Error as e:
            logger.error(f"Erro ao criar chat de {normalize(phone)}: {e}", exc_info=True)
            return StoreResult(error=StoreError.STORAGE)

        if not row:
            return StoreResult(error=StoreError.NOT_FOUND)
        return StoreResult(value=Chat.from_row(row))

    def update_message(self, chat_id: int, message: str) -> StoreResult:
        """Atualiza last_message e last_interaction. value=True em caso de sucesso."""
        try:
            with self.db.connection() as conn:
                conn.execute(
                    """
                    UPDATE chats
                    SET last_message = ?, last_interaction = ?
                    WHERE id = ?
                    """,
                    (message, now_iso(self.tz_name), chat_id),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Erro ao atualizar chat {chat_id}: {e}", exc_info=True)
            return StoreResult(value=False, error=StoreError.STORAGE)
        return StoreResult(value=True)

    def mark_attended(self, phone: str, message: str) -> AttendResult:
        """
        Marca o chat mais recente do telefone como atendido.

        Args:
            phone: Telefone do cliente (qualquer formatação)
            message: Texto enviado pelo barbeiro

        Returns:
            AttendResult(success=False, chat=None, error=NOT_FOUND) se não há chat
        """
        found = self.find_by_phone(phone)
        if not found.ok:
            return AttendResult(success=False, chat=None, error=found.error)

        chat = found.value
        try:
            with self.db.connection() as conn:
                conn.execute(
                    """
                    UPDATE chats
                    SET status = ?, last_message = ?, last_interaction = ?
                    WHERE id = ?
                    """,
                    (ChatStatus.ATTENDED.value, message, now_iso(self.tz_name), chat.id),
                )
                conn.commit()
                row = _chat_by_id(conn, chat.id)
        except sqlite3.Error as e:
            logger.error(f"Erro ao marcar chat {chat.id} como atendido: {e}", exc_info=True)
            return AttendResult(success=False, chat=None, error=StoreError.STORAGE)

        logger.info(f"Chat {chat.id} ({chat.phone}): {chat.status.value} → attended")
        return AttendResult(success=True, chat=Chat.from_row(row) if row else None)

    def process_message(self, phone: str, message: str) -> ProcessResult:
        """
        Registra uma mensagem recebida.

        Telefone sem chat: cria um em awaiting_barber (is_new=True).
        Telefone com chat: atualiza a mensagem sem mexer no status (is_new=False),
        inclusive quando o chat já foi atendido.
        """
        found = self.find_by_phone(phone)
        if found.error == StoreError.STORAGE:
            return ProcessResult(
                chat=None, status=ChatStatus.NEW, is_new=False, error=StoreError.STORAGE
            )

        if found.not_found:
            created = self._create_if_absent(phone, message)
            if not created.ok:
                return ProcessResult(
                    chat=None, status=ChatStatus.NEW, is_new=True, error=created.error
                )
            chat, is_new = created.value
            if is_new:
                return ProcessResult(chat=chat, status=ChatStatus.AWAITING_BARBER, is_new=True)
        else:
            chat = found.value

        updated = self.update_message(chat.id, message)
        if not updated.ok:
            return ProcessResult(chat=chat, status=chat.status, is_new=False, error=updated.error)

        refreshed = self.find_by_phone(phone)
        if refreshed.ok:
            chat = refreshed.value
        return ProcessResult(chat=chat, status=chat.status, is_new=False)

    def list_recent(self, limit: int = 10) -> StoreResult:
        try:
            with self.db.connection() as conn:
                rows = conn.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM chats ORDER BY id DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Erro ao listar chats: {e}", exc_info=True)
            return StoreResult(value=[], error=StoreError.STORAGE)
        return StoreResult(value=[Chat.from_row(r) for r in rows])

    def _insert(self, conn: sqlite3.Connection, phone: str, message: str) -> int:
        cur = conn.execute(
            """
            INSERT INTO chats(phone, status, last_message, last_interaction)
            VALUES(?, ?, ?, ?)
            """,
            (phone, ChatStatus.AWAITING_BARBER.value, message, now_iso(self.tz_name)),
        )
        return int(cur.lastrowid)

    def _create_if_absent(self, phone: str, message: str) -> StoreResult:
        """
        Cria o chat dentro de uma transação de escrita que reverifica a existência.

        Duas primeiras mensagens simultâneas do mesmo número não geram linhas
        duplicadas: a segunda encontra o chat da primeira.

        Returns:
            StoreResult com value=(chat, criado_agora)
        """
        try:
            with self.db.connection() as conn:
                conn.execute("BEGIN IMMEDIATE")
                row = _latest_chat(conn, phone)
                if row:
                    conn.commit()
                    logger.info(f"Chat de {normalize(phone)} criado por requisição concorrente")
                    return StoreResult(value=(Chat.from_row(row), False))

                chat_id = self._insert(conn, normalize(phone), message)
                conn.commit()
                row = _chat_by_id(conn, chat_id)
        except sqlite3.Error as e:
            logger.error(f"Erro ao criar chat de {normalize(phone)}: {e}", exc_info=True)
            return StoreResult(error=StoreError.STORAGE)

        if not row:
            return StoreResult(error=StoreError.NOT_FOUND)
        logger.info(f"Novo chat {chat_id} para {normalize(phone)}")
        return StoreResult(value=(Chat.from_row(row), True))
