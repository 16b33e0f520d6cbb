from dataclasses import dataclass, asdict
from typing import Any, Optional

from app.domain.enums import ChatStatus, StoreError


@dataclass
class Chat:
    """Chat mais recente de um telefone."""
    id: int
    phone: str
    status: ChatStatus
    last_message: Optional[str] = None
    last_interaction: Optional[str] = None  # ISO format com offset
    created_at: Optional[str] = None

    @staticmethod
    def from_row(row) -> "Chat":
        data = dict(row)
        return Chat(
            id=int(data["id"]),
            phone=data["phone"],
            status=ChatStatus(data["status"]),
            last_message=data.get("last_message"),
            last_interaction=data.get("last_interaction"),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class StoreResult:
    """
    Resultado de uma operação de repositório.

    `value` carrega o payload (ou o valor sentinela: None, False, []),
    `error` diz por que não há payload: registro inexistente ou falha de banco.
    """
    value: Any = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def not_found(self) -> bool:
        return self.error == StoreError.NOT_FOUND


@dataclass
class AttendResult:
    success: bool
    chat: Optional[Chat] = None
    error: Optional[StoreError] = None


@dataclass
class ProcessResult:
    """Saída do processamento de uma mensagem recebida."""
    chat: Optional[Chat]
    status: ChatStatus
    is_new: bool
    error: Optional[StoreError] = None


@dataclass
class ClientCheck:
    exists: bool
    is_new: bool
    error: Optional[StoreError] = None


@dataclass
class DeliveryResult:
    success: bool
    message_sid: Optional[str] = None
    error: Optional[str] = None
