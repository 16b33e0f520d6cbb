from enum import Enum


class ChatStatus(str, Enum):
    """Estados de um chat. NEW nunca é persistido."""
    NEW = "new"
    AWAITING_BARBER = "awaiting_barber"
    ATTENDED = "attended"


class StoreError(str, Enum):
    NOT_FOUND = "not_found"
    STORAGE = "storage_unavailable"
