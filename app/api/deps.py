from fastapi import Request

from app.integrations.channels.whatsapp import WhatsAppNotifier
from app.repositories.chats_repo import ChatStore
from app.repositories.clients_repo import ClientRegistry
from app.repositories.db import Database


def get_chat_store(request: Request) -> ChatStore:
    return request.app.state.chat_store


def get_client_registry(request: Request) -> ClientRegistry:
    return request.app.state.client_registry


def get_notifier(request: Request) -> WhatsAppNotifier:
    return request.app.state.notifier


def get_db(request: Request) -> Database:
    return request.app.state.db
