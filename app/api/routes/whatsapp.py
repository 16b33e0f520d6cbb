"""
Rotas de webhook.

POST /webhook/whatsapp: mensagens recebidas dos clientes (sempre responde 200)
POST /webhook/barber-responds: resposta do barbeiro, marca o chat como atendido
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool
from pydantic import AliasChoices, BaseModel, Field

from app.api.deps import get_chat_store, get_client_registry, get_notifier
from app.core.logging import get_logger
from app.domain.enums import StoreError
from app.integrations.channels.whatsapp import WhatsAppNotifier, extract_message_from_webhook
from app.repositories.chats_repo import ChatStore
from app.repositories.clients_repo import ClientRegistry
from app.services.phone import normalize
from app.services.replies import select_reply

logger = get_logger(__name__)

router = APIRouter(prefix="/webhook")


class InboundReplyOut(BaseModel):
    ok: bool = True
    message: str
    status: str


class BarberResponseIn(BaseModel):
    phone: Optional[str] = Field(None, validation_alias=AliasChoices("phone", "telefono"))
    message: Optional[str] = Field(None, validation_alias=AliasChoices("message", "mensaje"))


async def _read_payload(request: Request) -> dict:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)
    return await request.json()


@router.post("/whatsapp")
async def receive_message(
    request: Request,
    chats: ChatStore = Depends(get_chat_store),
    clients: ClientRegistry = Depends(get_client_registry),
):
    """
    POST /webhook/whatsapp

    Body esperado: {"from": "<telefone>", "body": "<mensagem>"}
    (ou o form da Twilio com From/Body).

    Responde sempre 200 para o provedor não reenviar o webhook.
    """
    try:
        payload = await _read_payload(request)
        logger.debug(f"Webhook payload: {payload}")

        result = extract_message_from_webhook(payload)
        if not result:
            logger.warning("Webhook sem remetente ou texto; ignorando")
            return {"ok": True}

        phone, text = result
        logger.info(f"Mensagem recebida de {normalize(phone)}: {text}")

        # Repositórios são síncronos: rodam fora do event loop
        await run_in_threadpool(clients.check_or_create, phone)
        processed = await run_in_threadpool(chats.process_message, phone, text)
        if processed.error:
            logger.warning(f"Mensagem de {normalize(phone)} processada com falha: {processed.error.value}")

        reply = select_reply(processed)
        logger.info(f"Chat {normalize(phone)}: status={processed.status.value} is_new={processed.is_new}")

        return InboundReplyOut(message=reply, status=processed.status.value)

    except Exception as e:
        logger.error(f"Erro ao processar webhook: {str(e)}", exc_info=True)
        # Retorna OK para não causar retry
        return {"ok": True}


@router.post("/barber-responds")
def barber_responds(
    payload: BarberResponseIn,
    chats: ChatStore = Depends(get_chat_store),
    notifier: WhatsAppNotifier = Depends(get_notifier),
):
    """
    POST /webhook/barber-responds

    Body: {"phone": "<telefone>", "message": "<texto>"} (aceita telefono/mensaje).
    Marca o chat como atendido e encaminha o texto ao cliente.
    """
    phone = (payload.phone or "").strip()
    message = (payload.message or "").strip()
    if not phone or not message:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Faltan campos requeridos: phone (telefono) y message (mensaje)",
        )

    try:
        result = chats.mark_attended(phone, message)

        if result.error == StoreError.NOT_FOUND:
            logger.warning(f"Barbeiro respondeu a chat inexistente: {normalize(phone)}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Chat no encontrado",
            )
        if not result.success:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error interno del servidor",
            )

        delivery = notifier.send(result.chat.phone if result.chat else phone, message)
        if not delivery.success:
            logger.error(f"Falha ao encaminhar resposta do barbeiro para {normalize(phone)}: {delivery.error}")

        return {"ok": True}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao processar resposta do barbeiro: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor",
        )
