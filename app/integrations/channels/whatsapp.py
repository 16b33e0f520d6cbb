"""
Adaptador para WhatsApp via Twilio.

Responsabilidades:
- Extrair remetente e texto dos payloads de entrada do webhook
- Formatar o endereço de destino (whatsapp:+<dígitos>)
- Enviar mensagens de texto pela API da Twilio
"""
from typing import Optional

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client as TwilioClient

from app.core.config import Settings
from app.core.logging import get_logger
from app.domain.models import DeliveryResult
from app.services.phone import normalize

logger = get_logger(__name__)

WHATSAPP_PREFIX = "whatsapp:"


def extract_message_from_webhook(payload: dict) -> Optional[tuple[str, str]]:
    """
    Extrai (telefone, texto) de um webhook de entrada.

    Aceita o JSON {"from": ..., "body": ...} e o form da Twilio {"From": ..., "Body": ...}.

    Returns:
        (telefone, mensagem) ou None se faltar remetente ou texto
    """
    if not isinstance(payload, dict):
        return None

    phone = payload.get("from") or payload.get("From")
    text = payload.get("body") or payload.get("Body")
    if not isinstance(phone, str) or not isinstance(text, str):
        return None

    phone, text = phone.strip(), text.strip()
    if not phone or not text:
        return None
    return phone, text


def to_whatsapp_address(phone: str) -> str:
    """
    Formata um telefone como endereço WhatsApp da Twilio.

    >>> to_whatsapp_address("52 55 1234 5678")
    'whatsapp:+525512345678'
    """
    return f"{WHATSAPP_PREFIX}+{normalize(phone)}"


class WhatsAppNotifier:
    def __init__(
        self,
        account_sid: str = "",
        auth_token: str = "",
        from_address: str = "",
        client: Optional[TwilioClient] = None,
    ):
        self.from_address = from_address
        self._client = client
        if self._client is None and account_sid and auth_token:
            self._client = TwilioClient(account_sid, auth_token)

        if not self.configured:
            logger.warning(
                "Twilio não configurado: defina TWILIO_ACCOUNT_SID, "
                "TWILIO_AUTH_TOKEN e TWILIO_WHATSAPP_FROM"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "WhatsAppNotifier":
        return cls(
            account_sid=settings.twilio_account_sid,
            auth_token=settings.twilio_auth_token,
            from_address=settings.twilio_whatsapp_from,
        )

    @property
    def configured(self) -> bool:
        return self._client is not None and bool(self.from_address)

    def send(self, to: str, body: str) -> DeliveryResult:
        """
        Envia uma mensagem de texto. Nunca levanta exceção.

        Args:
            to: Telefone do destinatário (qualquer formatação)
            body: Texto da mensagem

        Returns:
            DeliveryResult com o SID da Twilio ou a descrição do erro
        """
        if not self.configured:
            return self._fail("Twilio no está configurado")
        if not to or not normalize(to):
            return self._fail("Número de destino no proporcionado")
        if not body:
            return self._fail("Mensaje vacío")

        address = to_whatsapp_address(to)
        try:
            message = self._client.messages.create(
                from_=self.from_address,
                to=address,
                body=body,
            )
        except TwilioRestException as e:
            logger.error(f"Twilio rejeitou envio para {address}: [{e.code}] {e.msg}")
            return DeliveryResult(success=False, error=e.msg or str(e))
        except Exception as e:
            logger.error(f"Erro ao enviar mensagem para {address}: {e}", exc_info=True)
            return DeliveryResult(success=False, error=str(e) or "Error desconocido al enviar mensaje")

        logger.info(f"Mensagem enviada para {address} (sid={message.sid})")
        return DeliveryResult(success=True, message_sid=message.sid)

    @staticmethod
    def _fail(error: str) -> DeliveryResult:
        logger.error(f"Envio não realizado: {error}")
        return DeliveryResult(success=False, error=error)
