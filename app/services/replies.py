from app.domain.enums import ChatStatus
from app.domain.models import ProcessResult

GREETING_NEW = (
    "¡Hola! 👋 Bienvenido a la barbería. Recibimos tu mensaje y en breve "
    "uno de nuestros barberos te atenderá."
)
AWAITING_BARBER = (
    "Gracias por tu mensaje 💈 Sigues en la fila, un barbero te responderá en breve."
)
WELCOME_BACK = (
    "¡Hola de nuevo! 👋 Qué gusto saludarte otra vez. ¿En qué te podemos ayudar hoy?"
)
FALLBACK_GREETING = "¡Hola! 👋 Bienvenido a la barbería. ¿En qué te podemos ayudar?"


def select_reply(result: ProcessResult) -> str:
    """Resposta automática conforme o status do chat após a mensagem."""
    if result.status == ChatStatus.AWAITING_BARBER:
        return GREETING_NEW if result.is_new else AWAITING_BARBER
    if result.status == ChatStatus.ATTENDED:
        return WELCOME_BACK
    return FALLBACK_GREETING
