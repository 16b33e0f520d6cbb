from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str


class RootOut(BaseModel):
    message: str
    version: str
    endpoints: dict[str, str]


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(
        status="OK",
        message="Servidor funcionando correctamente",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/", response_model=RootOut)
def root(request: Request):
    return RootOut(
        message="WhatsApp Bot API",
        version=request.app.version,
        endpoints={
            "health": "/health",
            "whatsapp": "/webhook/whatsapp",
            "barber_responds": "/webhook/barber-responds",
            "services": "/catalog/services",
            "barbers": "/catalog/barbers",
        },
    )
