from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_db
from app.repositories.barbers_repo import list_active_barbers
from app.repositories.db import Database
from app.repositories.services_repo import list_active_services
from app.services.catalog import format_barbers, format_services

router = APIRouter(prefix="/catalog")


class CatalogOut(BaseModel):
    items: list[dict]
    message: str


@router.get("/services", response_model=CatalogOut)
def services(db: Database = Depends(get_db)):
    """Serviços ativos e o texto pronto para enviar no WhatsApp."""
    result = list_active_services(db)
    return CatalogOut(items=result.value, message=format_services(result.value))


@router.get("/barbers", response_model=CatalogOut)
def barbers(db: Database = Depends(get_db)):
    result = list_active_barbers(db)
    return CatalogOut(items=result.value, message=format_barbers(result.value))
