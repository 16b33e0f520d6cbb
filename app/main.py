from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes.catalog import router as catalog_router
from app.api.routes.health import router as health_router
from app.api.routes.whatsapp import router as whatsapp_router
from app.core.config import Settings
from app.core.logging import get_logger
from app.integrations.channels.whatsapp import WhatsAppNotifier
from app.repositories.chats_repo import ChatStore
from app.repositories.clients_repo import ClientRegistry
from app.repositories.db import Database

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="WhatsApp Bot API", version=settings.app_version)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def _startup():
        logger.info("Iniciando aplicação...")
        db = Database(settings.db_path, pool_size=settings.db_pool_size, timeout=settings.db_timeout)
        db.init_schema()
        if db.ping():
            logger.info(f"Banco de dados pronto: {settings.db_path}")

        app.state.db = db
        app.state.chat_store = ChatStore(db, tz_name=settings.timezone)
        app.state.client_registry = ClientRegistry(db)
        if not getattr(app.state, "notifier", None):
            app.state.notifier = WhatsAppNotifier.from_settings(settings)

    @app.on_event("shutdown")
    def _shutdown():
        db = getattr(app.state, "db", None)
        if db is not None:
            db.close()
        logger.info("Aplicação encerrada")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        # Rota inexistente ou método não suportado: ambos viram 404
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or (
            exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found"
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"ok": False, "error": "Ruta no encontrada", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"ok": False, "error": exc.detail, "path": request.url.path},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        logger.warning(f"Requisição inválida em {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"ok": False, "error": "Cuerpo de la solicitud inválido", "path": request.url.path},
        )

    app.include_router(health_router, tags=["health"])
    app.include_router(whatsapp_router, tags=["webhook"])
    app.include_router(catalog_router, tags=["catalog"])

    logger.info("Rotas registradas")
    return app


app = create_app()
