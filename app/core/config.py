"""
Configuração da aplicação a partir de variáveis de ambiente.

Carrega o .env da raiz do projeto (se existir) antes de ler as variáveis.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]

load_dotenv(find_dotenv(usecwd=True), override=False)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    db_path: str = str(ROOT_DIR / "data.sqlite3")
    db_pool_size: int = 5
    db_timeout: float = 5.0
    timezone: str = "America/Mexico_City"
    app_version: str = "1.0.0"
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_whatsapp_from: str = ""  # formato: whatsapp:+14155238886
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:8080"]
    )

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            db_path=os.getenv("DB_PATH", defaults.db_path),
            db_pool_size=int(os.getenv("DB_POOL_SIZE", defaults.db_pool_size)),
            db_timeout=float(os.getenv("DB_TIMEOUT", defaults.db_timeout)),
            timezone=os.getenv("APP_TIMEZONE", defaults.timezone),
            app_version=os.getenv("APP_VERSION", defaults.app_version),
            twilio_account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
            twilio_auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
            twilio_whatsapp_from=os.getenv("TWILIO_WHATSAPP_FROM", ""),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", ""))
            or defaults.cors_origins,
        )

    @property
    def twilio_configured(self) -> bool:
        return all([
            self.twilio_account_sid,
            self.twilio_auth_token,
            self.twilio_whatsapp_from,
        ])
