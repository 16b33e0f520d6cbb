from app.core.config import Settings
from app.repositories.db import Database

BARBERS = [
    # name, specialty
    ("Barbero 1", "Cortes clásicos"),
    ("Barbero 2", "Barba y afeitado"),
]

SERVICES = [
    # name, description, price_cents
    ("Corte", "Corte de cabello con máquina y tijera", 15000),
    ("Barba", "Perfilado de barba con toalla caliente", 10000),
    ("Corte + Barba", None, 22000),
]


def run():
    settings = Settings.from_env()
    db = Database(settings.db_path, pool_size=1, timeout=settings.db_timeout)
    try:
        db.init_schema()
        with db.connection() as conn:
            for name, specialty in BARBERS:
                conn.execute(
                    "INSERT OR IGNORE INTO barbers(name, specialty, is_active) VALUES(?, ?, 1)",
                    (name, specialty),
                )
            for name, description, price in SERVICES:
                conn.execute(
                    "INSERT OR IGNORE INTO services(name, description, price_cents, is_active) VALUES(?, ?, ?, 1)",
                    (name, description, price),
                )
            conn.commit()
        print("OK")
    finally:
        db.close()


if __name__ == "__main__":
    run()
