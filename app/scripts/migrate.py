from app.core.config import Settings
from app.repositories.db import Database


def run():
    settings = Settings.from_env()
    db = Database(settings.db_path, pool_size=1, timeout=settings.db_timeout)
    try:
        db.init_schema()
        print(f"OK: tabelas chats e clients em {settings.db_path}")
    finally:
        db.close()


if __name__ == "__main__":
    run()
