from app.core.config import Settings
from app.repositories.chats_repo import ChatStore
from app.repositories.db import Database

settings = Settings.from_env()
db = Database(settings.db_path, pool_size=1, timeout=settings.db_timeout)
recent = ChatStore(db, tz_name=settings.timezone).list_recent(10)
for chat in recent.value:
    print(chat.to_dict())
if recent.error:
    print(f"erro: {recent.error.value}")
db.close()
