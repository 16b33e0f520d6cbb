from datetime import datetime
from zoneinfo import ZoneInfo

DEFAULT_TZ = "America/Mexico_City"


def now_local(tz_name: str = DEFAULT_TZ) -> datetime:
    return datetime.now(ZoneInfo(tz_name))


def now_iso(tz_name: str = DEFAULT_TZ) -> str:
    """Timestamp ISO-8601 com offset, no fuso da barbearia."""
    return now_local(tz_name).isoformat(timespec="seconds")
