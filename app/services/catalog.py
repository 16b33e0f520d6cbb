"""
Formatação do catálogo (serviços e barbeiros) para mensagens de WhatsApp.
"""
from typing import Optional

NO_SERVICES = "📋 No hay servicios disponibles en este momento."
NO_BARBERS = "👨‍💼 No hay barberos disponibles en este momento."


def format_price(price_cents: Optional[int]) -> str:
    """
    >>> format_price(15000)
    '$150'
    >>> format_price(12550)
    '$125.50'
    """
    if price_cents is None:
        return "N/A"
    if price_cents % 100 == 0:
        return f"${price_cents // 100}"
    return f"${price_cents / 100:.2f}"


def format_services(services: list[dict]) -> str:
    if not services:
        return NO_SERVICES

    lines = ["*📋 SERVICIOS DISPONIBLES*", ""]
    for index, service in enumerate(services, start=1):
        name = (service.get("name") or "").strip() or "Sin nombre"
        description = (service.get("description") or "").strip()

        lines.append(f"{index}. *{name}*")
        if description:
            lines.append(f"   {description}")
        lines.append(f"   💰 Precio: {format_price(service.get('price_cents'))}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_barbers(barbers: list[dict]) -> str:
    if not barbers:
        return NO_BARBERS

    lines = ["*👨‍💼 NUESTROS BARBEROS*", ""]
    for index, barber in enumerate(barbers, start=1):
        name = (barber.get("name") or "").strip() or "Sin nombre"
        specialty = (barber.get("specialty") or "").strip()

        lines.append(f"{index}. *{name}*")
        if specialty:
            lines.append(f"   {specialty}")
        lines.append("")
    return "\n".join(lines).rstrip()
