import re

_NON_DIGITS = re.compile(r"\D")

# México: o WhatsApp entrega celulares como 521 + 10 dígitos,
# enquanto o número discado é 52 + 10 dígitos.
_MX_PREFIX = "52"
_MX_MOBILE_PREFIX = "521"


def normalize(raw: str) -> str:
    """
    Normaliza um telefone para a chave de armazenamento.

    Remove tudo que não é dígito (inclusive o "+" inicial e prefixos como
    "whatsapp:"). Não valida tamanho nem código de país: entrada vazia ou só
    com letras vira string vazia.

    >>> normalize("+1 (555) 123-4567")
    '15551234567'
    """
    if not raw:
        return ""
    return _NON_DIGITS.sub("", raw.strip())


def phone_variants(phone: str) -> list[str]:
    """
    Grafias equivalentes de um telefone, a forma canônica primeiro.

    Usado nas buscas para que 5215512345678 e 525512345678 sejam o mesmo cliente.
    """
    canonical = normalize(phone)
    variants = [canonical]
    if canonical.startswith(_MX_MOBILE_PREFIX) and len(canonical) == 13:
        variants.append(_MX_PREFIX + canonical[3:])
    elif canonical.startswith(_MX_PREFIX) and len(canonical) == 12:
        variants.append(_MX_MOBILE_PREFIX + canonical[2:])
    return variants
