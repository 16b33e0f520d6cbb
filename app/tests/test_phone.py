import pytest

from app.services.phone import normalize, phone_variants


def test_normalize_strips_formatting():
    assert normalize("+1 (555) 123-4567") == "15551234567"
    assert normalize("555-123-4567") == "5551234567"
    assert normalize("  +52 55 1234 5678 ") == "525512345678"


def test_normalize_twilio_address():
    assert normalize("whatsapp:+5215512345678") == "5215512345678"


def test_normalize_malformed_input_passes_through():
    assert normalize("") == ""
    assert normalize("abc") == ""
    assert normalize("tel 12ab3") == "123"


@pytest.mark.parametrize("raw", ["+1 (555) 123-4567", "++52 1 55", "whatsapp:+44 20", "", "x"])
def test_normalize_is_idempotent(raw):
    assert normalize(normalize(raw)) == normalize(raw)


def test_phone_variants_mexican_mobile():
    assert phone_variants("+52 1 55 1234 5678") == ["5215512345678", "525512345678"]
    assert phone_variants("+52 55 1234 5678") == ["525512345678", "5215512345678"]


def test_phone_variants_other_numbers():
    assert phone_variants("+1 (555) 123-4567") == ["15551234567"]
    assert phone_variants("") == [""]
