# certifica/core/validators.py
import re
from datetime import date, datetime
from typing import Optional

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def validate_password(password: str) -> str:
    if len(password) < 8:
        raise ValueError("Senha deve ter pelo menos 8 caracteres")
    if not re.search(r"[A-Z]", password):
        raise ValueError("Senha deve conter pelo menos uma letra maiúscula")
    if not re.search(r"[a-z]", password):
        raise ValueError("Senha deve conter pelo menos uma letra minúscula")
    if not re.search(r"\d", password):
        raise ValueError("Senha deve conter pelo menos um número")
    return password

def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")

def format_cpf(value: str) -> str:
    """Normalize a CPF to the 000.000.000-00 mask"""
    digits = only_digits(value)
    if len(digits) != 11:
        raise ValueError("CPF deve conter 11 dígitos")
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"

def format_cnpj(value: str) -> str:
    """Normalize a CNPJ to the 00.000.000/0000-00 mask"""
    digits = only_digits(value)
    if len(digits) != 14:
        raise ValueError("CNPJ deve conter 14 dígitos")
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"

def validate_hex_color(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value or ""):
        raise ValueError("Cor deve estar no formato hexadecimal #RRGGBB")
    return value.lower()

def validate_iso_date(value: str) -> str:
    """Accept YYYY-MM-DD calendar dates only"""
    if not ISO_DATE_PATTERN.match(value or ""):
        raise ValueError("Data deve estar no formato AAAA-MM-DD")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("Data inválida")
    return value

def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse YYYY-MM-DD, returning None when absent or malformed"""
    if not value or not ISO_DATE_PATTERN.match(value.strip()):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None

def format_br_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
