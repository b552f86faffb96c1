# studium/shared/utils/email_validation.py
"""
Utilitários para validação e normalização de emails.
"""

import re
from typing import Tuple

# Regex para validação básica de email: algo@algo.algo, sem espaços
EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Valida um endereço de email.

    Args:
        email: O endereço de email a ser validado

    Returns:
        Tupla (válido, mensagem de erro)
    """
    if not email or not isinstance(email, str):
        return False, "Email inválido"

    if len(email.strip()) > 255:
        return False, "Email não pode exceder 255 caracteres"

    if not EMAIL_REGEX.match(email.strip()):
        return False, "Email inválido"

    return True, ""


def normalize_email(email: str) -> str:
    """
    Normaliza um endereço de email removendo espaços e convertendo para minúsculas.

    Args:
        email: O endereço de email a ser normalizado

    Returns:
        Email normalizado
    """
    return email.strip().lower()
