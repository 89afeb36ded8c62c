# brdoc/__init__.py
"""
Validação e formatação de CPF e CNPJ.

Uso rápido:
    from brdoc import validate_document, format_cnpj

    validate_document("111.444.777-35")   # True
    format_cnpj("11222333000181")         # "11.222.333/0001-81"
"""

from .schemas.document import (
    DocumentKind,
    DocumentValidationRequest,
    DocumentValidationResponse,
)
from .utils.document_validator import (
    DocumentValidator,
    document_validator,
    clean,
    normalize,
    is_cpf,
    is_cnpj,
    validate_cpf,
    validate_cnpj,
    validate_document,
    format_cpf,
    format_cnpj,
    classify,
    is_formatted,
    calculate_cpf_check_digits,
    calculate_cnpj_check_digits,
)
from .services.document_service import DocumentService, document_service

__version__ = "1.0.0"

__all__ = [
    "DocumentKind",
    "DocumentValidationRequest",
    "DocumentValidationResponse",
    "DocumentValidator",
    "document_validator",
    "clean",
    "normalize",
    "is_cpf",
    "is_cnpj",
    "validate_cpf",
    "validate_cnpj",
    "validate_document",
    "format_cpf",
    "format_cnpj",
    "classify",
    "is_formatted",
    "calculate_cpf_check_digits",
    "calculate_cnpj_check_digits",
    "DocumentService",
    "document_service",
]
