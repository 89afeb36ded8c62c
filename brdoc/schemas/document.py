from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DocumentKind(str, Enum):
    """Tipo de documento detectado pela quantidade de dígitos"""
    CPF = "cpf"  # 11 dígitos
    CNPJ = "cnpj"  # 14 dígitos
    UNRECOGNIZED = "desconhecido"


# ==================== Validação de documento ====================

class DocumentValidationRequest(BaseModel):
    """Request para validar um CPF ou CNPJ"""
    documento: str = Field(..., max_length=50, description="CPF ou CNPJ em qualquer formato")


class DocumentValidationResponse(BaseModel):
    """Resultado da validação de um documento"""
    is_valid: bool = Field(..., description="True se o documento é um CPF/CNPJ válido")
    tipo: DocumentKind = Field(..., description="Tipo detectado pela quantidade de dígitos")
    documento_normalizado: Optional[str] = Field(None, description="Somente dígitos, se válido")
    documento_formatado: Optional[str] = Field(None, description="Documento com máscara oficial, se válido")
    error: Optional[str] = Field(None, description="Mensagem de erro se não for válido")

    class Config:
        json_schema_extra = {
            "example": {
                "is_valid": True,
                "tipo": "cnpj",
                "documento_normalizado": "11222333000181",
                "documento_formatado": "11.222.333/0001-81",
                "error": None,
            }
        }
