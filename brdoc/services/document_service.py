"""
Document Service - análise completa de CPF/CNPJ

Combina as funções puras do DocumentValidator em um único resultado
estruturado (DocumentValidationResponse), com o motivo da rejeição.

USO:
====
    from brdoc.services.document_service import DocumentService

    resultado = DocumentService.analisar("11.222.333/0001-81")
    # resultado.is_valid == True
    # resultado.tipo == DocumentKind.CNPJ
    # resultado.documento_formatado == "11.222.333/0001-81"

REGRAS:
=======
- is_valid é sempre igual a DocumentValidator.validate_document(documento)
- Nunca levanta exceção para entrada string: erros viram `error`
- Rejeições são registradas em nível DEBUG
"""

from brdoc.schemas.document import (
    DocumentKind,
    DocumentValidationRequest,
    DocumentValidationResponse,
)
from brdoc.utils.document_validator import DocumentValidator
from brdoc.utils.logger import logger


class DocumentService:
    """Serviço de validação de documentos com diagnóstico do erro."""

    @staticmethod
    def _rejeitar(tipo: DocumentKind, error: str) -> DocumentValidationResponse:
        logger.debug(f"Documento rejeitado ({tipo.value}): {error}")
        return DocumentValidationResponse(
            is_valid=False,
            tipo=tipo,
            documento_normalizado=None,
            documento_formatado=None,
            error=error,
        )

    @staticmethod
    def analisar(documento: str) -> DocumentValidationResponse:
        """
        Analisa um documento e retorna tipo, forma normalizada e formatada.

        Args:
            documento: CPF ou CNPJ em qualquer formato

        Returns:
            DocumentValidationResponse com is_valid=True e o documento
            normalizado/formatado, ou is_valid=False e a mensagem de erro
        """
        digitos = DocumentValidator.clean(documento)
        tipo = DocumentValidator.classify(digitos)

        if not digitos:
            return DocumentService._rejeitar(tipo, "Documento vazio ou sem dígitos")

        if tipo == DocumentKind.UNRECOGNIZED:
            return DocumentService._rejeitar(
                tipo,
                f"Documento deve ter 11 (CPF) ou 14 (CNPJ) dígitos. Recebido: {len(digitos)} dígitos",
            )

        if len(set(digitos)) == 1:
            return DocumentService._rejeitar(
                tipo, f"{tipo.value.upper()} inválido: sequência repetida de '{digitos[0]}'"
            )

        if tipo == DocumentKind.CPF:
            is_valid = DocumentValidator.validate_cpf(digitos)
            formatado = DocumentValidator.format_cpf(digitos)
        else:
            is_valid = DocumentValidator.validate_cnpj(digitos)
            formatado = DocumentValidator.format_cnpj(digitos)

        if not is_valid:
            return DocumentService._rejeitar(
                tipo, f"Dígitos verificadores incorretos para {tipo.value.upper()} {formatado}"
            )

        return DocumentValidationResponse(
            is_valid=True,
            tipo=tipo,
            documento_normalizado=digitos,
            documento_formatado=formatado,
            error=None,
        )

    @staticmethod
    def validar(request: DocumentValidationRequest) -> DocumentValidationResponse:
        """Valida um DocumentValidationRequest (atalho para analisar)."""
        return DocumentService.analisar(request.documento)


document_service = DocumentService()
