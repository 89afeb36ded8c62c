"""
Testes do DocumentService e dos schemas de validação de documento.
"""

import logging

import pytest
from pydantic import ValidationError

from brdoc.schemas.document import (
    DocumentKind,
    DocumentValidationRequest,
    DocumentValidationResponse,
)
from brdoc.services.document_service import DocumentService
from brdoc.utils.document_validator import DocumentValidator


class TestDocumentService:
    """Testes para DocumentService.analisar"""

    def test_cpf_valido(self):
        """Test: CPF válido retorna normalizado e formatado"""
        result = DocumentService.analisar("111.444.777-35")
        assert result.is_valid is True
        assert result.tipo == DocumentKind.CPF
        assert result.documento_normalizado == "11144477735"
        assert result.documento_formatado == "111.444.777-35"
        assert result.error is None

    def test_cnpj_valido(self):
        """Test: CNPJ válido sem máscara"""
        result = DocumentService.analisar("11222333000181")
        assert result.is_valid is True
        assert result.tipo == DocumentKind.CNPJ
        assert result.documento_formatado == "11.222.333/0001-81"

    def test_documento_vazio(self):
        """Test: entrada sem dígitos"""
        result = DocumentService.analisar("abc")
        assert result.is_valid is False
        assert result.tipo == DocumentKind.UNRECOGNIZED
        assert "vazio" in result.error.lower()

    def test_tamanho_nao_reconhecido(self):
        """Test: 10 dígitos não é CPF nem CNPJ"""
        result = DocumentService.analisar("1114447773")
        assert result.is_valid is False
        assert result.tipo == DocumentKind.UNRECOGNIZED
        assert "10 dígitos" in result.error
        assert result.documento_normalizado is None

    def test_sequencia_repetida(self):
        """Test: sequência repetida tem mensagem própria"""
        result = DocumentService.analisar("000.000.000-00")
        assert result.is_valid is False
        assert result.tipo == DocumentKind.CPF
        assert "repetida" in result.error

    def test_dv_incorreto(self):
        """Test: DV incorreto"""
        result = DocumentService.analisar("11.222.333/0001-82")
        assert result.is_valid is False
        assert result.tipo == DocumentKind.CNPJ
        assert "incorretos" in result.error.lower()
        assert result.documento_formatado is None

    def test_is_valid_igual_validate_document(self):
        """Test: is_valid sempre coincide com validate_document"""
        amostras = [
            "", "abc", "111.444.777-35", "111.444.777-36", "11111111111",
            "11.222.333/0001-81", "11.222.333/0001-80", "123", "1122233300018100",
        ]
        for doc in amostras:
            assert DocumentService.analisar(doc).is_valid == DocumentValidator.validate_document(doc), doc

    def test_rejeicao_registrada_em_debug(self, caplog):
        """Test: rejeições vão para o logger 'brdoc' em DEBUG"""
        caplog.set_level(logging.DEBUG, logger="brdoc")
        DocumentService.analisar("111.444.777-36")
        assert any(
            r.name == "brdoc" and r.levelno == logging.DEBUG and "rejeitado" in r.getMessage()
            for r in caplog.records
        )

    def test_validar_request(self):
        """Test: validar aceita o schema de request"""
        request = DocumentValidationRequest(documento="11.444.777/0001-61")
        result = DocumentService.validar(request)
        assert result.is_valid is True
        assert result.documento_normalizado == "11444777000161"


class TestSchemas:
    """Testes dos schemas pydantic"""

    def test_request_muito_longo(self):
        """Test: documento acima de 50 caracteres é rejeitado pelo schema"""
        with pytest.raises(ValidationError):
            DocumentValidationRequest(documento="1" * 51)

    def test_response_serializa_tipo(self):
        """Test: tipo é serializado pelo valor do enum"""
        response = DocumentService.analisar("111.444.777-35")
        data = response.model_dump(mode="json")
        assert data["tipo"] == "cpf"
        assert data["is_valid"] is True

    def test_response_defaults(self):
        """Test: campos opcionais começam como None"""
        response = DocumentValidationResponse(is_valid=False, tipo=DocumentKind.UNRECOGNIZED)
        assert response.documento_normalizado is None
        assert response.documento_formatado is None
        assert response.error is None
