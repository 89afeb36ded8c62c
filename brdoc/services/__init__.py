# brdoc/services/__init__.py
from .document_service import DocumentService, document_service

__all__ = ["DocumentService", "document_service"]
