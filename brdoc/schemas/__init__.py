# brdoc/schemas/__init__.py
from .document import DocumentKind, DocumentValidationRequest, DocumentValidationResponse

__all__ = [
    "DocumentKind",
    "DocumentValidationRequest",
    "DocumentValidationResponse",
]
