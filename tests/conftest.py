"""
Configuração central do pytest e fixtures compartilhadas.

Proporciona:
- Amostras de CPF/CNPJ válidos (DV conferido manualmente)
- Amostras inválidas
"""
import pytest


# ==================== FIXTURES GLOBAIS ====================

@pytest.fixture
def cpfs_validos():
    """CPFs válidos sem máscara."""
    return ["11144477735", "26394653330", "52998224725"]


@pytest.fixture
def cnpjs_validos():
    """CNPJs válidos sem máscara."""
    return ["11222333000181", "11444777000161"]


@pytest.fixture
def entradas_sem_digitos():
    """Entradas que normalizam para string vazia."""
    return ["", "   ", "abc", "./-", "CPF: --.--"]
