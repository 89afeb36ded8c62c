"""
Validador e formatador de documentos fiscais brasileiros (CPF e CNPJ).

Implementa o cálculo oficial dos dígitos verificadores (módulo 11) da
Receita Federal para:
  - CPF: 11 dígitos, máscara "XXX.XXX.XXX-XX"
  - CNPJ: 14 dígitos, máscara "XX.XXX.XXX/XXXX-XX"

Todas as operações são funções puras: aceitam qualquer string, nunca
levantam exceção (exceto os calculadores de DV) e devolvem False ou os
dígitos limpos quando a entrada não é um documento válido.
"""

from string import digits as ASCII_DIGITS

from brdoc.schemas.document import DocumentKind


CPF_LENGTH = 11
CNPJ_LENGTH = 14


class DocumentValidator:
    """
    Validador dos dígitos verificadores de CPF e CNPJ.

    Algoritmo: Módulo 11 (resto < 2 → DV 0, senão DV = 11 - resto)
    """

    # Pesos oficiais do CNPJ para o primeiro e o segundo DV
    CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    CNPJ_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

    @staticmethod
    def clean(document: str) -> str:
        """
        Remove todo caractere que não seja dígito ASCII (0-9).

        Example:
            >>> DocumentValidator.clean("111.444.777-35")
            "11144477735"
        """
        return "".join(ch for ch in (document or "") if ch in ASCII_DIGITS)

    normalize = clean

    @staticmethod
    def _check_digit(weighted_sum: int) -> int:
        remainder = weighted_sum % 11
        return 0 if remainder < 2 else 11 - remainder

    @staticmethod
    def _is_repeated(document: str) -> bool:
        # "00000000000", "11111111111"... passam no módulo 11 mas são inválidos
        first = document[0]
        for ch in document[1:]:
            if ch != first:
                return False
        return True

    @staticmethod
    def calculate_cpf_check_digits(base: str) -> str:
        """
        Calcula os dois dígitos verificadores de um CPF.

        Algoritmo:
        1. Para a posição t (9 e depois 10), multiplica cada dígito anterior
           d[i] pelo peso (t + 1 - i): 10..2 no primeiro DV, 11..2 no segundo
        2. Soma os produtos e aplica módulo 11
        3. DV = 0 se o resto for 0 ou 1, senão DV = 11 - resto

        Args:
            base: Os 9 primeiros dígitos do CPF (pontuação é ignorada)

        Returns:
            String com os dois dígitos verificadores, ex: "35"

        Raises:
            ValueError: Se a base não tiver exatamente 9 dígitos

        Example:
            >>> DocumentValidator.calculate_cpf_check_digits("111.444.777")
            "35"
        """
        base_clean = DocumentValidator.clean(base)
        if len(base_clean) != CPF_LENGTH - 2:
            raise ValueError(
                f"Base do CPF deve ter 9 dígitos. Recebido: '{base}' ({len(base_clean)} dígitos)"
            )

        numbers = [int(ch) for ch in base_clean]
        for t in (9, 10):
            weighted_sum = sum(numbers[i] * ((t + 1) - i) for i in range(t))
            numbers.append(DocumentValidator._check_digit(weighted_sum))

        return f"{numbers[9]}{numbers[10]}"

    @staticmethod
    def calculate_cnpj_check_digits(base: str) -> str:
        """
        Calcula os dois dígitos verificadores de um CNPJ.

        Usa os pesos fixos CNPJ_WEIGHTS_1 sobre os 12 primeiros dígitos e
        CNPJ_WEIGHTS_2 sobre os 12 dígitos mais o primeiro DV.

        Args:
            base: Os 12 primeiros dígitos do CNPJ (pontuação é ignorada)

        Returns:
            String com os dois dígitos verificadores, ex: "81"

        Raises:
            ValueError: Se a base não tiver exatamente 12 dígitos
        """
        base_clean = DocumentValidator.clean(base)
        if len(base_clean) != CNPJ_LENGTH - 2:
            raise ValueError(
                f"Base do CNPJ deve ter 12 dígitos. Recebido: '{base}' ({len(base_clean)} dígitos)"
            )

        numbers = [int(ch) for ch in base_clean]
        for weights in (DocumentValidator.CNPJ_WEIGHTS_1, DocumentValidator.CNPJ_WEIGHTS_2):
            weighted_sum = sum(n * w for n, w in zip(numbers, weights))
            numbers.append(DocumentValidator._check_digit(weighted_sum))

        return f"{numbers[12]}{numbers[13]}"

    @staticmethod
    def validate_cpf(cpf: str) -> bool:
        """
        Valida um CPF em qualquer formato ("11144477735", "111.444.777-35").

        Returns:
            True se tem 11 dígitos, não é sequência repetida e os dois DVs conferem
        """
        cpf = DocumentValidator.clean(cpf)

        if len(cpf) != CPF_LENGTH or DocumentValidator._is_repeated(cpf):
            return False

        return cpf[9:] == DocumentValidator.calculate_cpf_check_digits(cpf[:9])

    @staticmethod
    def validate_cnpj(cnpj: str) -> bool:
        """
        Valida um CNPJ em qualquer formato ("11222333000181", "11.222.333/0001-81").

        Returns:
            True se tem 14 dígitos, não é sequência repetida e os dois DVs conferem
        """
        cnpj = DocumentValidator.clean(cnpj)

        if len(cnpj) != CNPJ_LENGTH or DocumentValidator._is_repeated(cnpj):
            return False

        return cnpj[12:] == DocumentValidator.calculate_cnpj_check_digits(cnpj[:12])

    @staticmethod
    def is_cpf(document: str) -> bool:
        document = DocumentValidator.clean(document)
        return len(document) == CPF_LENGTH and DocumentValidator.validate_cpf(document)

    @staticmethod
    def is_cnpj(document: str) -> bool:
        document = DocumentValidator.clean(document)
        return len(document) == CNPJ_LENGTH and DocumentValidator.validate_cnpj(document)

    @staticmethod
    def format_cpf(cpf: str) -> str:
        """
        Aplica a máscara "XXX.XXX.XXX-XX".

        Se a entrada limpa não tiver 11 dígitos, devolve os dígitos sem máscara.
        O DV não é conferido.

        Example:
            >>> DocumentValidator.format_cpf("11144477735")
            "111.444.777-35"
            >>> DocumentValidator.format_cpf("1114447773")
            "1114447773"
        """
        cpf = DocumentValidator.clean(cpf)
        if len(cpf) != CPF_LENGTH:
            return cpf
        return f"{cpf[0:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:11]}"

    @staticmethod
    def format_cnpj(cnpj: str) -> str:
        """
        Aplica a máscara "XX.XXX.XXX/XXXX-XX".

        Se a entrada limpa não tiver 14 dígitos, devolve os dígitos sem máscara.

        Example:
            >>> DocumentValidator.format_cnpj("11222333000181")
            "11.222.333/0001-81"
        """
        cnpj = DocumentValidator.clean(cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            return cnpj
        return f"{cnpj[0:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:14]}"

    @staticmethod
    def classify(document: str) -> DocumentKind:
        """Identifica o tipo apenas pela quantidade de dígitos (não confere DV)."""
        length = len(DocumentValidator.clean(document))
        if length == CPF_LENGTH:
            return DocumentKind.CPF
        if length == CNPJ_LENGTH:
            return DocumentKind.CNPJ
        return DocumentKind.UNRECOGNIZED

    @staticmethod
    def validate_document(document: str) -> bool:
        """
        Valida um documento detectando automaticamente se é CPF ou CNPJ.

        Args:
            document: String com o documento em qualquer formato

        Returns:
            True se for um CPF ou CNPJ válido. Qualquer outro tamanho → False

        Example:
            >>> DocumentValidator.validate_document("111.444.777-35")
            True
            >>> DocumentValidator.validate_document("11.222.333/0001-81")
            True
            >>> DocumentValidator.validate_document("1234567890")
            False
        """
        document = DocumentValidator.clean(document)
        if len(document) == CPF_LENGTH:
            return DocumentValidator.validate_cpf(document)
        elif len(document) == CNPJ_LENGTH:
            return DocumentValidator.validate_cnpj(document)
        return False

    @staticmethod
    def is_formatted(document: str) -> bool:
        """
        Verifica se o documento já está na máscara oficial com DV correto.

        Example:
            >>> DocumentValidator.is_formatted("111.444.777-35")
            True
            >>> DocumentValidator.is_formatted("11144477735")
            False
            >>> DocumentValidator.is_formatted("111.444.777-36")
            False
        """
        if document is None:
            return False
        kind = DocumentValidator.classify(document)
        if kind == DocumentKind.CPF:
            return document == DocumentValidator.format_cpf(document) and DocumentValidator.validate_cpf(document)
        if kind == DocumentKind.CNPJ:
            return document == DocumentValidator.format_cnpj(document) and DocumentValidator.validate_cnpj(document)
        return False


# Instância compartilhada para uso em toda a aplicação
document_validator = DocumentValidator()

# Atalhos em nível de módulo
clean = DocumentValidator.clean
normalize = DocumentValidator.clean
is_cpf = DocumentValidator.is_cpf
is_cnpj = DocumentValidator.is_cnpj
validate_cpf = DocumentValidator.validate_cpf
validate_cnpj = DocumentValidator.validate_cnpj
validate_document = DocumentValidator.validate_document
format_cpf = DocumentValidator.format_cpf
format_cnpj = DocumentValidator.format_cnpj
classify = DocumentValidator.classify
is_formatted = DocumentValidator.is_formatted
calculate_cpf_check_digits = DocumentValidator.calculate_cpf_check_digits
calculate_cnpj_check_digits = DocumentValidator.calculate_cnpj_check_digits
