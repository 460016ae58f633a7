"""
Módulo utilitário para validação e normalização de CPF.
Funções puras: a mesma entrada sempre produz o mesmo veredito.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

CPF_LENGTH = 11
_SEPARATORS = re.compile(r'[.\-]')
_DIGITS_11 = re.compile(r'[0-9]{11}')
_DIGITS_9 = re.compile(r'[0-9]{9}')


class CPFStatus(Enum):
    VALID = "valid"
    INVALID_FORMAT = "invalid-format"
    INVALID_CHECKSUM = "invalid-checksum"


@dataclass(frozen=True)
class CPFVerdict:
    """
    Resultado de uma validação de CPF.
    Atributos:
        status (CPFStatus): veredito
        cpf (str): CPF normalizado (pode conter lixo se o formato for inválido)
    """
    status: CPFStatus
    cpf: str

    @property
    def valid(self) -> bool:
        return self.status is CPFStatus.VALID

    @property
    def reason(self) -> Optional[str]:
        if self.valid:
            return None
        return self.status.value


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: Any) -> str:
        """
        Remove os separadores '.' e '-' do CPF.
        Outros caracteres são mantidos para que a checagem de formato os rejeite.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF sem separadores
        Exemplo: '123.456.789-09' -> '12345678909'
        """
        if not isinstance(cpf, str):
            return ""
        return _SEPARATORS.sub('', cpf.strip())

    @staticmethod
    def _check_digit(digits: str) -> int:
        # pesos decrescentes terminando em 2: 10..2 para 9 dígitos, 11..2 para 10
        weight = len(digits) + 1
        soma = sum(int(d) * (weight - i) for i, d in enumerate(digits))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @staticmethod
    def compute_check_digits(base: str) -> str:
        """
        Calcula os dois dígitos verificadores de uma base de 9 dígitos.
        Parâmetros:
            base (str): 9 primeiros dígitos do CPF
        Retorno:
            str: os dois dígitos verificadores
        """
        if not isinstance(base, str) or not _DIGITS_9.fullmatch(base):
            raise ValueError(f"Base de CPF deve ter 9 dígitos: {base!r}")
        d1 = CPFUtils._check_digit(base)
        d2 = CPFUtils._check_digit(base + str(d1))
        return f"{d1}{d2}"

    @staticmethod
    def validate(cpf: Any, reject_repeated: bool = True) -> CPFVerdict:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF com ou sem separadores
            reject_repeated (bool): rejeita CPFs com todos os dígitos iguais
        Retorno:
            CPFVerdict: veredito (válido, formato inválido ou dígitos inválidos)
        """
        cpf_norm = CPFUtils.normalize_cpf(cpf)
        if not _DIGITS_11.fullmatch(cpf_norm):
            return CPFVerdict(CPFStatus.INVALID_FORMAT, cpf_norm)
        # Sequências repetidas satisfazem as somas, mas não são CPFs emitidos
        if reject_repeated and cpf_norm == cpf_norm[0] * CPF_LENGTH:
            return CPFVerdict(CPFStatus.INVALID_CHECKSUM, cpf_norm)
        if CPFUtils.compute_check_digits(cpf_norm[:9]) != cpf_norm[9:]:
            return CPFVerdict(CPFStatus.INVALID_CHECKSUM, cpf_norm)
        return CPFVerdict(CPFStatus.VALID, cpf_norm)

    @staticmethod
    def is_valid_cpf(cpf: Any) -> bool:
        return CPFUtils.validate(cpf).valid

    @staticmethod
    def format_cpf(cpf: Any) -> str:
        """Aplica a máscara XXX.XXX.XXX-XX quando o CPF tem 11 dígitos."""
        cpf_norm = CPFUtils.normalize_cpf(cpf)
        if not _DIGITS_11.fullmatch(cpf_norm):
            return cpf_norm
        return f"{cpf_norm[:3]}.{cpf_norm[3:6]}.{cpf_norm[6:9]}-{cpf_norm[9:]}"
