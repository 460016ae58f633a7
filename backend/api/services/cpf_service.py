"""
Serviço de validação de CPF: encapsula a chamada ao validador, os logs e o formato da resposta.
Facilita testes e reuso por qualquer transporte (HTTP, console).
"""
from typing import Dict, Any
import logging
import os
from backend.utils.cpf_utils import CPFUtils



def log_level_from_env() -> str:
    """
    Lê LOG_LEVEL do ambiente.
    Retorno:
        str: nome do nível; INFO quando o valor não é um nível conhecido
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


LOG_LEVEL = log_level_from_env()


def reject_repeated_from_env() -> bool:
    """
    Lê CPF_REJECT_REPEATED do ambiente.
    Retorno:
        bool: False apenas para 'false', '0' ou 'no'
    """
    value = os.getenv("CPF_REJECT_REPEATED", "true").strip().lower()
    return value not in ("false", "0", "no")


class CPFService:
    def __init__(self, reject_repeated: bool = True, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            reject_repeated (bool): rejeita CPFs com todos os dígitos iguais
            logger (logging.Logger, opcional): Logger para logs
        """
        self.reject_repeated = reject_repeated
        if logger is None:
            logger = logging.getLogger("cpf_service")
            logger.setLevel(LOG_LEVEL)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def check(self, cpf: Any) -> Dict[str, Any]:
        """
        Valida o CPF e monta a resposta. CPF inválido não é erro: vira veredito.
        Parâmetros:
            cpf (str): CPF recebido do chamador
        Retorno:
            dict: {"valid": True, ...} ou {"valid": False, "reason": ...}
        """
        verdict = CPFUtils.validate(cpf, reject_repeated=self.reject_repeated)
        if verdict.valid:
            result = {"valid": True, "cpf": verdict.cpf, "formatted": CPFUtils.format_cpf(verdict.cpf)}
            self.logger.info(f"CPF válido: cpf={verdict.cpf}")
        else:
            result = {"valid": False, "reason": verdict.reason, "cpf": verdict.cpf}
            self.logger.warning(f"CPF rejeitado: cpf={cpf!r}, motivo={verdict.reason}")
        return result
