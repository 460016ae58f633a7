
from typing import Dict, Any
from fastapi import FastAPI, HTTPException, Path, Query
import logging
import uvicorn
import os

from backend.api.services.cpf_service import CPFService, LOG_LEVEL, reject_repeated_from_env

logger = logging.getLogger(__name__)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))

app = FastAPI(title="CPF Validation API", version="1.0.0")

cpf_service = CPFService(reject_repeated=reject_repeated_from_env())


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


######### Validação de CPF (prefixo /api/v1)
@app.get("/api/v1/cpf/{cpf}")
async def validate_cpf_path(cpf: str = Path(..., description="CPF com ou sem pontuação")) -> Dict[str, Any]:
    """
    Valida um CPF informado no caminho.
    Parâmetros:
        cpf (str): CPF a validar
    Retorno:
        dict: veredito da validação
    """
    logger.info(f"Validação de CPF via path: cpf={cpf}")
    return cpf_service.check(cpf)


#########
@app.get("/api/v1/cpf")
async def validate_cpf_query(cpf: str = Query(..., description="CPF com ou sem pontuação")) -> Dict[str, Any]:
    """
    Valida um CPF informado na query string.
    Parâmetros:
        cpf (str): CPF a validar
    Retorno:
        dict: veredito da validação
    """
    logger.info(f"Validação de CPF via query: cpf={cpf}")
    return cpf_service.check(cpf)


#########
@app.post("/api/v1/cpf/validate")
async def validate_cpf_body(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida um CPF enviado no corpo da requisição.
    Parâmetros:
        payload (dict): {"cpf": "..."}
    Retorno:
        dict: veredito da validação
    """
    logger.info(f"Recebendo payload de validação: {payload}")
    cpf = payload.get("cpf")
    if cpf is None:
        logger.warning(f"Payload incompleto: {payload}")
        raise HTTPException(status_code=400, detail="Campo obrigatório: cpf")
    if not isinstance(cpf, str):
        logger.warning(f"cpf não é string: cpf={cpf!r}")
        raise HTTPException(status_code=400, detail="cpf deve ser string")
    result = cpf_service.check(cpf)
    logger.info(f"Validação processada: retorno={result}")
    return result


######### ------------------------------ #########
if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
