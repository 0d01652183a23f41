"""Simulated banking services.

None of these move money or touch the ledger: they check that the two
required fields were sent and format a confirmation message.
"""
from typing import Any, Dict, Optional

from loguru import logger

from .errors import MissingFieldsError
from .formatting import is_truthy, to_display

SERVICES = {
    "recarga": (
        ("numero", "valor"),
        "Recarga de R${valor} para o número {numero} realizada com sucesso!",
    ),
    "pix": (
        ("chave_destino", "valor"),
        "PIX de R${valor} enviado para {chave_destino} com sucesso!",
    ),
    "pagamento": (
        ("codigo_barras", "valor"),
        "Pagamento de R${valor} realizado com sucesso para o boleto {codigo_barras}.",
    ),
}


def run_service(service: str, payload: Optional[Dict[str, Any]]) -> str:
    """Validate a service request and return its confirmation message."""
    required, template = SERVICES[service]
    payload = payload or {}
    if any(not is_truthy(payload.get(field)) for field in required):
        logger.warning(f"Rejected {service} request: missing {required}")
        raise MissingFieldsError(required)

    message = template.format(**{field: to_display(payload[field]) for field in required})
    logger.info(f"Simulated {service}: {message}")
    return message
