"""HTTP client for the dashboard API and a plain-text rendering of its data.

This is the counterpart of the browser page: it fetches the dashboard and
the transaction list, translates category codes into labels for display and
exposes the quick actions offered to the user.
"""
from typing import Any, Dict, List, Optional

import requests
from loguru import logger
from requests.exceptions import RequestException

from .categories import infer_category, translate_category, translate_spending_pattern
from .errors import ApiUnavailableError
from .formatting import to_display


class FinanceClient:
    """Client for the finance dashboard HTTP API."""

    def __init__(self, base_url: str = "http://localhost:4000", timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[Dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except RequestException as e:
            logger.error(f"Erro ao acessar {url}: {e}")
            raise ApiUnavailableError(f"{method} {url} failed: {e}") from e
        return response.json()

    def get_dashboard(self) -> Dict[str, Any]:
        return self._request("GET", "/dashboard")

    def get_transactions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/transacoes")

    def add_transaction(self, transacao: Dict[str, Any]) -> int:
        """Post a new transaction and return the id the server assigned."""
        return self._request("POST", "/transacoes", transacao)["id"]

    def reset(self) -> str:
        return self._request("POST", "/transacoes/reset")["mensagem"]

    def quick_income(self, valor: float) -> int:
        return self.add_transaction({
            "descricao": f"Entrada rápida +{valor}",
            "valor": float(valor),
            "categoria": "Renda",
        })

    def quick_expense(self, descricao: str, valor: float) -> int:
        """Record an expense; the amount is always stored as negative."""
        return self.add_transaction({
            "descricao": descricao,
            "valor": -abs(float(valor)),
            "categoria": infer_category(descricao),
        })

    def pay_bill(self) -> int:
        return self.add_transaction({
            "descricao": "Pagamento de boleto",
            "valor": -100,
            "categoria": "Serviços",
        })

    def phone_recharge(self) -> int:
        return self.add_transaction({
            "descricao": "Recarga de celular",
            "valor": -20,
            "categoria": "Serviços",
        })


def format_transaction(transacao: Dict[str, Any]) -> str:
    label = translate_category(transacao.get("categoria"))
    valor = transacao.get("valor")
    if isinstance(valor, (int, float)) and not isinstance(valor, bool):
        valor = f"{valor:.2f}"
    return f"{transacao.get('descricao')} ({label}): R$ {valor}"


def render_dashboard(dashboard: Dict[str, Any], transactions: List[Dict[str, Any]]) -> List[str]:
    """Render the dashboard and the transaction list as lines of text."""
    saldo = dashboard["saldo"]
    status = "negativo" if dashboard.get("alerta_saldo") or saldo < 0 else "positivo"
    lines = [
        f"Saldo: R$ {to_display(saldo)} ({status})",
        f"Previsão: {dashboard['previsao_quebra']}",
        translate_spending_pattern(dashboard["padrao_gasto"]),
        "",
    ]
    lines.extend(format_transaction(t) for t in transactions)
    return lines


def load_dashboard(client: FinanceClient) -> List[str]:
    """Fetch both endpoints and render them, or an offline notice on failure."""
    try:
        dashboard = client.get_dashboard()
        transactions = client.get_transactions()
    except ApiUnavailableError as e:
        logger.error(f"Erro fatal ao carregar o dashboard: {e}")
        return ["ERRO: API OFFLINE"]
    return render_dashboard(dashboard, transactions)
