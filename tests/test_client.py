from typing import Any, Dict, List

import pytest
import requests

from finance_dashboard.client import FinanceClient, load_dashboard, render_dashboard
from finance_dashboard.errors import ApiUnavailableError


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


@pytest.fixture
def calls(monkeypatch) -> List[Dict[str, Any]]:
    """Record outgoing requests and answer them with canned payloads."""
    recorded: List[Dict[str, Any]] = []
    replies = {
        ("GET", "/dashboard"): {
            "saldo": -20.0,
            "previsao_quebra": "ALERTA: Risco de saldo negativo em 7 dias.",
            "padrao_gasto": "Maior gasto: transporte",
            "alerta_saldo": True,
        },
        ("GET", "/transacoes"): [
            {"id": 2, "descricao": "Uber", "valor": -50, "categoria": "transporte"},
            {"id": 1, "descricao": "Pix", "valor": 30},
        ],
        ("POST", "/transacoes"): {"sucesso": True, "mensagem": "ok", "id": 42},
        ("POST", "/transacoes/reset"): {"sucesso": True, "mensagem": "Todas as transações foram resetadas."},
    }

    def fake_request(method, url, json=None, timeout=None):
        path = url.replace("http://api.test", "")
        recorded.append({"method": method, "path": path, "json": json})
        return FakeResponse(replies[(method, path)])

    monkeypatch.setattr(requests, "request", fake_request)
    return recorded


def test_quick_expense_is_negative_with_inferred_category(calls):
    client = FinanceClient("http://api.test/")

    assert client.quick_expense("Gasolina posto", 80) == 42
    assert calls[-1] == {
        "method": "POST",
        "path": "/transacoes",
        "json": {"descricao": "Gasolina posto", "valor": -80.0, "categoria": "Transporte"},
    }


def test_quick_income(calls):
    FinanceClient("http://api.test").quick_income(50)
    assert calls[-1]["json"] == {"descricao": "Entrada rápida +50", "valor": 50.0, "categoria": "Renda"}


def test_bill_and_recharge_shortcuts(calls):
    client = FinanceClient("http://api.test")
    client.pay_bill()
    client.phone_recharge()

    assert [c["json"]["valor"] for c in calls] == [-100, -20]
    assert {c["json"]["categoria"] for c in calls} == {"Serviços"}


def test_reset(calls):
    assert FinanceClient("http://api.test").reset() == "Todas as transações foram resetadas."
    assert calls == [{"method": "POST", "path": "/transacoes/reset", "json": None}]


def test_load_dashboard_renders_translated_labels(calls):
    lines = load_dashboard(FinanceClient("http://api.test"))

    assert lines == [
        "Saldo: R$ -20 (negativo)",
        "Previsão: ALERTA: Risco de saldo negativo em 7 dias.",
        "Maior gasto: Transporte",
        "",
        "Uber (Transporte): R$ -50.00",
        "Pix (Outros): R$ 30.00",
    ]


def test_render_positive_balance():
    dashboard = {
        "saldo": 120.5,
        "previsao_quebra": "Saldo saudável. Mantenha o ritmo.",
        "padrao_gasto": "Maior gasto: outros",
        "alerta_saldo": False,
    }
    assert render_dashboard(dashboard, [])[0] == "Saldo: R$ 120.5 (positivo)"


def test_offline_api(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "request", refuse)
    client = FinanceClient("http://api.test")

    with pytest.raises(ApiUnavailableError):
        client.get_dashboard()
    assert load_dashboard(client) == ["ERRO: API OFFLINE"]
