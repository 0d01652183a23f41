import pytest

from finance_dashboard.errors import MissingFieldsError
from finance_dashboard.services import run_service


def test_pix_message():
    message = run_service("pix", {"chave_destino": "ana@example.com", "valor": 25.5})
    assert message == "PIX de R$25.5 enviado para ana@example.com com sucesso!"


def test_recharge_message():
    message = run_service("recarga", {"numero": "11999999999", "valor": 20})
    assert message == "Recarga de R$20 para o número 11999999999 realizada com sucesso!"


def test_bill_payment_message():
    message = run_service("pagamento", {"codigo_barras": "23790.50400", "valor": "150"})
    assert message == "Pagamento de R$150 realizado com sucesso para o boleto 23790.50400."


@pytest.mark.parametrize("payload", [None, {}, {"numero": "11"}, {"numero": "11", "valor": 0}, {"numero": "", "valor": 5}])
def test_missing_fields(payload):
    with pytest.raises(MissingFieldsError) as excinfo:
        run_service("recarga", payload)
    assert excinfo.value.message == "É necessário enviar 'numero' e 'valor'."


def test_integral_float_shown_without_decimals():
    message = run_service("pix", {"chave_destino": "a", "valor": 100.0})
    assert message == "PIX de R$100 enviado para a com sucesso!"


@pytest.mark.parametrize("valor, shown", [([], ""), ({}, "[object Object]"), ([10, 5], "10,5"), (True, "true")])
def test_containers_and_booleans_count_as_present(valor, shown):
    message = run_service("pagamento", {"codigo_barras": "123", "valor": valor})
    assert message == f"Pagamento de R${shown} realizado com sucesso para o boleto 123."
