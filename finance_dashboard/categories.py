"""Display labels for category codes and keyword-based category inference.

These are two independent classification schemes. ``translate_category``
turns the short code stored with a transaction into a label, while
``infer_category`` guesses a label from a free-text description. They are
not kept in sync with each other nor with the grouping done by the
dashboard.
"""
from typing import Optional

from .dashboard import SPENDING_PATTERN_PREFIX

DEFAULT_LABEL = "Outros"

CATEGORY_LABELS = {
    "pix_envio": "Transferência Enviada",
    "pix_saida": "Transferência Enviada",
    "pix_recebido": "Renda Recebida (PIX)",
    "pix_entrada": "Renda Recebida (PIX)",
    "pagamento": "Pagamento de Contas",
    "recarga": "Serviços/Recarga",
    "alimentacao": "Alimentação",
    "mercado": "Alimentação",
    "transporte": "Transporte",
    "uber": "Transporte",
    "saude": "Saúde",
    "farmácia": "Saúde",
    "renda": "Renda",
    "salário": "Renda",
    "serviços": "Serviços",
}

# Checked in order, first match wins
CATEGORY_KEYWORDS = [
    ("Alimentação", ("mercado", "super", "lanche")),
    ("Transporte", ("uber", "carro", "gasolina", "99")),
    ("Saúde", ("farmácia", "remédio")),
    ("Renda", ("salário", "pagamento")),
    ("Serviços", ("recarga", "celular", "boleto")),
]


def translate_category(code: Optional[str]) -> str:
    """Return the display label for a category code.

    Unknown codes come back with their first letter upper-cased; an empty
    code maps to the default label.
    """
    if not code:
        return DEFAULT_LABEL
    code = str(code)
    label = CATEGORY_LABELS.get(code.lower())
    if label:
        return label
    return code[0].upper() + code[1:]


def infer_category(descricao: str) -> str:
    """Guess a category label from a transaction description."""
    text = (descricao or "").lower()
    for label, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return label
    return DEFAULT_LABEL


def translate_spending_pattern(padrao_gasto: str) -> str:
    """Translate the category inside a "Maior gasto: <code>" message."""
    if not padrao_gasto.startswith(SPENDING_PATTERN_PREFIX):
        return padrao_gasto
    code = padrao_gasto[len(SPENDING_PATTERN_PREFIX):].strip()
    return f"{SPENDING_PATTERN_PREFIX}{translate_category(code)}"
