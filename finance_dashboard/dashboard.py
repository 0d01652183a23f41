"""Summary figures derived from the ledger on every dashboard read."""
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

from loguru import logger

from .ledger import Record

DEFAULT_CATEGORY = "outros"
SPENDING_PATTERN_PREFIX = "Maior gasto: "

FORECAST_THRESHOLD = 50
FORECAST_ALERT = "ALERTA: Risco de saldo negativo em 7 dias."
FORECAST_HEALTHY = "Saldo saudável. Mantenha o ritmo."


def _amount(record: Record) -> Optional[float]:
    """Return the record's numeric amount, or None when it isn't a number."""
    valor = record.get("valor")
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        logger.warning(f"Ignoring transaction {record.get('id')} with non-numeric valor: {valor!r}")
        return None
    return valor


def _category(record: Record) -> str:
    categoria = record.get("categoria") or DEFAULT_CATEGORY
    return categoria if isinstance(categoria, str) else str(categoria)


def round_cents(value: float) -> float:
    """Round to two decimals, halves away from zero, on the exact binary value."""
    cents = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # -0.0 becomes 0.0
    return float(cents) + 0.0


def calculate_balance(transactions: Iterable[Record]) -> float:
    """Sum every amount in the ledger, rounded to cents."""
    total = 0
    for record in transactions:
        valor = _amount(record)
        if valor is not None:
            total += valor
    return round_cents(total)


def spending_by_category(transactions: Iterable[Record]) -> Dict[str, float]:
    """Total expenses per category, in order of first appearance."""
    totals: Dict[str, float] = {}
    for record in transactions:
        valor = _amount(record)
        if valor is None or valor >= 0:
            continue
        categoria = _category(record)
        totals[categoria] = totals.get(categoria, 0) + valor
    return totals


def calculate_spending_pattern(transactions: Iterable[Record]) -> str:
    """Name the category with the largest total expense.

    Totals are compared as raw negative sums, so the most negative one wins.
    On a tie the category seen first is kept. When nothing was spent the
    default category is reported.
    """
    biggest_category = DEFAULT_CATEGORY
    biggest_total = 0
    for categoria, total in spending_by_category(transactions).items():
        if total < biggest_total:
            biggest_total = total
            biggest_category = categoria
    return f"{SPENDING_PATTERN_PREFIX}{biggest_category}"


def forecast_message(saldo: float) -> str:
    return FORECAST_ALERT if saldo < FORECAST_THRESHOLD else FORECAST_HEALTHY


def build_dashboard(transactions: List[Record]) -> Dict:
    """Compute the dashboard payload for the given ledger."""
    saldo = calculate_balance(transactions)
    return {
        "saldo": saldo,
        "previsao_quebra": forecast_message(saldo),
        "padrao_gasto": calculate_spending_pattern(transactions),
        "alerta_saldo": saldo < 0,
    }
