from pydantic import BaseModel


class Dashboard(BaseModel):
    """
    Summary shown on the dashboard: balance, forecast,
    biggest spending category and the negative balance flag.
    """
    saldo: float
    previsao_quebra: str
    padrao_gasto: str
    alerta_saldo: bool


class OperationResult(BaseModel):
    sucesso: bool = True
    mensagem: str


class CreatedTransaction(OperationResult):
    id: int
