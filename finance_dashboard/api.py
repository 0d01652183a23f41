from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Union

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .config import Settings, load_settings
from .dashboard import build_dashboard
from .errors import MissingFieldsError
from .gateway import TransactionGateway
from .ledger import LedgerStore
from .models.responses import CreatedTransaction, Dashboard, OperationResult
from .models.transaction import TransactionIn, transaction_payload
from .services import run_service


def get_store(request: Request) -> LedgerStore:
    return request.app.state.store


def get_gateway(request: Request) -> TransactionGateway:
    return request.app.state.gateway


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. The ledger is loaded at startup and released at shutdown."""
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = LedgerStore(settings.data_file)
        app.state.store = store
        app.state.gateway = TransactionGateway(store)
        logger.info(f"Dados carregados de: {store.data_file} ({len(store)} transações)")
        yield
        app.state.store = None
        app.state.gateway = None
        logger.info("Ledger released")

    app = FastAPI(title="Finance Dashboard API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MissingFieldsError)
    async def missing_fields_handler(request: Request, exc: MissingFieldsError):
        return JSONResponse(status_code=400, content={"erro": exc.message})

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/dashboard", response_model=Dashboard)
    async def get_dashboard(store: LedgerStore = Depends(get_store)):
        return build_dashboard(store.transactions())

    @app.get("/transacoes")
    async def list_transactions(store: LedgerStore = Depends(get_store)) -> List[Dict[str, Any]]:
        return store.transactions()

    @app.post("/transacoes", status_code=201, response_model=CreatedTransaction)
    async def add_transaction(
        transacao: Union[TransactionIn, List[Any], None] = Body(None),
        gateway: TransactionGateway = Depends(get_gateway),
    ):
        new_id = gateway.create(transaction_payload(transacao))
        return CreatedTransaction(mensagem="Transação adicionada com sucesso.", id=new_id)

    @app.post("/transacoes/reset", response_model=OperationResult)
    async def reset_transactions(gateway: TransactionGateway = Depends(get_gateway)):
        gateway.reset_all()
        return OperationResult(mensagem="Todas as transações foram resetadas.")

    @app.post("/servicos/recarga", response_model=OperationResult)
    async def phone_recharge(payload: Optional[Dict[str, Any]] = Body(None)):
        return OperationResult(mensagem=run_service("recarga", payload))

    @app.post("/servicos/pix", response_model=OperationResult)
    async def pix_transfer(payload: Optional[Dict[str, Any]] = Body(None)):
        return OperationResult(mensagem=run_service("pix", payload))

    @app.post("/servicos/pagamento", response_model=OperationResult)
    async def bill_payment(payload: Optional[Dict[str, Any]] = Body(None)):
        return OperationResult(mensagem=run_service("pagamento", payload))

    return app
