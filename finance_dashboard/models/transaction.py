from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class TransactionIn(BaseModel):
    """
    A transaction as sent by the client, before an id is assigned.
    Fields are not type-checked and unknown fields are kept.
    """
    model_config = ConfigDict(extra="allow")

    descricao: Any = None
    valor: Any = None
    categoria: Optional[Any] = None


def transaction_payload(body: Union[TransactionIn, List[Any], None]) -> Dict[str, Any]:
    """Turn a request body into the fields of a new record.

    Array bodies are spread into index-keyed fields ("0", "1", ...), the way
    the browser client's object spread treats them.
    """
    if body is None:
        return {}
    if isinstance(body, list):
        return {str(index): item for index, item in enumerate(body)}
    return body.model_dump(exclude_unset=True)
