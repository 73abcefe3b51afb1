from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Union

from .models import Transaction


logger = logging.getLogger(__name__)

TransactionStore = Union[Mapping[str, Transaction], Iterable[Transaction]]


def involves_wallet(transaction: Transaction, wallet_id: str) -> bool:
    return (
        transaction.source_wallet_id == wallet_id
        or transaction.destination_wallet_id == wallet_id
    )


def select_wallet_transactions(transactions: TransactionStore, wallet_id: str) -> List[Transaction]:
    """
    Transacciones donde la wallet es origen o destino.
    - Acepta el store id -> Transaction o cualquier iterable de Transaction
    - No garantiza orden (se ordena después, en grouping)
    - Vacío si no hay coincidencias, nunca error
    """
    items = transactions.values() if isinstance(transactions, Mapping) else transactions
    out = [t for t in items if involves_wallet(t, wallet_id)]
    logger.debug("wallet=%s transacciones seleccionadas=%d", wallet_id, len(out))
    return out
