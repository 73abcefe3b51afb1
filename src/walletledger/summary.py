from __future__ import annotations

from typing import Mapping, Optional

from .aggregate import compute_breakdown, current_balance
from .config import LedgerConfig
from .errors import UnknownWalletError
from .grouping import group_by_day
from .models import LedgerSnapshot, RowBucket, Transaction, TransactionRow, Wallet, WalletSummary
from .selection import select_wallet_transactions


def _wallet_label(wallets: Mapping[str, Wallet], wallet_id: str, transaction: Transaction) -> str:
    try:
        return wallets[wallet_id].label
    except KeyError:
        raise UnknownWalletError(wallet_id, f"referenciada por la transacción {transaction.id}") from None


def _to_row(transaction: Transaction, wallets: Mapping[str, Wallet]) -> TransactionRow:
    destination = None
    if transaction.destination_wallet_id is not None:
        destination = _wallet_label(wallets, transaction.destination_wallet_id, transaction)

    return TransactionRow(
        transaction=transaction,
        source_wallet_label=_wallet_label(wallets, transaction.source_wallet_id, transaction),
        destination_wallet_label=destination,
    )


def summarize_wallet(
    snapshot: LedgerSnapshot,
    wallet_id: str,
    config: Optional[LedgerConfig] = None,
) -> WalletSummary:
    """
    Todo lo que muestra el detalle de una wallet:
    - balance actual + desglose income/expenses
    - cantidad de transacciones
    - historial agrupado por día con los labels de origen/destino resueltos

    Filtra una sola vez; agregado y agrupado son vistas independientes
    sobre el mismo conjunto.
    """
    wallet = snapshot.wallets.get(wallet_id)
    if wallet is None:
        raise UnknownWalletError(wallet_id)

    selected = select_wallet_transactions(snapshot.transactions, wallet.id)

    breakdown = compute_breakdown(selected, wallet.id)
    balance = current_balance(wallet, breakdown)

    sections = [
        RowBucket(
            title=bucket.title,
            data=[_to_row(t, snapshot.wallets) for t in bucket.data],
        )
        for bucket in group_by_day(selected, config)
    ]

    return WalletSummary(
        wallet=wallet,
        breakdown=breakdown,
        current_balance=balance,
        transaction_count=len(selected),
        sections=sections,
    )
