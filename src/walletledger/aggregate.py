from __future__ import annotations

from typing import Iterable, Tuple

from .models import BalanceBreakdown, Transaction, Wallet
from .selection import TransactionStore, select_wallet_transactions


def _contribution(transaction: Transaction, wallet_id: str) -> Tuple[float, float]:
    """
    Devuelve (income, expenses) que aporta una transacción a la wallet.

    El amount se registra desde la perspectiva de la wallet origen, así que
    si la wallet es el destino de una transferencia el signo se invierte.
    """
    amount = transaction.amount

    if transaction.destination_wallet_id == wallet_id:
        # transferencia entrante: cálculo invertido
        if amount < 0:
            return abs(amount), 0.0
        if amount > 0:
            return 0.0, abs(amount)
    else:
        # origen (transferencia o transacción normal)
        if amount > 0:
            return abs(amount), 0.0
        if amount < 0:
            return 0.0, abs(amount)

    # cero (o NaN): no aporta nada
    return 0.0, 0.0


def compute_breakdown(transactions: Iterable[Transaction], wallet_id: str) -> BalanceBreakdown:
    """
    Reduce las transacciones (ya filtradas) a income/expenses.
    Los acumuladores solo crecen; el orden no afecta el resultado.
    """
    income = 0.0
    expenses = 0.0
    for t in transactions:
        inc, exp = _contribution(t, wallet_id)
        income += inc
        expenses += exp
    return BalanceBreakdown(income=income, expenses=expenses)


def current_balance(wallet: Wallet, breakdown: BalanceBreakdown) -> float:
    return wallet.initial_amount + breakdown.income - breakdown.expenses


def wallet_balance(wallet: Wallet, transactions: TransactionStore) -> Tuple[BalanceBreakdown, float]:
    """Filtra + reduce + balance. Se recalcula en cada llamada, sin cache."""
    selected = select_wallet_transactions(transactions, wallet.id)
    breakdown = compute_breakdown(selected, wallet.id)
    return breakdown, current_balance(wallet, breakdown)
