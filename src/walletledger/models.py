from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Frozen(BaseModel):
    # Los stores son snapshots: nadie muta lo que recibe
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Transaction(_Frozen):
    id: str
    source_wallet_id: str = Field(..., alias="sourceWalletId")
    destination_wallet_id: Optional[str] = Field(
        None,
        alias="destinationWalletId",
        description="Solo presente en transferencias",
    )
    amount: float = Field(
        ...,
        description="Signed amount, desde la perspectiva de la wallet origen. Positive=inflow, Negative=outflow",
    )
    category: str = ""
    paid_at: datetime = Field(..., alias="paidAt")

    @field_validator("paid_at")
    @classmethod
    def _aware_paid_at(cls, v: datetime) -> datetime:
        # Sin tz se asume UTC: todos los paid_at deben poder compararse
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_transfer(self) -> bool:
        return self.destination_wallet_id is not None


class Wallet(_Frozen):
    id: str
    label: str
    initial_amount: float = Field(..., alias="initialAmount")


class BalanceBreakdown(_Frozen):
    income: float = Field(0.0, description="Nunca negativo")
    expenses: float = Field(0.0, description="Nunca negativo")

    @property
    def net(self) -> float:
        return self.income - self.expenses


class DateBucket(_Frozen):
    title: str
    data: List[Transaction] = Field(default_factory=list)


class TransactionRow(_Frozen):
    transaction: Transaction
    source_wallet_label: str = Field(..., alias="sourceWalletLabel")
    destination_wallet_label: Optional[str] = Field(None, alias="destinationWalletLabel")


class RowBucket(_Frozen):
    title: str
    data: List[TransactionRow] = Field(default_factory=list)


class WalletSummary(_Frozen):
    wallet: Wallet
    breakdown: BalanceBreakdown
    current_balance: float = Field(..., alias="currentBalance")
    transaction_count: int = Field(0, alias="transactionCount")
    sections: List[RowBucket] = Field(default_factory=list)


class LedgerSnapshot(_Frozen):
    wallets: Dict[str, Wallet] = Field(default_factory=dict)
    transactions: Dict[str, Transaction] = Field(default_factory=dict)
