"""
Propiedades del ledger con Hypothesis: invariante de balance, no negatividad,
filtro correcto, agrupado completo y orden.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from hypothesis import given
from hypothesis import strategies as st

from walletledger.aggregate import compute_breakdown, current_balance
from walletledger.grouping import group_by_day
from walletledger.models import Transaction, Wallet
from walletledger.selection import involves_wallet, select_wallet_transactions


WALLET_IDS = ["A", "B", "C"]

amount_strategy = st.floats(
    min_value=-1_000_000.0, max_value=1_000_000.0, allow_infinity=False, allow_nan=False
).map(lambda x: round(x, 2))

# naive (se lee como UTC) o con offsets fijos distintos
paid_at_strategy = st.datetimes(
    min_value=datetime(2020, 1, 1),
    max_value=datetime(2025, 12, 31),
    timezones=st.sampled_from(
        [None, timezone.utc, timezone(timedelta(hours=-5)), timezone(timedelta(hours=9, minutes=30))]
    ),
)


def _utc_day(t: Transaction):
    return t.paid_at.astimezone(timezone.utc).date()


@st.composite
def transaction_store(draw):
    n = draw(st.integers(min_value=0, max_value=30))
    store = {}
    for i in range(n):
        src = draw(st.sampled_from(WALLET_IDS))
        dst = draw(st.one_of(st.none(), st.sampled_from(WALLET_IDS)))
        tx = Transaction(
            id=f"t{i:03d}",
            source_wallet_id=src,
            destination_wallet_id=dst,
            amount=draw(amount_strategy),
            paid_at=draw(paid_at_strategy),
        )
        store[tx.id] = tx
    return store


@given(store=transaction_store(), wallet_id=st.sampled_from(WALLET_IDS), initial=amount_strategy)
def test_balance_invariant_and_non_negative(store, wallet_id, initial):
    wallet = Wallet(id=wallet_id, label=wallet_id, initial_amount=initial)
    breakdown = compute_breakdown(select_wallet_transactions(store, wallet_id), wallet_id)

    assert breakdown.income >= 0
    assert breakdown.expenses >= 0
    assert current_balance(wallet, breakdown) == wallet.initial_amount + breakdown.income - breakdown.expenses


@given(store=transaction_store(), wallet_id=st.sampled_from(WALLET_IDS))
def test_filter_soundness(store, wallet_id):
    selected = select_wallet_transactions(store, wallet_id)
    selected_ids = [t.id for t in selected]

    assert all(involves_wallet(t, wallet_id) for t in selected)
    assert len(selected_ids) == len(set(selected_ids))
    expected = {t.id for t in store.values() if involves_wallet(t, wallet_id)}
    assert set(selected_ids) == expected


@given(store=transaction_store(), wallet_id=st.sampled_from(WALLET_IDS))
def test_grouping_complete_and_ordered(store, wallet_id):
    selected = select_wallet_transactions(store, wallet_id)
    buckets = group_by_day(selected)

    grouped_ids = [t.id for b in buckets for t in b.data]
    assert sorted(grouped_ids) == sorted(t.id for t in selected)

    days = [_utc_day(b.data[0]) for b in buckets]
    assert days == sorted(days, reverse=True)
    assert len(set(days)) == len(days)

    for b in buckets:
        assert all(_utc_day(t) == _utc_day(b.data[0]) for t in b.data)
        times = [t.paid_at for t in b.data]
        assert times == sorted(times, reverse=True)
