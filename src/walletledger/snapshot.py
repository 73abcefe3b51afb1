from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from .errors import SnapshotError
from .models import LedgerSnapshot


logger = logging.getLogger(__name__)

RawStore = Union[Dict[str, Dict[str, Any]], List[Dict[str, Any]]]


def _keyed_by_id(raw: RawStore, kind: str) -> Dict[str, Dict[str, Any]]:
    """
    Normaliza el store a {id: item}:
    - lista => se indexa por el 'id' de cada item
    - dict  => la clave es el id (si el item trae 'id', debe coincidir)
    """
    out: Dict[str, Dict[str, Any]] = {}

    if isinstance(raw, list):
        for i, item in enumerate(raw):
            if not isinstance(item, dict) or "id" not in item:
                raise SnapshotError(f"{kind}[{i}] no tiene 'id'")
            key = str(item["id"])
            if key in out:
                raise SnapshotError(f"{kind}: id duplicado {key}")
            out[key] = {**item, "id": key}
        return out

    if isinstance(raw, dict):
        for key, item in raw.items():
            if not isinstance(item, dict):
                raise SnapshotError(f"{kind}[{key}] no es un objeto")
            if "id" in item and str(item["id"]) != key:
                raise SnapshotError(f"{kind}[{key}] tiene id distinto: {item['id']}")
            out[key] = {**item, "id": key}
        return out

    raise SnapshotError(f"'{kind}' debe ser una lista o un objeto")


def parse_snapshot(data: Dict[str, Any]) -> LedgerSnapshot:
    if not isinstance(data, dict):
        raise SnapshotError("El snapshot debe ser un objeto JSON")

    payload = {
        "wallets": _keyed_by_id(data.get("wallets", {}), "wallets"),
        "transactions": _keyed_by_id(data.get("transactions", {}), "transactions"),
    }
    try:
        return LedgerSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise SnapshotError(f"Snapshot inválido: {exc}") from exc


def load_snapshot(path: str) -> LedgerSnapshot:
    """
    Lee un snapshot JSON:
      {
        "wallets": {"w1": {"label": "Cash", "initialAmount": 100}},
        "transactions": [{"id": "t1", "sourceWalletId": "w1", "amount": -20, "paidAt": "..."}]
      }
    Solo lectura.
    """
    p = Path(path)
    if not p.exists():
        raise SnapshotError(f"No existe el archivo: {p}")

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"JSON inválido: {p}: {exc}") from exc

    snapshot = parse_snapshot(data)
    logger.info(
        "snapshot %s: wallets=%d transacciones=%d",
        p,
        len(snapshot.wallets),
        len(snapshot.transactions),
    )
    return snapshot
