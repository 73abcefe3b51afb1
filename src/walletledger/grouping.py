from __future__ import annotations

import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Dict, Iterable, List, Optional

from .config import LedgerConfig
from .models import DateBucket, Transaction


logger = logging.getLogger(__name__)


# Nombres fijos: %B depende del locale del proceso
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def sort_newest_first(transactions: Iterable[Transaction]) -> List[Transaction]:
    """
    Más reciente primero. Empates de paid_at se resuelven por id descendente,
    así el resultado no depende del orden de entrada.
    """
    return sorted(transactions, key=lambda t: (t.paid_at, t.id), reverse=True)


def format_day_label(
    paid_at: datetime,
    date_format: Optional[str] = None,
    timezone: Optional[tzinfo] = None,
) -> str:
    """
    Título del bucket: 'March 5 2024' por defecto (día sin cero a la izquierda,
    mes siempre en inglés).
    - Todos los paid_at se llevan a una misma zona antes de tomar el día:
      la configurada, o UTC si no hay ninguna
    - Un paid_at naive se interpreta como UTC
    - date_format es strftime, así que sí depende del locale
    """
    if paid_at.tzinfo is None:
        paid_at = paid_at.replace(tzinfo=dt_timezone.utc)
    paid_at = paid_at.astimezone(timezone or dt_timezone.utc)

    if date_format:
        return paid_at.strftime(date_format)
    return f"{MONTH_NAMES[paid_at.month - 1]} {paid_at.day} {paid_at.year}"


def group_by_day(
    transactions: Iterable[Transaction],
    config: Optional[LedgerConfig] = None,
) -> List[DateBucket]:
    """
    Agrupa por día (igualdad del título, no solo contigüidad).
    Los buckets salen en orden de primera aparición sobre la secuencia
    descendente, así que el día más reciente va primero.
    """
    config = config or LedgerConfig()
    zone = config.zone

    groups: Dict[str, List[Transaction]] = {}
    for t in sort_newest_first(transactions):
        title = format_day_label(t.paid_at, config.date_format, zone)
        groups.setdefault(title, []).append(t)

    buckets = [DateBucket(title=title, data=data) for title, data in groups.items()]
    logger.debug("buckets=%d", len(buckets))
    return buckets
