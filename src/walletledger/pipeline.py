from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import LedgerConfig, load_config, merge_overrides
from .errors import LedgerError
from .snapshot import load_snapshot
from .summary import summarize_wallet


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Wallet Ledger: balance y movimientos de una wallet")
    parser.add_argument("file", help="Ruta al snapshot JSON (wallets + transactions)")
    parser.add_argument("--wallet", required=True, help="Id de la wallet a resumir")
    parser.add_argument("--out", default="", help="Ruta de salida JSON (opcional)")
    parser.add_argument("--config", default="", help="Configuración JSON (opcional)")
    parser.add_argument("--date-format", default=None, help="Formato strftime de los títulos por día")
    parser.add_argument("--timezone", default=None, help="Zona horaria IANA para agrupar por día")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    snapshot_path = Path(args.file)
    if not snapshot_path.exists():
        raise SystemExit(f"No existe el archivo: {snapshot_path}")

    console = Console(stderr=True)
    console.print(f"Procesando: {snapshot_path}", style="bold")

    try:
        config = load_config(args.config) if args.config else LedgerConfig()
        config = merge_overrides(config, date_format=args.date_format, timezone=args.timezone)
        snapshot = load_snapshot(str(snapshot_path))
        summary = summarize_wallet(snapshot, args.wallet, config)
    except LedgerError as exc:
        raise SystemExit(str(exc)) from exc

    payload = summary.model_dump(mode="json", by_alias=True)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"OK -> {out_path}", style="bold green")
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    console.print(
        f"{summary.wallet.label}: balance={summary.current_balance} "
        f"income={summary.breakdown.income} expenses={summary.breakdown.expenses} "
        f"transacciones={summary.transaction_count}",
        style="bold cyan",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
