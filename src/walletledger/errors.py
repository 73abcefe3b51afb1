from __future__ import annotations


class LedgerError(Exception):
    """Base de los errores de la capa de carga/resumen. El core puro no lanza."""


class UnknownWalletError(LedgerError, KeyError):
    def __init__(self, wallet_id: str, context: str = ""):
        self.wallet_id = wallet_id
        self.context = context
        msg = f"Wallet desconocida: {wallet_id}"
        if context:
            msg += f" ({context})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError pone comillas alrededor del mensaje
        return self.args[0]


class SnapshotError(LedgerError, ValueError):
    pass


class ConfigError(LedgerError, ValueError):
    pass
