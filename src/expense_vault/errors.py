from __future__ import annotations


class VaultError(Exception):
    """Base class for ledger errors surfaced to callers."""


class DuplicateIdError(VaultError):
    def __init__(self, tx_id: str):
        super().__init__(f"Transaction id already in ledger: {tx_id}")
        self.tx_id = tx_id


class StorageWriteError(VaultError):
    """
    Persisting the ledger failed.

    The in-memory change that triggered the save is kept; the next
    successful save reconciles the durable copy.
    """


class InvalidEntryError(VaultError, ValueError):
    pass


class PermissionDeniedError(VaultError):
    """The message source refused access (manual-entry-only mode)."""
