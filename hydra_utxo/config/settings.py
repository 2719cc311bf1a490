"""
Default settings for the offline chain. main.py arguments take precedence.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

OFFLINE = "offline"
DIRECT = "direct"
CHAIN_MODES = (OFFLINE, DIRECT)


@dataclass(frozen=True)
class OfflineChainConfig:
    """Chain settings of a node running without a cardano-node."""
    initial_utxo_file: Path
    ledger_genesis_file: Optional[Path] = None


@dataclass
class Settings:
    """Application settings - configure values below"""

    # ===================
    # Chain
    # ===================
    chain_mode: str = OFFLINE  # "offline" or "direct"

    # ===================
    # Offline chain
    # ===================
    initial_utxo_file: str = "utxo.json"
    ledger_genesis_file: Optional[str] = None

    # ===================
    # Logging
    # ===================
    log_level: str = "INFO"

    def __post_init__(self):
        if self.chain_mode not in CHAIN_MODES:
            raise ValueError(f"chain_mode must be one of {CHAIN_MODES}, got {self.chain_mode!r}")

    def offline_chain_config(self) -> Optional[OfflineChainConfig]:
        """Offline chain config, or None when running against a real chain."""
        if self.chain_mode != OFFLINE:
            return None
        return OfflineChainConfig(
            initial_utxo_file=Path(self.initial_utxo_file),
            ledger_genesis_file=Path(self.ledger_genesis_file) if self.ledger_genesis_file else None,
        )


# Global settings instance - import this
settings = Settings()
