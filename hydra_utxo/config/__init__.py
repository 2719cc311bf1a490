from .settings import DIRECT, OFFLINE, OfflineChainConfig, Settings, settings

__all__ = ["DIRECT", "OFFLINE", "OfflineChainConfig", "Settings", "settings"]
