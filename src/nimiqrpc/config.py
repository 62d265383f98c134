"""
Client configuration.

Settings come from constructor arguments or from the environment.  An
optional ``~/.nimiqrpc/.env`` file is loaded first, so credentials can
live outside the shell profile:

    NIMIQ_RPC_URL=http://127.0.0.1:8648
    NIMIQ_RPC_USERNAME=alice
    NIMIQ_RPC_PASSWORD=secret
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
NIMIQRPC_DIR = Path.home() / ".nimiqrpc"
NIMIQRPC_ENV = NIMIQRPC_DIR / ".env"

DEFAULT_RPC_URL = "http://127.0.0.1:8648"

# Seconds
DEFAULT_TIMEOUT = 30.0
POOL_TIMEOUT = 8.0
KEEPALIVE_EXPIRY = 60.0
MAX_CONNECTIONS = 100


@dataclass(frozen=True)
class ClientConfig:
    address: str = DEFAULT_RPC_URL
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and self.password is not None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "ClientConfig":
        """
        Build a config from the environment.

        Args:
            env_path: Path to .env file (default: ~/.nimiqrpc/.env)

        Returns:
            ClientConfig with values from NIMIQ_RPC_URL, NIMIQ_RPC_USERNAME,
            NIMIQ_RPC_PASSWORD and NIMIQ_RPC_TIMEOUT
        """
        env_path = env_path or NIMIQRPC_ENV
        if env_path.exists():
            load_dotenv(env_path, override=False)

        timeout = os.environ.get("NIMIQ_RPC_TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValueError(f"NIMIQ_RPC_TIMEOUT must be a number, got {timeout!r}") from exc

        return cls(
            address=os.environ.get("NIMIQ_RPC_URL", DEFAULT_RPC_URL),
            username=os.environ.get("NIMIQ_RPC_USERNAME") or None,
            password=os.environ.get("NIMIQ_RPC_PASSWORD"),
            timeout=timeout_value,
        )
