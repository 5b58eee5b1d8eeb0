"""
Open Assets Protocol Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import List, Optional

from oap.constants import MAX_OP_RETURN_RELAY
from oap.core.types import Network

logger = logging.getLogger(__name__)


@dataclass
class CodecConfig:
    """Codec defaults."""
    network: str = Network.MAINNET.value
    max_op_return_size: int = MAX_OP_RETURN_RELAY

    @property
    def default_network(self) -> Network:
        return Network.from_name(self.network)

    def accepts(self, data: bytes) -> bool:
        """Check pushed data against the relay size limit."""
        return len(data) <= self.max_op_return_size


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class OAPConfig:
    """
    Complete library configuration.
    """
    codec: CodecConfig = field(default_factory=CodecConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            Network.from_name(self.codec.network)
        except ValueError:
            errors.append(f"Unknown network: {self.codec.network}")

        if self.codec.max_op_return_size < 0:
            errors.append("max_op_return_size cannot be negative")

        if not isinstance(logging.getLevelName(self.log.level.upper()), int):
            errors.append(f"Unknown log level: {self.log.level}")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "OAPConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls()

        if "codec" in data:
            config.codec = CodecConfig(**data["codec"])

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    @classmethod
    def default_testnet(cls) -> "OAPConfig":
        """Create default testnet configuration."""
        return cls(codec=CodecConfig(network=Network.TESTNET.value))

    @classmethod
    def default_mainnet(cls) -> "OAPConfig":
        """Create default mainnet configuration."""
        return cls(codec=CodecConfig(network=Network.MAINNET.value))

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "codec": asdict(self.codec),
            "log": asdict(self.log),
        }


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
