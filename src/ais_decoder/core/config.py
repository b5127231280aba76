"""
Configuration management for the AIS decoder.

Handles receiver identity, output settings, and persistence.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

MAX_MMSI = (1 << 30) - 1
OUTPUT_FORMATS = ("text", "json", "delta")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(ValueError):
    """Raised when configuration values are invalid."""

    pass


@dataclass(frozen=True)
class ReceiverConfig:
    """Configuration for a receiving session.

    Frozen so the own identity cannot change while a session runs.
    """

    own_mmsi: Optional[int] = None  # Local station, used to tag "vessels.self"
    source_label: str = "AIS"
    skip_continuation_fragments: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration fields."""
        if self.own_mmsi is not None:
            if isinstance(self.own_mmsi, bool) or not isinstance(self.own_mmsi, int):
                raise ConfigValidationError(
                    f"own_mmsi must be an integer, got {self.own_mmsi!r}"
                )
            if not (0 <= self.own_mmsi <= MAX_MMSI):
                raise ConfigValidationError(
                    f"own_mmsi must be between 0 and {MAX_MMSI}, got {self.own_mmsi}"
                )
        if not self.source_label:
            raise ConfigValidationError("source_label must not be empty")


@dataclass
class OutputConfig:
    """Configuration for printing decoded messages."""

    format: str = "text"  # "text", "json", or "delta"
    include_failures: bool = False
    indent: int = 2

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration fields."""
        if self.format not in OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"format must be one of {OUTPUT_FORMATS}, got {self.format}"
            )
        if self.indent < 0:
            raise ConfigValidationError(
                f"indent must be non-negative, got {self.indent}"
            )


@dataclass
class AISConfig:
    """Main configuration container."""

    receiver: ReceiverConfig = field(default_factory=ReceiverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level}"
            )
        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AISConfig":
        """Create configuration from dictionary."""
        config = cls(log_level=data.get("log_level", "WARNING"))

        if "receiver" in data:
            config.receiver = ReceiverConfig(**data["receiver"])

        if "output" in data:
            config.output = OutputConfig(**data["output"])

        return config

    def with_own_mmsi(self, own_mmsi: Optional[int]) -> "AISConfig":
        """Return a copy with a different own MMSI."""
        receiver = ReceiverConfig(
            own_mmsi=own_mmsi,
            source_label=self.receiver.source_label,
            skip_continuation_fragments=self.receiver.skip_continuation_fragments,
        )
        return AISConfig(receiver=receiver, output=self.output, log_level=self.log_level)

    def save(self, path: str) -> bool:
        """Save configuration to JSON file.

        Args:
            path: File path to save configuration to

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            with open(path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize configuration: {e}")
            return False

    @classmethod
    def load(cls, path: str) -> Optional["AISConfig"]:
        """Load configuration from JSON file.

        Args:
            path: File path to load configuration from

        Returns:
            AISConfig instance or None if loading failed
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
            config = cls.from_dict(data)
            logger.info(f"Configuration loaded from {path}")
            return config
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {path}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file {path}: {e}")
            return None
        except OSError as e:
            logger.error(f"Failed to read configuration from {path}: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid configuration format in {path}: {e}")
            return None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get default configuration file path."""
        config_dir = Path.home() / ".config" / "ais_decoder"
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "config.json"

    @classmethod
    def load_default(cls) -> "AISConfig":
        """Load from default configuration path, or create new if not found or invalid."""
        path = cls.get_default_config_path()
        if path.exists():
            config = cls.load(str(path))
            if config is not None:
                return config
            logger.warning("Using default configuration due to load failure")
        return cls()
