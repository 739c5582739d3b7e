"""Configuration for metric computation and complexity ratings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigError
from .defaults import DEFAULT_LANGUAGE


@dataclass
class ComplexityThresholds:
    """Thresholds for cyclomatic complexity ratings."""

    cyclomatic_low: int = 4  # Low complexity
    cyclomatic_moderate: int = 10  # Moderate
    cyclomatic_high: int = 20  # High (needs attention)
    # Very high: 21+

    def __post_init__(self) -> None:
        if not (
            1 <= self.cyclomatic_low <= self.cyclomatic_moderate <= self.cyclomatic_high
        ):
            raise ConfigError(
                "Complexity thresholds must satisfy 1 <= low <= moderate <= high",
                asdict(self),
            )


@dataclass
class MetricsConfig:
    """Complete metrics configuration."""

    # Prefix stripped from source paths by FileTypeIndex
    common_path_prefix: str = ""

    # Tokenizer language when a source file extension is not recognised
    default_language: str = DEFAULT_LANGUAGE

    complexity: ComplexityThresholds = field(default_factory=ComplexityThresholds)

    @classmethod
    def load(cls, path: Path) -> MetricsConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            MetricsConfig instance (defaults if the file does not exist)

        Raises:
            ConfigError: If the file is not valid YAML or has unknown keys
        """
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {path}: {e}", {"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {path}", {"path": str(path)})

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetricsConfig:
        """Create config from dictionary.

        Raises:
            ConfigError: On unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys: {sorted(unknown)}",
                {"keys": sorted(unknown)},
            )

        complexity_data = data.get("complexity") or {}
        known_thresholds = {f.name for f in fields(ComplexityThresholds)}
        unknown = set(complexity_data) - known_thresholds
        if unknown:
            raise ConfigError(
                f"Unknown complexity keys: {sorted(unknown)}",
                {"keys": sorted(unknown)},
            )

        return cls(
            common_path_prefix=data.get("common_path_prefix", ""),
            default_language=data.get("default_language", DEFAULT_LANGUAGE),
            complexity=ComplexityThresholds(**complexity_data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def get_rating(self, ccn: int) -> str:
        """Rate a cyclomatic complexity number.

        Returns:
            One of "low", "moderate", "high", "very_high"
        """
        if ccn <= self.complexity.cyclomatic_low:
            return "low"
        elif ccn <= self.complexity.cyclomatic_moderate:
            return "moderate"
        elif ccn <= self.complexity.cyclomatic_high:
            return "high"
        else:
            return "very_high"
