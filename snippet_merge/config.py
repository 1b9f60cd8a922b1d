"""
Configuration for snippet merging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AliasStrategy(str, Enum):
    """What to do with a snippet whose imports use aliases."""

    ERROR = "error"  # Default: refuse to merge
    INSERT_RAW = "insert-raw"  # Insert the snippet as is, imports included


@dataclass
class OutputConfig:
    """Configuration for writing merged files.

    Attributes:
        validate_before_write: Whether to check the merged code parses
        atomic_write: Whether to use atomic file writes
    """

    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class MergeConfig:
    """Configuration options for merging."""

    # Handling of snippets with aliased imports
    alias_strategy: AliasStrategy = AliasStrategy.ERROR

    # Variables available when the snippet is a template
    template_variables: dict[str, str] = field(default_factory=dict)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> MergeConfig:
        """Create a config from a dictionary."""
        config = MergeConfig()
        for k, v in d.items():
            if k == "alias_strategy":
                config.alias_strategy = AliasStrategy(v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(**{ok: ov for ok, ov in v.items() if hasattr(config.output, ok)})
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "alias_strategy": self.alias_strategy.value,
            "template_variables": dict(self.template_variables),
            "output": {
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
