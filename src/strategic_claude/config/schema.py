"""Configuration schema for the strategic-claude CLI."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


def _optional_str(value: Any) -> str | None:
    """Coerce to str, treating None and empty strings as "not set"."""
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass
class CliConfig:
    """CLI configuration schema.

    None values indicate "not set" and will use defaults or be inherited.
    Only the CLI reads these settings; the template data set is fixed.
    """

    default_template: str | None = None
    language: str | None = None
    show_deprecated: bool | None = None

    def merge(self, other: CliConfig) -> CliConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new CliConfig instance.
        """
        return CliConfig(
            default_template=(
                other.default_template
                if other.default_template is not None
                else self.default_template
            ),
            language=other.language if other.language is not None else self.language,
            show_deprecated=(
                other.show_deprecated
                if other.show_deprecated is not None
                else self.show_deprecated
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CliConfig:
        """Create a CliConfig from a dictionary. Unknown keys are ignored."""
        default_template = _optional_str(data.get("default_template"))
        language = _optional_str(data.get("language"))
        show_deprecated_raw = data.get("show_deprecated")
        show_deprecated = (
            bool(show_deprecated_raw) if show_deprecated_raw is not None else None
        )
        return cls(
            default_template=default_template,
            language=language,
            show_deprecated=show_deprecated,
        )


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = CliConfig(show_deprecated=False)
