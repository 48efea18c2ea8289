"""Base template definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from strategic_claude.templates.errors import TemplateValidationError

SHORT_COMMIT_LENGTH = 7


@dataclass(frozen=True)
class Template:
    """Definition of a scaffolding template.

    A template points at a repository, a branch to resolve, and a pinned
    commit so that scaffolding stays reproducible no matter what happens
    upstream. Validation is explicit (see `validate`), not enforced on
    construction.
    """

    id: str
    name: str
    description: str
    repo_url: str
    branch: str
    commit: str
    language: str = ""  # Empty = language-agnostic, matches any filter
    tags: frozenset[str] = field(default_factory=frozenset)
    deprecated: bool = False

    def __post_init__(self) -> None:
        # A bare string is one tag, not an iterable of characters
        if isinstance(self.tags, str):
            object.__setattr__(self, "tags", frozenset((self.tags,)))
        elif not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def validate(self) -> None:
        """Check required fields.

        Raises:
            TemplateValidationError: naming the first empty field among
                id, repo_url and commit.
        """
        if not self.id:
            raise TemplateValidationError("id")
        if not self.repo_url:
            raise TemplateValidationError("repo_url")
        if not self.commit:
            raise TemplateValidationError("commit")

    def has_tag(self, tag: str) -> bool:
        """Return True if `tag` is one of this template's tags (exact match)."""
        return tag in self.tags

    @property
    def is_language_agnostic(self) -> bool:
        return not self.language

    @property
    def short_commit(self) -> str:
        """Abbreviated pinned commit for display."""
        return self.commit[:SHORT_COMMIT_LENGTH]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary (tags sorted)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "repo_url": self.repo_url,
            "branch": self.branch,
            "commit": self.commit,
            "language": self.language,
            "tags": sorted(self.tags),
            "deprecated": self.deprecated,
        }

