"""Read-only queries over a template registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from strategic_claude.templates.base import Template
from strategic_claude.templates.errors import (
    InvalidTemplateError,
    TemplateNotFoundError,
    TemplateValidationError,
)
from strategic_claude.templates.registry import (
    DEFAULT_TEMPLATE_ID,
    build_registry,
    get_registry,
)

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Lookup, listing and filtering over an ID -> Template mapping.

    The catalog never mutates the mapping it wraps. Every listing is sorted
    by ID at read time, so storage order never leaks into results.
    """

    def __init__(
        self,
        registry: Mapping[str, Template],
        default_id: str = DEFAULT_TEMPLATE_ID,
    ) -> None:
        self._registry = registry
        self._default_id = default_id

    @classmethod
    def from_templates(
        cls,
        templates: Iterable[Template],
        default_id: str = DEFAULT_TEMPLATE_ID,
    ) -> TemplateCatalog:
        """Create a catalog over a freshly built registry."""
        return cls(build_registry(templates), default_id=default_id)

    @property
    def default_id(self) -> str:
        return self._default_id

    def get_template(self, template_id: str) -> Template:
        """Look up a template by ID and validate it.

        Raises:
            TemplateNotFoundError: if no template has this ID.
            InvalidTemplateError: if the stored template fails validation.
        """
        template = self._registry.get(template_id)
        if template is None:
            logger.debug("Template lookup failed: %r", template_id)
            raise TemplateNotFoundError(template_id)

        try:
            template.validate()
        except TemplateValidationError as e:
            raise InvalidTemplateError(template_id, e) from e

        return template

    def get_default_template(self) -> Template:
        """Return the default template."""
        return self.get_template(self._default_id)

    def list_templates(self) -> list[Template]:
        """Return all templates, including deprecated ones, sorted by ID."""
        return sorted(self._registry.values(), key=lambda t: t.id)

    def list_active_templates(self) -> list[Template]:
        """Return all non-deprecated templates, sorted by ID."""
        return [t for t in self.list_templates() if not t.deprecated]

    def filter_templates_by_language(self, language: str) -> list[Template]:
        """Return active templates for `language`.

        Language-agnostic templates (empty language) match every query.
        """
        return [
            t
            for t in self.list_active_templates()
            if t.is_language_agnostic or t.language == language
        ]

    def filter_templates_by_tag(self, tag: str) -> list[Template]:
        """Return active templates carrying `tag`."""
        return [t for t in self.list_active_templates() if t.has_tag(tag)]

    def validate_template_id(self, template_id: str) -> None:
        """Raise the same error `get_template` would, or return None."""
        self.get_template(template_id)

    def get_template_ids(self) -> list[str]:
        """Return every registered ID, deprecated included, sorted."""
        return sorted(self._registry)


def get_catalog() -> TemplateCatalog:
    """Return a catalog over the built-in registry."""
    return TemplateCatalog(get_registry())


def get_template(template_id: str) -> Template:
    """Get a built-in template by ID.

    Raises:
        TemplateNotFoundError: if the ID is unknown.
        InvalidTemplateError: if the built-in entry is malformed.
    """
    return get_catalog().get_template(template_id)


def get_default_template() -> Template:
    """Get the default built-in template."""
    return get_catalog().get_default_template()


def list_templates() -> list[Template]:
    """List all built-in templates sorted by ID."""
    return get_catalog().list_templates()


def list_active_templates() -> list[Template]:
    """List non-deprecated built-in templates sorted by ID."""
    return get_catalog().list_active_templates()


def filter_templates_by_language(language: str) -> list[Template]:
    return get_catalog().filter_templates_by_language(language)


def filter_templates_by_tag(tag: str) -> list[Template]:
    return get_catalog().filter_templates_by_tag(tag)


def validate_template_id(template_id: str) -> None:
    """Check that a built-in template ID exists and is valid."""
    get_catalog().validate_template_id(template_id)


def get_template_ids() -> list[str]:
    """List all built-in template IDs, deprecated included."""
    return get_catalog().get_template_ids()
