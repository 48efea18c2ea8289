"""Built-in template registry."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from strategic_claude.templates.base import Template
from strategic_claude.templates.errors import DuplicateTemplateError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "main"

DEFAULT_REPO_URL = (
    "https://github.com/Fomo-Driven-Development/strategic-claude-base.git"
)

BUILTIN_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="main",
        name="Strategic Claude Basic",
        description=(
            "Main template for general development projects with comprehensive "
            "Claude Code integration"
        ),
        repo_url=DEFAULT_REPO_URL,
        branch="main",
        commit="0c3747dd81c69bad66c828175e358fa840e88227",
        tags=frozenset({"general", "default"}),
    ),
    Template(
        id="ccr",
        name="CCR Template",
        description=(
            "Specialized template for CCR (Claude Code Router) workflows and "
            "development patterns"
        ),
        repo_url=DEFAULT_REPO_URL,
        branch="ccr-template",
        commit="2c9fa88312f7ae68747dd69bbc0075ab47b0225f",
        tags=frozenset({"ccr", "workflow", "specialized"}),
    ),
    Template(
        id="web-explorer",
        name="Claude Web Explorer Template",
        description=(
            "A template for browser automation projects using Chromium with MCP "
            "(Model Context Protocol) integration for Claude Code"
        ),
        repo_url=DEFAULT_REPO_URL,
        branch="web-explorer",
        commit="1a91789daf511b8663e879c9e7e1f36755dfa2d6",
        tags=frozenset({"web", "explorer"}),
    ),
)


def build_registry(templates: Iterable[Template]) -> Mapping[str, Template]:
    """Build a read-only ID -> Template mapping.

    Raises:
        DuplicateTemplateError: if two templates share an ID.
    """
    registry: dict[str, Template] = {}
    for template in templates:
        if template.id in registry:
            raise DuplicateTemplateError(template.id)
        registry[template.id] = template
    return MappingProxyType(registry)


@functools.cache
def get_registry() -> Mapping[str, Template]:
    """Return the process-wide registry, built once on first use."""
    registry = build_registry(BUILTIN_TEMPLATES)
    logger.debug("Template registry built with %d templates", len(registry))
    return registry
