"""Scaffolding template catalog."""

from strategic_claude.templates.base import Template
from strategic_claude.templates.catalog import (
    TemplateCatalog,
    filter_templates_by_language,
    filter_templates_by_tag,
    get_catalog,
    get_default_template,
    get_template,
    get_template_ids,
    list_active_templates,
    list_templates,
    validate_template_id,
)
from strategic_claude.templates.errors import (
    DuplicateTemplateError,
    InvalidTemplateError,
    TemplateError,
    TemplateNotFoundError,
    TemplateValidationError,
)
from strategic_claude.templates.registry import (
    BUILTIN_TEMPLATES,
    DEFAULT_REPO_URL,
    DEFAULT_TEMPLATE_ID,
    build_registry,
    get_registry,
)

__all__ = [
    "BUILTIN_TEMPLATES",
    "DEFAULT_REPO_URL",
    "DEFAULT_TEMPLATE_ID",
    "DuplicateTemplateError",
    "InvalidTemplateError",
    "Template",
    "TemplateCatalog",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateValidationError",
    "build_registry",
    "filter_templates_by_language",
    "filter_templates_by_tag",
    "get_catalog",
    "get_default_template",
    "get_registry",
    "get_template",
    "get_template_ids",
    "list_active_templates",
    "list_templates",
    "validate_template_id",
]
