"""Template catalog errors."""

from __future__ import annotations


class TemplateError(Exception):
    """Base exception for template catalog errors."""


class TemplateValidationError(TemplateError):
    """Raised when a template is missing a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


class TemplateNotFoundError(TemplateError):
    """Raised when no template is registered under the requested ID."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"template '{template_id}' not found")


class InvalidTemplateError(TemplateError):
    """Raised when a registered template fails its own validation.

    This points at a defect in the built-in data set rather than bad user
    input. Other templates remain usable.
    """

    def __init__(self, template_id: str, cause: TemplateValidationError) -> None:
        self.template_id = template_id
        self.cause = cause
        super().__init__(f"template '{template_id}' is invalid: {cause}")


class DuplicateTemplateError(TemplateError, ValueError):
    """Raised when two templates share an ID while building a registry."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"duplicate template id: {template_id}")
