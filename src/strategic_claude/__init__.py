"""Strategic Claude - project scaffolding from pinned template repositories."""

__version__ = "0.1.0"
