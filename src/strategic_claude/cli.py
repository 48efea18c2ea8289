"""Command-line interface for strategic-claude."""

import json
import logging

import click

from strategic_claude import __version__
from strategic_claude.config.loader import (
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    local_config_exists,
)
from strategic_claude.console import console
from strategic_claude.logging_setup import setup_logging
from strategic_claude.templates import (
    DEFAULT_TEMPLATE_ID,
    InvalidTemplateError,
    Template,
    TemplateError,
    TemplateNotFoundError,
    filter_templates_by_language,
    filter_templates_by_tag,
    get_template,
    get_template_ids,
    list_active_templates,
    list_templates,
    validate_template_id,
)

logger = logging.getLogger(__name__)


def _report_template_error(error: TemplateError) -> None:
    """Print a catalog error the way users should see it."""
    console.print(f"[red]{error}[/red]")
    if isinstance(error, TemplateNotFoundError):
        console.print("Available templates: " + ", ".join(get_template_ids()))
    elif isinstance(error, InvalidTemplateError):
        logger.error("Built-in template %r failed validation", error.template_id)


def _select_templates(
    include_deprecated: bool,
    language: str | None,
    tag: str | None,
) -> list[Template]:
    """Apply the list command's filters, keeping ascending ID order."""
    if include_deprecated:
        templates = list_templates()
    else:
        templates = list_active_templates()

    if language is not None:
        allowed = {t.id for t in filter_templates_by_language(language)}
        templates = [t for t in templates if t.id in allowed]
    if tag is not None:
        allowed = {t.id for t in filter_templates_by_tag(tag)}
        templates = [t for t in templates if t.id in allowed]

    return templates


def _print_template_details(template: Template) -> None:
    console.print(f"[bold cyan]{template.id}[/bold cyan] - {template.name}")
    if template.deprecated:
        console.print("  [yellow]Deprecated[/yellow]")
    console.print(f"  {template.description.strip()}")
    console.print(f"  Repository: {template.repo_url}")
    console.print(f"  Branch:     {template.branch}")
    console.print(f"  Commit:     {template.commit}")
    console.print(f"  Language:   {template.language or 'any'}")
    tags_str = ", ".join(sorted(template.tags)) if template.tags else "none"
    console.print(f"  Tags:       {tags_str}")


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"strategic-claude [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option(
    "--verbose", "-v", is_flag=True, help="Enable debug logging on stderr."
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Strategic Claude - scaffold projects from pinned templates."""
    setup_logging(verbose=verbose)

    if ctx.invoked_subcommand is None:
        console.print("[bold]strategic-claude[/bold] - project scaffolding templates")
        console.print(
            "\nRun [cyan]strategic-claude --help[/cyan] for available commands."
        )


@main.group(invoke_without_command=True)
@click.pass_context
def templates(ctx: click.Context) -> None:
    """Browse and validate scaffolding templates.

    Use subcommands: templates list, templates show, templates ids,
    templates validate
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@templates.command("list")
@click.option(
    "--all", "-a", "show_all", is_flag=True, help="Include deprecated templates."
)
@click.option("--language", "-l", help="Only templates usable for this language.")
@click.option("--tag", "-t", help="Only templates carrying this tag.")
@click.option("--json", "as_json", is_flag=True, help="Print templates as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Show template details.")
def templates_list(
    show_all: bool,
    language: str | None,
    tag: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """List available templates."""
    cli_config = load_config()
    include_deprecated = show_all or bool(cli_config.show_deprecated)
    if language is None:
        language = cli_config.language

    selected = _select_templates(include_deprecated, language, tag)

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in selected], indent=2))
        return

    if not selected:
        console.print("[yellow]No templates match.[/yellow]")
        return

    console.print("[bold]Available Templates:[/bold]\n")
    for template in selected:
        label = " [yellow](deprecated)[/yellow]" if template.deprecated else ""
        console.print(f"  [cyan]{template.id}[/cyan] {template.name}{label}")
        if verbose:
            console.print(f"    {template.description.strip()}")
            tags_str = ", ".join(sorted(template.tags)) if template.tags else "none"
            console.print(f"    [dim]Tags: {tags_str}[/dim]")
            console.print(
                f"    [dim]{template.branch} @ {template.short_commit}[/dim]"
            )
            console.print()


@templates.command("show")
@click.argument("template_id", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the template as JSON.")
def templates_show(template_id: str | None, as_json: bool) -> None:
    """Show details for a template (defaults to the configured template)."""
    if template_id is None:
        template_id = load_config().default_template or DEFAULT_TEMPLATE_ID

    try:
        template = get_template(template_id)
    except TemplateError as e:
        _report_template_error(e)
        raise SystemExit(1) from None

    if as_json:
        click.echo(json.dumps(template.to_dict(), indent=2))
        return

    _print_template_details(template)


@templates.command("ids")
def templates_ids() -> None:
    """Print every template ID, one per line (deprecated included)."""
    for template_id in get_template_ids():
        click.echo(template_id)


@templates.command("validate")
@click.argument("template_id")
def templates_validate(template_id: str) -> None:
    """Check that a template ID exists and is valid."""
    try:
        validate_template_id(template_id)
    except TemplateError as e:
        _report_template_error(e)
        raise SystemExit(1) from None

    console.print(f"[green]✓[/green] Template '{template_id}' is valid")


@main.group(invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """Inspect CLI configuration."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("show")
def config_show() -> None:
    """Display the current effective configuration."""
    effective = load_config()
    console.print("\n[bold]Current Effective Configuration:[/bold]")
    console.print(f"  [dim]Global: {get_home_config_path()}[/dim]")
    console.print(f"  [dim]Local: {get_local_config_path()}[/dim]")
    console.print()

    data = effective.to_dict()
    if data:
        for key, value in data.items():
            console.print(f"  {key}: {value}")
    else:
        console.print("  [dim](using built-in defaults)[/dim]")

    console.print()
    if home_config_exists():
        console.print("  [green]Global config: exists[/green]")
    else:
        console.print("  [dim]Global config: not found[/dim]")
    if local_config_exists():
        console.print("  [green]Local config: exists[/green]")
    else:
        console.print("  [dim]Local config: not found[/dim]")
