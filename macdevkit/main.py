"""
MacDevKit — CLI entrypoint.

Usage:
    macdevkit                 interactive menu
    macdevkit setup           full setup, one confirmation per step
    macdevkit brew            run a single section
    macdevkit run <section>   run a section by name
    macdevkit sections        list sections and the script in use
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from macdevkit import __version__
from macdevkit.core.observability.logging_config import resolve_level, setup_logging

BANNER = r"""
    __  ___          ____             __ __ _ __
   /  |/  /___ _____/ __ \___ _   __/ //_/(_) /_
  / /|_/ / __ `/ __/ / / / _ \ | / / ,<  / / __/
 / /  / / /_/ / /_/ /_/ /  __/ |/ / /| |/ / /_
/_/  /_/\__,_/\__/_____/\___/|___/_/ |_/_/\__/
"""


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="macdevkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to settings file (default: ~/.macdevkit.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """MacDevKit — set up a macOS development environment."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    if ctx.invoked_subcommand is None:
        print_welcome()
        run_interactive_menu(ctx)


# ── Wiring ──────────────────────────────────────────────────────


def _settings(ctx: click.Context):
    from macdevkit.core.config.loader import ConfigError, load_settings

    if "settings" not in ctx.obj:
        try:
            ctx.obj["settings"] = load_settings(ctx.obj.get("config_path"))
        except ConfigError as e:
            click.secho(f"❌ {e}", fg="red")
            sys.exit(1)
    return ctx.obj["settings"]


def _dispatcher(ctx: click.Context):
    """Build the dispatcher once per invocation.

    ``ctx.obj["runner"]`` may carry a pre-built runner (tests).
    """
    from macdevkit.core.engine.dispatcher import create_dispatcher

    if "dispatcher" not in ctx.obj:
        ctx.obj["dispatcher"] = create_dispatcher(
            _settings(ctx),
            runner=ctx.obj.get("runner"),
        )
    return ctx.obj["dispatcher"]


# ── Presentation ────────────────────────────────────────────────


def print_welcome() -> None:
    click.secho(BANNER, fg="bright_blue")
    click.secho(
        "Welcome to MacDevKit - Your Ultimate macOS Development Environment Setup Tool",
        fg="yellow",
    )
    click.echo()
    click.secho("This CLI tool will help you:", fg="cyan")
    for line in (
        "Install essential developer tools",
        "Configure your development environment",
        "Set up programming languages and frameworks",
        "Install useful applications",
        "Optimize your macOS settings",
    ):
        click.secho("  ✓", fg="green", nl=False)
        click.echo(f"  {line}")
    click.echo()


def _print_section_start(section) -> None:
    click.secho(f"\n==== Running {section.value.upper()} Section ====\n", fg="blue")


def _print_result(ctx: click.Context, result) -> None:
    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        for message in result.messages:
            click.echo(f"   {message}")

    timing = f" ({result.duration_ms}ms)" if ctx.obj.get("verbose") else ""
    if result.ok:
        click.secho(f"✓ {result.section.label}: completed [{result.tier}]{timing}", fg="green")
    else:
        click.secho(f"✗ {result.section.label}: failed{timing}", fg="red")
        if result.error:
            click.secho(f"   {result.error}", fg="red")


def _run_and_report(ctx: click.Context, name: str, as_json: bool = False) -> None:
    """Run one section, print the outcome, exit 1 on failure."""
    from macdevkit.core.errors import UnknownSectionError
    from macdevkit.core.models.section import Section

    dispatcher = _dispatcher(ctx)

    try:
        section = Section.parse(name)
        if not as_json:
            _print_section_start(section)
        result = dispatcher.run_section(section.value)
    except UnknownSectionError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(ctx, result)

    if result.failed:
        sys.exit(1)


# ── Commands ────────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def setup(ctx: click.Context, as_json: bool) -> None:
    """Run the full setup with interactive prompts."""
    _full_setup(ctx, as_json=as_json)


def _full_setup(ctx: click.Context, as_json: bool = False) -> None:
    from macdevkit.core.use_cases.setup import restart_host, run_full_setup

    dispatcher = _dispatcher(ctx)

    if not as_json:
        click.secho("\n==== Running Full Setup ====\n", fg="blue")

    report = run_full_setup(
        dispatcher,
        confirm=lambda section: click.confirm(
            f"Do you want to {section.label}?",
            default=True,
            err=as_json,
        ),
        on_start=None if as_json else _print_section_start,
        on_result=None if as_json else lambda result: _print_result(ctx, result),
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        if report.failed:
            sys.exit(1)
        return

    status_color = {"ok": "green", "partial": "yellow", "failed": "red"}[report.status]
    click.secho("\n==== Setup Complete! ====\n", fg="blue")
    click.secho(
        f"   Result: {report.succeeded}/{len(report.results)} sections succeeded"
        f", {len(report.skipped)} skipped",
        fg=status_color,
        bold=True,
    )
    click.secho("Your Mac has been set up for development.", fg="green")
    click.secho("Some changes may require a restart to take effect.", fg="yellow")
    click.secho("Enjoy your new development environment!", fg="green")

    if click.confirm("Do you want to restart your computer now?", default=False):
        click.secho("Restarting your computer now...", fg="cyan")
        if not restart_host(dispatcher.host.runner):
            click.secho("❌ Restart failed", fg="red")


@cli.command("run")
@click.argument("section")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def run_cmd(ctx: click.Context, section: str, as_json: bool) -> None:
    """Run a section by name (case-insensitive).

    Examples:

        macdevkit run brew

        macdevkit run WORKSPACE --json
    """
    _run_and_report(ctx, section, as_json=as_json)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def sections(ctx: click.Context, as_json: bool) -> None:
    """List sections and the automation script in use."""
    from macdevkit.core.models.section import Section

    dispatcher = _dispatcher(ctx)
    resolver = dispatcher.resolver
    packaged = resolver.is_packaged()

    if as_json:
        data = {
            "script": {"path": str(resolver.primary_path), "packaged": packaged},
            "sections": [
                {
                    "name": s.value,
                    "label": s.label,
                    "native": s in dispatcher.registry,
                }
                for s in Section
            ],
        }
        click.echo(json.dumps(data, indent=2))
        return

    click.secho("\n📋 Sections", fg="cyan", bold=True)
    for s in Section:
        click.echo(f"   • {s.value:<10} {s.label}")
    click.echo()
    if packaged:
        click.secho(f"   Script: {resolver.primary_path}", fg="green")
    else:
        click.secho("   Script: minimal fallback (no packaged init.sh)", fg="yellow")
    click.echo()


def _section_command(section) -> click.Command:
    @click.command(name=section.value, help=f"{section.label}.")
    @click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
    @click.pass_context
    def command(ctx: click.Context, as_json: bool) -> None:
        _run_and_report(ctx, section.value, as_json=as_json)

    return command


def _register_section_commands() -> None:
    from macdevkit.core.models.section import Section

    for section in Section:
        cli.add_command(_section_command(section))


_register_section_commands()


# ── Interactive menu ────────────────────────────────────────────


def run_interactive_menu(ctx: click.Context) -> None:
    """Numbered menu: full setup, each section, exit."""
    from macdevkit.core.models.section import Section

    sections_in_order = list(Section)
    options = ["Full Setup"] + [s.label for s in sections_in_order] + ["Exit"]

    for index, option in enumerate(options):
        click.echo(f"  {index:>2}) {option}")
    click.echo()

    choice = click.prompt(
        "Select an option",
        type=click.IntRange(0, len(options) - 1),
        default=0,
    )

    if choice == 0:
        _full_setup(ctx)
    elif choice == len(options) - 1:
        click.secho("Goodbye!", fg="green")
    else:
        _run_and_report(ctx, sections_in_order[choice - 1].value)


if __name__ == "__main__":
    cli()
