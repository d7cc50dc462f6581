"""
electron-fix — CLI entrypoint.

Usage:
    electron-fix --help
    electron-fix start        (alias: s)
    python -m electron_fix.main start
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from electron_fix import __version__
from electron_fix.core.observability.logging_config import setup_logging

# kind → (icon, secho style)
_STYLES: dict[str, tuple[str, dict]] = {
    "info": ("", {"bold": True}),
    "progress": ("⏳ ", {"fg": "yellow"}),
    "success": ("✅ ", {"fg": "green"}),
    "fail": ("❌ ", {"fg": "red"}),
    "hint": ("", {"fg": "yellow", "bold": True}),
}


def _echo_progress(kind: str, message: str) -> None:
    icon, style = _STYLES.get(kind, ("", {}))
    click.secho(f"{icon}{message}", err=kind == "fail", **style)


@click.group()
@click.version_option(version=__version__, prog_name="electron-fix")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """electron-fix — install the Electron binary from a mirror."""
    ctx.ensure_object(dict)

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("EFIX_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("EFIX_LOG_FILE"),
        log_file_level=os.environ.get("EFIX_LOG_FILE_LEVEL"),
    )


@cli.command()
def start() -> None:
    """Fix electron: download and unpack the binary into node_modules."""
    from electron_fix.core.config.loader import ConfigError, load_manifest
    from electron_fix.core.config.settings import load_settings
    from electron_fix.core.use_cases.fix import fix_electron

    root = Path.cwd()
    try:
        manifest = load_manifest(root)
        config = load_settings(root, manifest)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    result = fix_electron(manifest, config, reporter=_echo_progress)
    if result.failed:
        sys.exit(1)


cli.add_command(start, name="s")


if __name__ == "__main__":
    cli()
