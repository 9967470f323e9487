#!/usr/bin/env python
"""Voicify VSCode CLI - inspect the desktop and drive injection by hand."""

import sys

import click

from voicify_vscode import __version__
from voicify_vscode.config import LOG_FILE
from voicify_vscode.injection import (
    InjectionError,
    TextInjector,
    WindowInspector,
    resolve_backend,
)
from voicify_vscode.logging_setup import setup_logging
from voicify_vscode.plugin import VSCodeAction
from voicify_vscode.services import check_tools


def print_success(message: str):
    click.echo(click.style(f"✅ {message}", fg='green'))


def print_warning(message: str):
    click.echo(click.style(f"⚠️  {message}", fg='yellow'))


def print_error(message: str):
    click.echo(click.style(f"❌ {message}", fg='red'), err=True)


@click.group()
@click.version_option(__version__, prog_name="voicify-vscode")
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Log level (default: VOICIFY_VSCODE_LOG_LEVEL or INFO)')
@click.option('--log-file', is_flag=True, help=f'Also write logs to {LOG_FILE}')
def cli(log_level, log_file):
    """Voicify VSCode - paste dictation into the focused editor."""
    setup_logging(log_level, LOG_FILE if log_file else None)


@cli.command()
def window():
    """Show the window that currently has focus."""
    try:
        focused = WindowInspector().get_focused_window()
    except InjectionError as e:
        print_error(str(e))
        sys.exit(1)

    click.echo(f"Title:       {focused.title or '(empty)'}")
    click.echo(f"Application: {focused.app_name or '(unknown)'}")


@cli.command()
@click.argument('text')
def paste(text):
    """Paste TEXT into the focused window and press Enter."""
    try:
        TextInjector().paste_with_return(text)
    except InjectionError as e:
        print_error(str(e))
        sys.exit(1)
    print_success("Pasted")


@cli.command()
@click.argument('transcription')
@click.option('--signature', default=None, help='Window title substring that identifies VSCode')
def run(transcription, signature):
    """Run the VSCode action on TRANSCRIPTION as the host would."""
    action = VSCodeAction(transcription, signature=signature)
    try:
        action.execute(transcription)
    except InjectionError as e:
        print_error(str(e))
        sys.exit(1)


@cli.command()
def status():
    """Check the display backend and required external tools."""
    backend = resolve_backend()
    click.echo(f"Display backend: {backend.value}\n")

    missing = False
    for tool in check_tools(backend):
        if tool.available:
            print_success(f"{tool.name}: {tool.path}")
        else:
            print_warning(f"{tool.name}: Not installed")
            missing = True

    if missing:
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
