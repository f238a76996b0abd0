"""CLI entry point for getnotes2vault."""

import sys
from pathlib import Path

import click

from .config import SettingsStore, load_config
from .exceptions import ConfigError, GetNotesError
from .importer import import_archive


@click.command()
@click.argument("archive", type=click.Path(dir_okay=False))
@click.option(
    "--vault-path",
    type=click.Path(file_okay=False),
    default=None,
    help="Path to Obsidian vault (default: current directory or OBSIDIAN_VAULT_PATH env var)",
)
@click.option(
    "--folder",
    type=str,
    default=None,
    help="Vault folder to import into (default: saved setting, GETNOTES_IMPORT_FOLDER or get-notes)",
)
@click.option(
    "--remember",
    is_flag=True,
    default=False,
    help="Save the import folder as the default for future imports",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(archive, vault_path, folder, remember, verbose):
    """Import a Get笔记 export archive into an Obsidian vault.

    Every HTML note under notes/ in the zip archive becomes a Markdown file
    with title, created time and tags in its YAML frontmatter.

    Example: getnotes2vault export.zip --vault-path ~/Vault
    """
    try:
        config = load_config(
            vault_path=vault_path,
            import_folder=folder,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if remember:
        SettingsStore(config.vault_path).save({"import_folder": config.import_folder})
        if config.verbose:
            click.echo(f"Saved import folder: {config.import_folder}")

    click.echo(f"Importing {archive} into {config.output_dir}...")

    try:
        result = import_archive(
            Path(archive),
            config.vault_path,
            config.import_folder,
            verbose=config.verbose,
        )
    except GetNotesError as e:
        click.echo(f"Import failed: {e}", err=True)
        sys.exit(2)

    click.echo(
        f"Import complete: {result.imported} imported, {result.failed} failed."
    )
    sys.exit(1 if result.failed else 0)
