"""Command-line inspection of Matlab 7.3 MAT-files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .config import ReaderConfig
from .element_types import ElementKind
from .exceptions import Mat73Error
from .file import MatFile


@click.group()
@click.option("--config",
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None,
              help="YAML file with a 'reader:' section.")
@click.option("--verbose", is_flag=True, help="Log HDF5 access at DEBUG level.")
@click.pass_context
def main(ctx: click.Context, config: Optional[Path], verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        ctx.obj = ReaderConfig.from_yaml(config) if config else ReaderConfig()
    except ValueError as e:
        click.echo(str(e), err=True)
        raise click.Abort()


@main.command("list")
@click.argument("file", type=click.Path(path_type=Path))
@click.pass_obj
def list_variables(cfg: ReaderConfig, file: Path):
    """List the top-level variables in FILE."""
    try:
        with MatFile.open(file, cfg) as mat:
            for name in mat.variables():
                click.echo(name)
    except Mat73Error as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@main.command("array")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("name")
@click.option("--kind",
              type=click.Choice([k.value for k in ElementKind]),
              default=None,
              help="Element type to read as (default from config).")
@click.option("--matrix",
              is_flag=True,
              help="Print the 2-D array row by row.")
@click.pass_obj
def show_array(cfg: ReaderConfig, file: Path, name: str, kind: Optional[str],
               matrix: bool):
    """Print the numeric array NAME stored in FILE."""
    try:
        with MatFile.open(file, cfg) as mat:
            var = mat.array(name, kind)
        click.echo(f"name: {var.name}")
        click.echo(f"shape: {list(var.shape)}")
        click.echo(f"kind: {var.kind.value}")
        if matrix:
            for row in var.to_matrix().tolist():
                click.echo(" ".join(str(v) for v in row))
        else:
            click.echo(str(var.tolist()))
    except Mat73Error as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@main.command("fields")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("name")
@click.pass_obj
def show_fields(cfg: ReaderConfig, file: Path, name: str):
    """Print the field names of the struct NAME stored in FILE."""
    try:
        with MatFile.open(file, cfg) as mat:
            desc = mat.struct(name)
        for field in desc.field_names:
            click.echo(field)
    except Mat73Error as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
