from pathlib import Path

import typer

from .grants import GrantCompilationError
from .loader import SchemaError, load_schema
from .log import LogLevel, configure_logging, get_logger
from .module import (
    GRANTS_MODULE_PATH,
    InvalidModulePath,
    create_grants_module,
    write_module,
)

logger = get_logger(__name__)

app = typer.Typer(help="Compile entity permissions into accesscontrol grants.")


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        envvar="PYGRANTS_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level",
    ),
):
    configure_logging(log_level)


@app.command("compile")
def compile_grants(
    schema: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON document with entities and roles"
    ),
    output_dir: Path = typer.Option(
        Path("."),
        "--output-dir",
        "-o",
        envvar="PYGRANTS_OUTPUT_DIR",
        file_okay=False,
        help="Directory the grants module is written to",
    ),
    path: str = typer.Option(
        GRANTS_MODULE_PATH, "--path", help="Grants module path inside the output dir"
    ),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the grants instead of writing them"
    ),
):
    """Compile the grants module of SCHEMA."""
    try:
        loaded = load_schema(schema)
        logger.debug(
            "loaded %d entities and %d roles", len(loaded.entities), len(loaded.roles)
        )
        module = create_grants_module(loaded.entities, loaded.roles, path=path)
    except (SchemaError, GrantCompilationError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if stdout:
        typer.echo(module.code)
        return
    try:
        target = write_module(module, output_dir)
    except InvalidModulePath as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Grants written to {target}")


if __name__ == "__main__":
    app()
