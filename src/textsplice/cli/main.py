import json
import sys

import typer
from rich.console import Console
from rich.table import Table

from ..chunking.engine import ChunkError, Chunkifier, ChunkifierConfigError
from ..core.config import Settings
from ..core.logging import setup_logging
from ..pipeline.backends import UnisegWordBackend
from ..pipeline.runner import TokenizeRunner
from ..tokens.align import align_tokens
from ..tokens.spacing import needs_space

app = typer.Typer(add_completion=False, help="textsplice CLI")

def _settings(ctx: typer.Context) -> Settings:
    if ctx.obj is None:
        ctx.obj = Settings.load_config()
    return ctx.obj


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read()
    return text


@app.callback()
def _init(
    ctx: typer.Context,
    config_file: str | None = typer.Option(
        None,
        "--config",
        help="Config file (.textsplice.yaml auto-discovered)",
    ),
    log_format: str | None = typer.Option(None, "--log-format", help="json|plain|auto"),
    log_level: str | None = typer.Option(None, "--log-level", help="Minimum log level"),
) -> None:
    settings = Settings.load_config(config_file)
    ctx.obj = settings
    setup_logging(
        (log_format or settings.LOG_FORMAT),  # type: ignore[arg-type]
        log_level or settings.LOG_LEVEL,
    )


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def chunk(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to split, or '-' for stdin"),
    max_length: int | None = typer.Option(None, "--max-length", "-n", help="Max chunk length in characters (<=0: unbounded)"),
    methods: list[str] | None = typer.Option(None, "--method", "-m", help="Split method, repeatable, in cascade order"),
    marker: str | None = typer.Option(None, "--marker", help="Marker string for the 'marker' method"),
    json_output: bool = typer.Option(False, "--json", help="Output chunks as a JSON array"),
) -> None:
    """Split text into chunks no longer than --max-length characters."""
    settings = _settings(ctx)
    overrides = {}
    if methods:
        overrides["SPLIT_METHODS"] = methods
    if marker is not None:
        overrides["SPLIT_MARKER"] = marker
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        chunkifier = Chunkifier.from_settings(settings, max_length=max_length)
        chunks = chunkifier.chunkify(_read_text(text))
    except (ChunkError, ChunkifierConfigError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(json.dumps(chunks, ensure_ascii=False))
    else:
        for piece in chunks:
            typer.echo(piece)


@app.command()
def align(
    ctx: typer.Context,
    original: str = typer.Argument(..., help="Original text"),
    lexicals: list[str] = typer.Argument(..., help="Lexical surfaces returned by a backend, in order"),
    json_output: bool = typer.Option(False, "--json", help="Output tokens as JSON"),
) -> None:
    """Re-insert the filler a backend dropped between lexical surfaces."""
    result = align_tokens(
        _read_text(original),
        lexicals,
        miss_warn_ratio=_settings(ctx).ALIGN_MISS_WARN_RATIO,
    )

    if json_output:
        payload = {
            "tokens": [t.model_dump() for t in result.tokens],
            "missed": result.missed,
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    table = Table(title="Aligned tokens")
    table.add_column("#", justify="right")
    table.add_column("surface")
    table.add_column("lexical")
    table.add_column("span", justify="right")
    for i, token in enumerate(result.tokens):
        table.add_row(
            str(i),
            repr(token.surface),
            "yes" if token.is_lexical else "no",
            f"{token.start}-{token.end}",
        )
    Console().print(table)
    if result.missed:
        typer.echo(f"⚠️  Missed {len(result.missed)}: {', '.join(result.missed)}")


@app.command()
def tokenize(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to tokenize, or '-' for stdin"),
    max_length: int = typer.Option(0, "--max-length", "-n", help="Backend input limit (<=0: unbounded)"),
    parts: bool = typer.Option(False, "--parts", help="Print one token per line"),
) -> None:
    """Tokenize with the built-in word segmenter and print the spaced result."""
    backend = UnisegWordBackend(max_query_len=max_length)
    try:
        sequence = TokenizeRunner.from_settings(backend, _settings(ctx)).run(_read_text(text))
    except (ChunkError, ChunkifierConfigError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    if parts:
        for part in sequence.lexical().tokenized_parts():
            typer.echo(part)
    else:
        typer.echo(sequence.tokenized())


@app.command()
def space(
    prev: str = typer.Argument(..., help="Previous unit"),
    current: str = typer.Argument(..., help="Current unit"),
) -> None:
    """Print whether a space belongs between two units."""
    typer.echo("true" if needs_space(prev, current) else "false")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
