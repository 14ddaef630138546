from __future__ import annotations

from typing import Any

import typer

from precalc.api import calc, eq
from precalc.config import get_opts, load_options_file, merge_options
from precalc.errors import PrecalcError
from precalc.util.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)


def split_args(words: list[str]) -> tuple[bool | None, str]:
    """A leading "true"/"false" word selects calc() wrapping; the rest is the input."""
    if words and words[0] in ("true", "false"):
        return words[0] == "true", " ".join(words[1:])
    return None, " ".join(words)


@app.command()
def main(
    words: list[str] = typer.Argument(None, help="Expression to reduce."),
    wrap: bool | None = typer.Option(
        None,
        "--calc/--no-calc",
        help="Wrap unreduced results in calc().",
    ),
    config: str = typer.Option("", "--config", help="YAML options file."),
    unit: list[str] | None = typer.Option(None, "--unit", help="Allowed unit (repeatable)."),
    no_units: bool = typer.Option(False, "--no-units", help="Accept any unit."),
    throws: bool | None = typer.Option(None, "--throws/--no-throws"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(verbose=verbose)
    logger = get_logger("cli")
    legacy_wrap, text = split_args(list(words or []))
    if not text:
        typer.echo("No input provided!")
        return
    cfg: dict[str, Any] = load_options_file(config) if config else {"units": True}
    units: Any = None
    if no_units:
        units = False
    elif unit:
        units = list(unit)
    opts = get_opts(merge_options(cfg, {"units": units, "throws": throws}))
    use_calc = wrap if wrap is not None else bool(legacy_wrap)
    logger.debug("precalc input=%r calc=%s units=%s throws=%s", text, use_calc, opts.units, opts.throws)
    fn = calc if use_calc else eq
    try:
        output = fn(opts, text)
    except PrecalcError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo("" if output is None else output)


if __name__ == "__main__":
    app()
