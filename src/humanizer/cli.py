"""CLI entry point for the humanizer command."""

from __future__ import annotations

from collections.abc import Iterable

import click

from humanizer.casing import LetterCasing, apply_case
from humanizer.config import ConfigError, HumanizerConfig, load_config
from humanizer.culture import Culture, set_current_culture
from humanizer.logging import get_logger, setup_logging
from humanizer.strings import humanize as humanize_text

_log = get_logger("cli")

_casing_option = click.option(
    "--casing",
    default=None,
    type=click.Choice(LetterCasing.names(), case_sensitive=False),
    help="Letter casing to apply to the output",
)
_culture_option = click.option(
    "--culture",
    default=None,
    help="Locale for case mappings, e.g. en-US or tr_TR (default: config or process locale)",
)


def _inputs(texts: tuple[str, ...]) -> Iterable[str]:
    """Command arguments, or stdin lines when there are none."""
    if texts:
        return texts
    return (line.rstrip("\r\n") for line in click.get_text_stream("stdin"))


def _culture(name: str | None) -> Culture | None:
    return Culture.from_locale(name) if name is not None else None


@click.group()
@click.option(
    "--log-level",
    default=None,
    envvar="HUMANIZER_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (default: config or WARNING)",
)
@click.option(
    "--log-file", default=None, envvar="HUMANIZER_LOG_FILE", type=click.Path(), help="Log to file"
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    envvar="HUMANIZER_CONFIG",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to humanizer.yaml",
)
@click.version_option(package_name="humanizer-strings")
@click.pass_context
def main(
    ctx: click.Context, log_level: str | None, log_file: str | None, config_path: str | None
) -> None:
    """Humanizer -- turn identifiers into readable phrases.

    \b
        humanizer humanize PascalCaseName        # Pascal case name
        humanizer humanize some_name --casing title
        humanizer case "hello world" --casing caps
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(
        level=log_level or cfg.log_level,
        log_file=log_file or cfg.log_file,
    )
    if cfg.source_path:
        _log.info("using config %s", cfg.source_path)

    culture = cfg.resolved_culture()
    if culture is not None:
        set_current_culture(culture)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@main.command("humanize")
@click.argument("texts", nargs=-1)
@_casing_option
@_culture_option
@click.pass_obj
def humanize_cmd(obj: dict, texts: tuple[str, ...], casing: str | None, culture: str | None) -> None:
    """Humanize each TEXT (or each stdin line) and print the result."""
    cfg: HumanizerConfig = obj["config"]
    letter_casing = LetterCasing.parse(casing) if casing else cfg.default_casing
    mapper = _culture(culture)
    for text in _inputs(texts):
        click.echo(humanize_text(text, letter_casing, mapper))


@main.command("case")
@click.argument("texts", nargs=-1)
@click.option(
    "--casing",
    required=True,
    type=click.Choice(LetterCasing.names(), case_sensitive=False),
    help="Letter casing to apply",
)
@_culture_option
def case_cmd(texts: tuple[str, ...], casing: str, culture: str | None) -> None:
    """Apply a letter casing to each TEXT (or each stdin line) without humanizing."""
    letter_casing = LetterCasing.parse(casing)
    mapper = _culture(culture)
    for text in _inputs(texts):
        click.echo(apply_case(text, letter_casing, mapper))


@main.command()
def casings() -> None:
    """List the available letter casings."""
    for name in LetterCasing.names():
        click.echo(name)


@main.command()
@click.pass_obj
def validate(obj: dict) -> None:
    """Validate the humanizer.yaml configuration."""
    cfg: HumanizerConfig = obj["config"]
    errors = cfg.validate()
    if errors:
        click.echo(f"Found {len(errors)} error(s):", err=True)
        for e in errors:
            click.echo(f"  x {e}", err=True)
        raise SystemExit(1)
    source = cfg.source_path or "defaults"
    click.echo(f"Config OK: {source}")
