"""Command-line interface for am-i-ai."""

from __future__ import annotations

import typer

from amiai import __version__
from amiai.config import AmiConfig
from amiai.detect import detect, detect_all, detect_report, format_json, is_ai
from amiai.exit_codes import ExitCode
from amiai.log import configure_logging

PROG_NAME = "am-i-ai"
PROJECT_URL = "https://github.com/trieloff/am-i-ai"

cli = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Detect whether an AI coding agent is driving this process.\n\n"
        "Prints the detected tool id (e.g. 'claude') or 'none'."
    ),
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} version {__version__}")
        typer.echo(PROJECT_URL)
        raise typer.Exit()


@cli.command()
def run(
    all_: bool = typer.Option(
        False, "--all", "-a", help="Print every detected tool, highest priority first."
    ),
    check: bool = typer.Option(
        False, "--check", "-c", help="Print nothing; exit 0 if an AI is detected, 1 otherwise."
    ),
    as_json: bool = typer.Option(
        False, "--json", "-j", help="Print the full detection report as JSON."
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Log detection steps to stderr (same as AMI_DEBUG=true)."
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit.",
    ),
) -> None:
    """Detect the AI coding agent running this process, if any."""
    if sum((all_, check, as_json)) > 1:
        raise typer.BadParameter("--all, --check and --json cannot be combined.")

    configure_logging(debug=debug)
    config = AmiConfig()
    if config.debug and not debug:
        configure_logging(debug=True)
    max_depth = config.max_depth

    if check:
        if not is_ai(max_depth=max_depth):
            raise typer.Exit(code=ExitCode.NOT_DETECTED)
        return
    if all_:
        typer.echo(" ".join(detect_all(max_depth=max_depth)))
        return
    if as_json:
        typer.echo(format_json(detect_report(max_depth=max_depth)))
        return
    typer.echo(detect(max_depth=max_depth))


def main(argv: list[str] | None = None) -> None:
    """Console-script entry point; usage errors exit 1 rather than click's 2."""
    try:
        cli(args=argv, prog_name=PROG_NAME)
    except SystemExit as exc:
        if exc.code == 2:
            raise SystemExit(int(ExitCode.USAGE_ERROR)) from exc
        raise
    raise SystemExit(int(ExitCode.SUCCESS))


if __name__ == "__main__":
    main()
