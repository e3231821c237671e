from __future__ import annotations

import logging
import os
from typing import Optional

import click
import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .bump import BumpKind
from .config import Config, Settings
from .errors import SemvError
from .sources import GitHubTagSource, LocalGitTagSource, TagSource
from .vcs.git import GitMetadata
from .versioning import TagVersioning


PROG_NAME = "git-semv"
LOG_LEVEL_ENV_VAR = "SEMV_LOG_LEVEL"

# Help text for every option, authored once and shared by all commands.
OPTION_HELP = {
    "url": "Repository on GitHub as owner/name (default: tags of the local git repository)",
    "pre": "Pre-Release version indicates (ex: 0.0.1-rc.0)",
    "pre_name": "Specify pre-release version name",
    "build": "Build version indicates (ex: 0.0.1+3222d31.foo)",
    "build_name": "Specify build version name",
    "all": "Include everything such as pre-release and build versions in list",
    "prefix": "Prefix for version and tag (default: v)",
    "verbose": "Show what is being fetched and parsed",
    "version": "Prints the version number",
}

app = typer.Typer(
    name=PROG_NAME,
    help="Semantic versioning from git tags: list versions and compute the next one.",
    add_completion=False,
)
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING" if not verbose else "INFO")
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
    )


def _load_config() -> Config:
    return Config.load_with_repo_context()


def _make_source(settings: Settings) -> TagSource:
    if settings.repository:
        return GitHubTagSource(api_url=settings.api_url, token=settings.token)
    return LocalGitTagSource()


def _build_versioning(settings: Settings) -> TagVersioning:
    return TagVersioning(_make_source(settings), settings, metadata=GitMetadata())


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def cmd_list(settings: Settings) -> int:
    try:
        versions = _build_versioning(settings).versions(settings.include_pre_release)
    except SemvError as e:
        _error(str(e))
        return 1
    if versions:
        typer.echo(versions.render())
    return 0


def cmd_latest(settings: Settings) -> int:
    try:
        latest = _build_versioning(settings).latest(settings.include_pre_release)
    except SemvError as e:
        _error(str(e))
        return 1
    typer.echo(str(latest))
    return 0


def cmd_bump(kind: BumpKind, settings: Settings) -> int:
    try:
        nxt = _build_versioning(settings).bump_version(kind)
    except SemvError as e:
        _error(str(e))
        return 1
    typer.echo(str(nxt))
    return 0


def _settings(**options) -> Settings:
    return Settings.resolve(_load_config(), **options)


def _run(fn, verbose: bool, *args, **options) -> int:
    _configure_logging(verbose)
    try:
        settings = _settings(**options)
    except SemvError as e:
        _error(str(e))
        return 1
    return fn(*args, settings)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} version {__version__}")
        raise typer.Exit(0)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help=OPTION_HELP["version"], is_eager=True, callback=_version_callback
    ),
):
    # `git-semv` with no command lists versions
    if ctx.invoked_subcommand is None:
        raise typer.Exit(_run(cmd_list, False))


# Typer command bindings


@app.command("list", help="Sorted versions")
def list_command(
    url: Optional[str] = typer.Option(None, "--url", "-u", help=OPTION_HELP["url"]),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-x", help=OPTION_HELP["prefix"]),
    all_: bool = typer.Option(False, "--all", "-a", help=OPTION_HELP["all"]),
    verbose: bool = typer.Option(False, "--verbose", help=OPTION_HELP["verbose"]),
):
    code = _run(cmd_list, verbose, repository=url, prefix=prefix, include_pre_release=all_)
    raise typer.Exit(code)


@app.command("now", help="Latest version")
def now_command(
    url: Optional[str] = typer.Option(None, "--url", "-u", help=OPTION_HELP["url"]),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-x", help=OPTION_HELP["prefix"]),
    all_: bool = typer.Option(False, "--all", "-a", help=OPTION_HELP["all"]),
    verbose: bool = typer.Option(False, "--verbose", help=OPTION_HELP["verbose"]),
):
    code = _run(cmd_latest, verbose, repository=url, prefix=prefix, include_pre_release=all_)
    raise typer.Exit(code)


@app.command("latest", help="Latest version (same as now)")
def latest_command(
    url: Optional[str] = typer.Option(None, "--url", "-u", help=OPTION_HELP["url"]),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-x", help=OPTION_HELP["prefix"]),
    all_: bool = typer.Option(False, "--all", "-a", help=OPTION_HELP["all"]),
    verbose: bool = typer.Option(False, "--verbose", help=OPTION_HELP["verbose"]),
):
    code = _run(cmd_latest, verbose, repository=url, prefix=prefix, include_pre_release=all_)
    raise typer.Exit(code)


def _bump_command(kind: BumpKind, help_text: str):
    def command(
        url: Optional[str] = typer.Option(None, "--url", "-u", help=OPTION_HELP["url"]),
        prefix: Optional[str] = typer.Option(None, "--prefix", "-x", help=OPTION_HELP["prefix"]),
        pre: bool = typer.Option(False, "--pre", "-p", help=OPTION_HELP["pre"]),
        pre_name: Optional[str] = typer.Option(None, "--pre-name", help=OPTION_HELP["pre_name"]),
        build: bool = typer.Option(False, "--build", "-b", help=OPTION_HELP["build"]),
        build_name: Optional[str] = typer.Option(None, "--build-name", help=OPTION_HELP["build_name"]),
        verbose: bool = typer.Option(False, "--verbose", help=OPTION_HELP["verbose"]),
    ):
        code = _run(
            cmd_bump,
            verbose,
            kind,
            repository=url,
            prefix=prefix,
            pre=pre,
            pre_name=pre_name,
            build=build,
            build_name=build_name,
        )
        raise typer.Exit(code)

    command.__name__ = f"{kind.value}_command"
    app.command(kind.value, help=help_text)(command)
    return command


major_command = _bump_command(BumpKind.MAJOR, "Next major version: vX.0.0")
minor_command = _bump_command(BumpKind.MINOR, "Next minor version: v0.X.0")
patch_command = _bump_command(BumpKind.PATCH, "Next patch version: v0.0.X")


def main(argv: list[str] | None = None) -> int:
    # Programmatic entry point that returns an int code; every failure is 1.
    try:
        # In non-standalone mode Click returns the typer.Exit code instead of exiting
        result = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
        return int(result or 0)
    except typer.Exit as e:
        return int(e.exit_code or 0)
    except click.exceptions.ClickException as e:
        e.show()
        return 1
    except click.exceptions.Abort:
        return 1
    except SystemExit as e:
        return 0 if e.code in (None, 0) else 1


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
