"""CLI for cloning every repository of the selected organizations."""

from __future__ import annotations

import typer
from tqdm.contrib.logging import logging_redirect_tqdm

from ...config.settings import get_settings
from ...core.errors import ConfigurationError, GhcloneError
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.log import setup_logging
from ...core.reporting import HeadlessReporter, TerminalReporter
from ...services.clone import clone_organizations, selection_choices, validate_destination

app = typer.Typer(add_completion=False)


@app.callback(invoke_without_command=True)
def clone(
    destination: str | None = typer.Option(
        None, "--destination", "-d", help="Destination folder where repositories will be cloned"
    ),
    token: str | None = typer.Option(None, "--token", "-t", help="GitHub authentication token"),
    org: list[str] = typer.Option(None, "--org", "-o", help="Organization to clone, repeatable (skips the prompt)"),
    ssh: bool = typer.Option(False, "--ssh", help="Clone over SSH instead of HTTPS"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Clone all repositories from your account (organizations & personal).

    Token permissions: [read:org], [repo].
    """
    s = get_settings()
    log = setup_logging(verbose)
    _destination = destination or s.destination
    _token = token if token is not None else s.github_token

    try:
        if not _destination:
            raise ConfigurationError("Missing --destination")
        if not _token:
            raise ConfigurationError("Missing --token (or GITHUB_TOKEN)")
        dest = validate_destination(_destination)

        github = GitHubClient(_token, api_base=s.api_base, logger=log)
        git = GitClient(use_ssh=ssh or s.use_ssh, token=_token, logger=log)
        reporter = HeadlessReporter(org) if org else TerminalReporter()

        login = github.authenticated_login()
        choices = [login] if org else selection_choices(login, github.list_organizations())
        selected = reporter.prompt_selection(choices)
        if not selected:
            typer.echo("Nothing selected.")
            raise typer.Exit(code=0)

        # log lines go through tqdm.write while a bar is on screen
        with logging_redirect_tqdm(loggers=[log]):
            summary = clone_organizations(
                github=github,
                git=git,
                reporter=reporter,
                login=login,
                organizations=selected,
                destination=dest,
                logger=log,
            )
    except ConfigurationError as e:
        log.error("%s", e)
        raise typer.Exit(code=2) from e
    except GhcloneError as e:
        log.error("%s", e)
        raise typer.Exit(code=1) from e

    typer.echo(
        f"All selected repositories have been cloned successfully "
        f"(organizations={summary.organizations}, cloned={summary.cloned}, skipped={summary.skipped})."
    )
