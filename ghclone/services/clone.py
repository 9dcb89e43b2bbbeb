"""Services for the clone command."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..core.errors import ConfigurationError
from ..core.reporting import Reporter
from ..core.types import CloneOutcome, RepositoryDescriptor


class RepositoryLister(Protocol):
    def list_repositories(self, account: str, is_self: bool) -> Iterable[RepositoryDescriptor]: ...


class RepositoryCloner(Protocol):
    def clone_one(self, repo: RepositoryDescriptor, destination_root: str | Path) -> CloneOutcome: ...


@dataclass
class CloneSummary:
    organizations: int = 0
    cloned: int = 0
    skipped: int = 0

    @property
    def processed(self) -> int:
        return self.cloned + self.skipped


def validate_destination(destination: str | Path) -> Path:
    path = Path(destination).expanduser()
    if not path.is_dir():
        raise ConfigurationError(f'Destination : "{destination}" does not exist or is not a directory')
    return path


def selection_choices(login: str, organizations: Iterable[str]) -> list[str]:
    """The user's own login first, then every visible organization."""
    return [login, *(o for o in organizations if o != login)]


def clone_organizations(
    *,
    github: RepositoryLister,
    git: RepositoryCloner,
    reporter: Reporter,
    login: str,
    organizations: Sequence[str],
    destination: str | Path,
    logger: logging.Logger | None = None,
) -> CloneSummary:
    """Clone every non-archived repository of each organization, one at a time.

    Organizations are handled in the given order. The whole listing of an
    organization is fetched before its first clone so progress has a total.
    Any error from listing or cloning stops the run and propagates as is.
    """
    log = logger or logging.getLogger("ghclone")
    summary = CloneSummary()

    try:
        for organization in organizations:
            is_self = organization == login
            log.info('Cloning %s "%s"', "user" if is_self else "organization", organization)

            repositories = list(github.list_repositories(organization, is_self))
            total = len(repositories)
            log.debug("%d repositories to process for %s", total, organization)

            reporter.report_progress(0, total)
            for i, repo in enumerate(repositories, start=1):
                outcome = git.clone_one(repo, destination)
                if outcome is CloneOutcome.skipped:
                    summary.skipped += 1
                else:
                    summary.cloned += 1
                reporter.report_progress(i, total)

            summary.organizations += 1
            reporter.report_done(organization)
            log.info('Organization "%s" cloned successfully', organization)
    finally:
        reporter.close()

    return summary
