"""Cloning one repository into the destination tree."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from .constants import ALREADY_CLONED_MARKER
from .errors import CloneError
from .github_client import GitHubClient
from .types import CloneOutcome, RepositoryDescriptor

log = logging.getLogger("ghclone")


class GitClient:
    def __init__(
        self,
        *,
        use_ssh: bool = False,
        token: str | None = None,
        git: str = "git",
        logger: logging.Logger | None = None,
    ) -> None:
        self.use_ssh = use_ssh
        self.token = token
        self.git = git
        self.log = logger or log

    # ---------- process helpers ----------
    def _run_out(self, cmd: list[str], cwd: str | None = None) -> tuple[bool, str]:
        env = os.environ.copy()
        # never block on a credential prompt
        env["GIT_TERMINAL_PROMPT"] = "0"
        # the already-cloned check matches git's English message
        env["LC_ALL"] = "C"
        try:
            proc = subprocess.run(cmd, cwd=cwd, env=env, capture_output=True, text=True)
        except OSError as e:
            return False, f"{e}"
        return proc.returncode == 0, (proc.stderr or proc.stdout or "").strip()

    def _redact(self, text: str) -> str:
        return text.replace(self.token, "***") if self.token else text

    def remote_url(self, repo: RepositoryDescriptor) -> str:
        if self.use_ssh:
            if not repo.ssh_url:
                raise CloneError(repo.full_name, "no SSH URL in the listing")
            return repo.ssh_url
        if self.token:
            return GitHubClient.inject_token_into_https(repo.clone_url, self.token)
        return repo.clone_url

    def _forget_token(self, repo: RepositoryDescriptor, target: Path) -> None:
        """Point origin back at the plain HTTPS URL so the token is not kept in .git/config."""
        if self.use_ssh or not self.token:
            return
        ok, out = self._run_out([self.git, "-C", str(target), "remote", "set-url", "origin", repo.clone_url])
        if not ok:
            raise CloneError(repo.full_name, self._redact(out) or "could not reset origin URL")

    # ---------- clone ----------
    def clone_one(self, repo: RepositoryDescriptor, destination_root: str | Path) -> CloneOutcome:
        """Clone `repo` into `destination_root/<owner>/<name>`.

        A target that is already a non-empty directory is reported as skipped;
        every other git failure raises CloneError.
        """
        target = Path(destination_root) / repo.full_name
        target.mkdir(parents=True, exist_ok=True)

        cmd = [self.git, "-c", "credential.helper=", "clone", self.remote_url(repo), str(target)]
        ok, out = self._run_out(cmd)
        if ok:
            self._forget_token(repo, target)
            self.log.debug("cloned %s into %s", repo.full_name, target)
            return CloneOutcome.cloned
        if ALREADY_CLONED_MARKER in out:
            self.log.info("skip (exists): %s", repo.full_name)
            return CloneOutcome.skipped
        raise CloneError(repo.full_name, self._redact(out) or "unknown error")
