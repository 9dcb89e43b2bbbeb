"""Exceptions raised by ghclone."""


class GhcloneError(RuntimeError):
    pass


class ConfigurationError(GhcloneError):
    """Bad local setup, detected before any network call."""


class GitHubError(GhcloneError):
    """The GitHub API answered with something we cannot use."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthorizationError(GitHubError):
    """Invalid or expired token, or missing scope (HTTP 401/403)."""


class TransportError(GhcloneError):
    """Network failure while talking to GitHub or a git remote."""


class CloneError(TransportError):
    """`git clone` failed for a reason other than an existing clone."""

    def __init__(self, full_name: str, detail: str) -> None:
        super().__init__(f"git clone failed for {full_name}: {detail}")
        self.full_name = full_name
        self.detail = detail
