"""Module holding constants used across ghclone."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "ghclone/0.1"
PER_PAGE = 100
HTTP_TIMEOUT_SEC = 30
ALREADY_CLONED_MARKER = "already exists and is not an empty directory"
