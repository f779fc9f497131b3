"""GitHub authentication for release index requests.

Anonymous requests to the GitHub API are rate limited per runner IP, which
shared runners exhaust quickly. When a token is supplied it is sent with
every API request.
"""

from __future__ import annotations

import re

from frieza_action.logger import get_logger

logger = get_logger(__name__)

MAX_TOKEN_LENGTH: int = 255

_PREFIXED_TOKEN_PATTERNS = (
    r"^ghp_[A-Za-z0-9_]{36,251}$",  # Personal Access Tokens
    r"^gho_[A-Za-z0-9_]{36,251}$",  # OAuth Access tokens
    r"^ghu_[A-Za-z0-9_]{36,251}$",  # GitHub App user-to-server tokens
    r"^ghs_[A-Za-z0-9_]{36,251}$",  # GitHub App server-to-server tokens
    r"^ghr_[A-Za-z0-9_]{36,251}$",  # GitHub App refresh tokens
    r"^github_pat_[A-Za-z0-9_]{36,243}$",  # Fine-grained PATs
)


def validate_github_token(token: str | None) -> bool:
    """Validate GitHub token format.

    Accepts legacy 40 hex character tokens and the prefixed formats
    (``ghp_``, ``gho_``, ``ghu_``, ``ghs_``, ``ghr_``, ``github_pat_``).

    Args:
        token: The token to validate. ``None`` is invalid.

    Returns:
        True if the token format is valid, False otherwise.

    """
    if not token or not isinstance(token, str):
        return False

    token = token.strip()
    if not token or len(token) > MAX_TOKEN_LENGTH:
        return False

    if re.match(r"^[a-f0-9]{40}$", token):
        return True

    return any(
        re.match(pattern, token) for pattern in _PREFIXED_TOKEN_PATTERNS
    )


class GitHubAuth:
    """Apply an optional GitHub token to request headers."""

    def __init__(self, token: str | None = None) -> None:
        """Initialize with an optional token.

        Malformed tokens are dropped with a warning so a bad secret does not
        break anonymous access.
        """
        self._token: str | None = None
        if token:
            if validate_github_token(token):
                self._token = token.strip()
            else:
                logger.warning("Ignoring malformed GitHub token")

    def is_authenticated(self) -> bool:
        """Return True if a valid token is configured."""
        return self._token is not None

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Return a copy of headers with the Authorization header set."""
        result = dict(headers)
        if self._token:
            result["Authorization"] = f"Bearer {self._token}"
        return result
