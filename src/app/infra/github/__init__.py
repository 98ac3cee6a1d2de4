"""Cliente GitHub: rodízio de tokens, fetcher com retry e checks."""

from app.infra.github.checks import GitHubChecks
from app.infra.github.fetcher import GitHubFetcher
from app.infra.github.token_rotator import TokenRotator

__all__ = ["GitHubChecks", "GitHubFetcher", "TokenRotator"]
