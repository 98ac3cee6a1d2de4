"""Parser de localização de código-fonte GitHub.

Gramática aceita: primeira ocorrência de `github.com` seguida de `/` ou `:`,
depois `<org>/<repo>`, onde org e repo são sequências sem `/`. Prefixos
(`url:`, esquema, `git@`) e sufixos (`/tree/main/...`) são ignorados e um
`.git` final no repo é removido.

Entrada sem match retorna None: o check GitHub "não se aplica", não é erro.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SOURCE_LOCATION_ANNOTATION = "backstage.io/source-location"

_GITHUB_LOCATION_RE = re.compile(r"github\.com[/:]([^/]+)/([^/]+)")


@dataclass(frozen=True, slots=True)
class GitHubRepoRef:
    """Par (org, repo) extraído de uma URL GitHub."""

    org: str
    repo: str


def parse_github_location(value: object) -> GitHubRepoRef | None:
    """Mapeia a anotação de source-location para (org, repo), se for GitHub.

    Exemplos:
        "url:https://github.com/acme/svc/tree/main/" -> GitHubRepoRef("acme", "svc")
        "git@github.com:acme/svc.git"                -> GitHubRepoRef("acme", "svc")
        "https://gitlab.com/acme/svc"                -> None
    """
    if not isinstance(value, str) or not value:
        return None

    match = _GITHUB_LOCATION_RE.search(value)
    if match is None:
        return None

    org, repo = match.group(1), match.group(2)
    repo = repo.removesuffix(".git")
    if not repo:
        return None
    return GitHubRepoRef(org=org, repo=repo)


__all__ = ["SOURCE_LOCATION_ANNOTATION", "GitHubRepoRef", "parse_github_location"]
