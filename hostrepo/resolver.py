from .cli_logger import logger as default_logger
from .conventions import PlatformFamily, classify, fedora_prefix, normalize_variant
from .errors import RepositoryUnreachable
from .platform import parse_platform

DEFAULT_EL_REPOS = ["products", "devel"]
DEFAULT_DEBIAN_REPO = "main"


def _flatten(repos):
    """A single repo name or nested lists of them, as one flat list."""
    if not repos:
        return []
    if isinstance(repos, str):
        return [repos]
    flat = []
    for repo in repos:
        flat.extend(_flatten(repo))
    return flat


class RepoResolver:
    """Finds the package repo to install from for one host platform.

    Args:
        platform: platform descriptor (string or Platform).
        probe: an ExistenceProbe (anything with ``path_exists`` / ``link_exists``).
        logger: sink for trace/debug messages.
    """

    def __init__(self, platform, probe, logger=None):
        self.platform = parse_platform(platform)
        self.family = classify(self.platform)
        self.probe = probe
        self.logger = logger or default_logger

    def default_candidates(self, build_repos=None):
        """Custom repos first, then the EL defaults."""
        candidates = _flatten(build_repos)
        if self.family is PlatformFamily.EL:
            candidates.extend(DEFAULT_EL_REPOS)
        return candidates

    def candidate_exists(self, buildserver_url, package_name, build_version, repo_name):
        """
        Tests for a package repo at the platform's path.

        Returns:
            str | None: the link (EL) or path (Debian) of the repo if it exists.
        """
        variant, version, arch, codename = self.platform.to_array()
        variant = normalize_variant(variant)

        if self.family is PlatformFamily.EL:
            link = (
                f"{buildserver_url}/{package_name}/{build_version}/repos/"
                f"{variant}/{fedora_prefix(variant)}{version}/{repo_name}/{arch}/"
            )
            return link if self.probe.link_exists(link) else None

        if self.family is PlatformFamily.DEBIAN:
            path = f"/root/{package_name}/{codename or ''}/{repo_name}"
            return path if self.probe.path_exists(path) else None

        return None

    def _search(self, candidates, buildserver_url, package_name, build_version):
        for repo in candidates:
            repo_path = self.candidate_exists(buildserver_url, package_name, build_version, repo)
            if repo_path:
                self.logger.debug(f"found repo at {repo}:{repo_path}")
                return repo_path
            self.logger.debug(f"couldn't find link at {repo}, falling back to next option...")
        return None

    def resolve(self, build_repos, buildserver_url, package_name, build_version):
        """
        Gets the path to the repo for the given package.

        On EL platforms a repo that cannot be reached raises
        RepositoryUnreachable; Debian platforms fall back to the 'main' repo.
        """
        candidates = self.default_candidates(build_repos)
        self.logger.trace(f"Package repos to search: '{candidates}'")
        repo_path = self._search(candidates, buildserver_url, package_name, build_version)

        if self.family is PlatformFamily.EL:
            # Re-checked even when the search came up empty
            if not self.probe.link_exists(repo_path):
                raise RepositoryUnreachable(repo_path)
        elif self.family is PlatformFamily.DEBIAN:
            if repo_path is None:
                repo_path = DEFAULT_DEBIAN_REPO
                self.logger.debug(f"using default repo '{repo_path}'")

        return repo_path
