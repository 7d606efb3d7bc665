from .conventions import PlatformFamily, classify, package_config_dir, repo_type, repo_filename
from .errors import HostRepoError, UnsupportedPlatform, RepositoryUnreachable, ProbeFailure, CommandFailure
from .host import UnixHost, LocalExecutor, CommandResult
from .noask import noask_text
from .platform import Platform, parse_platform
from .probe import ExistenceProbe
from .resolver import RepoResolver
