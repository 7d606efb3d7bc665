class HostRepoError(Exception):
    """Base class for all hostrepo errors."""


class UnsupportedPlatform(HostRepoError, ValueError):
    """Raised when an operation has no convention for the host's platform."""


class RepositoryUnreachable(HostRepoError, RuntimeError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Unable to reach a repo directory at {path}")


class ProbeFailure(HostRepoError):
    """An existence check ended with something other than exists / does not exist."""


class CommandFailure(ProbeFailure):
    def __init__(self, result):
        self.result = result
        super().__init__(
            f"Command '{result.command}' exited with code {result.exit_code}: "
            f"{result.stderr.strip() or result.stdout.strip()}"
        )
