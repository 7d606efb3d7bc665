import shlex
from dataclasses import dataclass

from .cli_logger import logger
from .errors import CommandFailure
from .utils import run_shell_command


@dataclass(frozen=True)
class CommandResult:
    command: str
    exit_code: int
    stdout: str
    stderr: str


class LocalExecutor:
    """Runs commands on this machine."""

    def run(self, command, input_data=None):
        return run_shell_command(command, input_data=input_data)

    def close(self):
        pass


class UnixHost:
    """File helpers for a Unix host, local or remote.

    ``executor`` is anything with a ``run(command)`` method returning
    ``(stdout, stderr, return_code)``: a :class:`LocalExecutor` or an
    :class:`~hostrepo.utils.SSHExecutor`.
    """

    def __init__(self, executor=None, name="localhost"):
        self.executor = executor or LocalExecutor()
        self.name = name

    def __str__(self):
        return self.name

    def exec(self, command, acceptable_exit_codes=(0,)):
        """Run ``command``; raise CommandFailure if its exit code is not acceptable."""
        stdout, stderr, exit_code = self.executor.run(command)
        result = CommandResult(command, exit_code, stdout, stderr)
        logger.trace(f"{self.name}: '{command}' exited with {exit_code}")
        if exit_code not in acceptable_exit_codes:
            raise CommandFailure(result)
        return result

    def tmpfile(self, name):
        return self.exec(f"mktemp -t {name}.XXXXXX").stdout.strip()

    def tmpdir(self, name):
        return self.exec(f"mktemp -dt {name}.XXXXXX").stdout.strip()

    def system_temp_path(self):
        return "/tmp"

    def scp_path(self, path):
        # Only Windows hosts need translation
        return path

    def path_split(self, paths):
        return paths.split(":")

    def file_exist(self, path):
        result = self.exec(f"test -e {shlex.quote(path)}", acceptable_exit_codes=(0, 1))
        return result.exit_code == 0

    def directory_exists(self, path):
        result = self.exec(f"[[ -d {shlex.quote(path)} ]]", acceptable_exit_codes=(0, 1))
        return result.exit_code == 0

    def close(self):
        self.executor.close()
