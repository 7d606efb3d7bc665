from .command_executor import run_shell_command
from .remote_executor import SSHConfig, SSHExecutor
