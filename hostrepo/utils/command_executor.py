import subprocess
from ..cli_logger import logger

def run_shell_command(command, env=None, input_data=None, cwd=None, timeout=None):
    """
    Executes a command on the local machine.

    Args:
        command (list | str): The command to execute. A string is handed to
            ``bash -c`` so shell tests such as ``[[ -d /path ]]`` work.
        env (dict, optional): A dictionary of environment variables.
        input_data (str, optional): Data to be passed to the command's stdin.
        cwd (str, optional): The working directory for the command.
        timeout (float, optional): Seconds before the command is killed.

    Returns:
        A tuple (stdout, stderr, return_code). A return code of -1 means the
        command could not be started at all.
    """
    if isinstance(command, str):
        command = ["bash", "-c", command]
    logger.trace(f"Running local command: {command}")
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            input=input_data,
            check=False,
            cwd=cwd,
            timeout=timeout,
        )
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return "", str(e), -1
    except subprocess.TimeoutExpired as e:
        logger.error(f"Command timed out after {e.timeout} seconds: {command}")
        return "", str(e), -1
