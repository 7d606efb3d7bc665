from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import paramiko

from ..cli_logger import logger
from ..errors import ProbeFailure

_PRIVATE_KEY_NAMES = ["id_ed25519", "id_rsa", "id_ecdsa"]


@dataclass
class SSHConfig:
    host: str
    port: int = 22
    user: str = "root"
    password: Optional[str] = None
    key_path: Optional[str] = None


class SSHExecutor:
    """Runs commands on a remote host over SSH.

    Same calling convention as ``run_shell_command``: ``run()`` returns
    ``(stdout, stderr, return_code)``.
    """

    def __init__(self, config: SSHConfig, timeout: int = 30) -> None:
        self._config = config
        self._timeout = timeout
        self._client: Optional[paramiko.SSHClient] = None

    def _resolve_key_path(self) -> Optional[str]:
        if self._config.key_path:
            expanded = os.path.expanduser(os.path.expandvars(self._config.key_path))
            if os.path.isfile(expanded):
                return expanded
            return None
        ssh_dir = Path.home() / ".ssh"
        for name in _PRIVATE_KEY_NAMES:
            candidate = ssh_dir / name
            if candidate.is_file():
                return str(candidate)
        return None

    def connect(self) -> paramiko.SSHClient:
        if self._client is not None:
            return self._client

        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        connect_kwargs: dict = {
            "hostname": self._config.host,
            "port": self._config.port,
            "username": self._config.user,
            "timeout": self._timeout,
            "allow_agent": False,
            "look_for_keys": False,
        }

        key_path = self._resolve_key_path()
        try:
            if key_path:
                try:
                    client.connect(key_filename=key_path, passphrase=self._config.password, **connect_kwargs)
                    logger.debug(f"[SSH] Connected to {self._config.host} via key: {os.path.basename(key_path)}")
                    self._client = client
                    return client
                except paramiko.AuthenticationException:
                    logger.warning("[SSH] Key auth failed, falling back to password")

            if not self._config.password:
                client.close()
                raise ProbeFailure(f"No usable SSH credentials for {self._config.user}@{self._config.host}")
            client.connect(password=self._config.password, **connect_kwargs)
            logger.debug(f"[SSH] Connected to {self._config.host} via password")
        except (paramiko.SSHException, OSError) as e:
            client.close()
            raise ProbeFailure(f"SSH connection to {self._config.host}:{self._config.port} failed: {e}") from e

        self._client = client
        return client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug(f"[SSH] Disconnected from {self._config.host}")

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()

    def run(self, command, input_data=None):
        if not isinstance(command, str):
            command = " ".join(shlex.quote(part) for part in command)
        client = self.connect()
        remote_command = f"bash -c {shlex.quote(command)}"
        logger.trace(f"[SSH] {self._config.host}: {remote_command}")
        try:
            stdin, stdout, stderr = client.exec_command(remote_command, timeout=self._timeout)
            if input_data is not None:
                stdin.write(input_data)
                stdin.flush()
                stdin.channel.shutdown_write()
            exit_code = stdout.channel.recv_exit_status()
            out = stdout.read().decode("utf-8", errors="replace")
            err = stderr.read().decode("utf-8", errors="replace")
        except (paramiko.SSHException, OSError) as e:
            raise ProbeFailure(f"SSH command failed on {self._config.host}: {e}") from e
        return out, err, exit_code
