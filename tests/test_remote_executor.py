import unittest
from unittest.mock import patch, MagicMock
import paramiko
from hostrepo.errors import ProbeFailure
from hostrepo.utils import SSHConfig, SSHExecutor

class TestSSHExecutor(unittest.TestCase):

    def setUp(self):
        self.config = SSHConfig(host="agent", user="root", password="secret", key_path="/nonexistent/key")

    @patch("paramiko.SSHClient")
    def test_connects_with_password(self, mock_client_cls):
        client = mock_client_cls.return_value
        executor = SSHExecutor(self.config, timeout=10)
        self.assertIs(executor.connect(), client)
        client.connect.assert_called_once_with(
            password="secret", hostname="agent", port=22, username="root",
            timeout=10, allow_agent=False, look_for_keys=False,
        )

    @patch("paramiko.SSHClient")
    def test_connect_is_reused(self, mock_client_cls):
        executor = SSHExecutor(self.config)
        executor.connect()
        executor.connect()
        self.assertEqual(mock_client_cls.call_count, 1)

    @patch("paramiko.SSHClient")
    def test_no_credentials(self, mock_client_cls):
        executor = SSHExecutor(SSHConfig(host="agent", key_path="/nonexistent/key"))
        with self.assertRaises(ProbeFailure):
            executor.connect()
        mock_client_cls.return_value.close.assert_called_once_with()

    @patch("paramiko.SSHClient")
    def test_connection_error_is_a_probe_failure(self, mock_client_cls):
        mock_client_cls.return_value.connect.side_effect = OSError("No route to host")
        with self.assertRaisesRegex(ProbeFailure, "No route to host"):
            SSHExecutor(self.config).connect()

    @patch("paramiko.SSHClient")
    def test_run(self, mock_client_cls):
        client = mock_client_cls.return_value
        stdout = MagicMock()
        stdout.channel.recv_exit_status.return_value = 1
        stdout.read.return_value = b""
        stderr = MagicMock()
        stderr.read.return_value = b""
        client.exec_command.return_value = (MagicMock(), stdout, stderr)

        result = SSHExecutor(self.config, timeout=10).run("[[ -d /root/pkg ]]")

        self.assertEqual(result, ("", "", 1))
        client.exec_command.assert_called_once_with("bash -c '[[ -d /root/pkg ]]'", timeout=10)

    @patch("paramiko.SSHClient")
    def test_run_channel_error(self, mock_client_cls):
        mock_client_cls.return_value.exec_command.side_effect = paramiko.SSHException("channel closed")
        with self.assertRaises(ProbeFailure):
            SSHExecutor(self.config).run("true")

    @patch("paramiko.SSHClient")
    def test_context_manager_closes(self, mock_client_cls):
        with SSHExecutor(self.config):
            pass
        mock_client_cls.return_value.close.assert_called_once_with()

if __name__ == "__main__":
    unittest.main()
