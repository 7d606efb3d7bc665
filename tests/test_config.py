import os
import shutil
import tempfile
import toml
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from hostrepo import config
from hostrepo.cli_logger import logger
from hostrepo.commands.config import config as config_command
import json

class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "host": {
                "platform": "el-7-x86_64",
                "pe": False,
            },
            "buildserver": {
                "url": "http://builds.example.com",
                "build_repos": ["PC1"],
            },
        }
        config.save_config(self.sample_config, path=self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        cfg = config.load_config(path=self.test_dir)
        self.assertEqual(cfg, {})

    def test_load_config_invalid_toml(self):
        with open(self.config_path, "w") as f:
            f.write("[host\nplatform = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_save_and_load_config(self):
        """Test saving a config and then loading it back."""
        self.assertTrue(os.path.exists(self.config_path))
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config, self.sample_config)
        with open(self.config_path, "r") as f:
            toml_content = toml.load(f)
        self.assertEqual(toml_content, self.sample_config)

    def test_get_setting(self):
        self.assertEqual(config.get_setting(self.sample_config, "host.platform"), "el-7-x86_64")
        self.assertEqual(config.get_setting(self.sample_config, "host.missing", "x"), "x")
        self.assertIsNone(config.get_setting(self.sample_config, "host.platform.deeper"))

    def test_get_value(self):
        """Test getting a value from the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'host.platform'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'el-7-x86_64')

    def test_get_non_existent_value(self):
        """Test getting a non-existent value from the config via the CLI."""
        runner = CliRunner()
        with patch.object(logger, "error") as mock_error:
            result = runner.invoke(config_command, ['get', 'host.nonexistent'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        mock_error.assert_called_once_with("Error: Key 'host.nonexistent' not found in hostrepo.toml")

    def test_set_nested_value(self):
        """Test setting a nested value in the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'host.platform', 'debian-8-amd64'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config['host']['platform'], 'debian-8-amd64')

    def test_set_typed_values(self):
        runner = CliRunner()
        runner.invoke(config_command, ['set', 'host.pe', 'true'], obj={"path": self.test_dir})
        runner.invoke(config_command, ['set', 'host.port', '2222'], obj={"path": self.test_dir})
        runner.invoke(config_command, ['set', 'buildserver.build_repos', 'PC1, PC2'], obj={"path": self.test_dir})
        loaded_config = config.load_config(path=self.test_dir)
        self.assertIs(loaded_config['host']['pe'], True)
        self.assertEqual(loaded_config['host']['port'], 2222)
        self.assertEqual(loaded_config['buildserver']['build_repos'], ['PC1', 'PC2'])

    def test_unset_nested_value(self):
        """Test unsetting a nested value in the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['unset', 'host.pe'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        loaded_config = config.load_config(path=self.test_dir)
        self.assertNotIn('pe', loaded_config['host'])

    def test_list_config(self):
        """Test listing all config values via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['list'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)

    def test_init_refuses_to_overwrite(self):
        runner = CliRunner()
        with patch.object(logger, "error") as mock_error:
            runner.invoke(config_command, ['init'], obj={"path": self.test_dir})
        mock_error.assert_called_once()
        self.assertEqual(config.load_config(path=self.test_dir), self.sample_config)

    def test_init_force(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['init', '--force'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(config.load_config(path=self.test_dir), config.DEFAULT_CONFIG)

if __name__ == "__main__":
    unittest.main()
