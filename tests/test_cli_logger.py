import io
import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import patch
from hostrepo import cli_logger
from hostrepo.cli_logger import Logger

class TestLogger(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.logger = Logger()
        self.logger.log_file = os.path.join(self.test_dir, "test.log")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def read_log(self):
        with open(self.logger.log_file) as f:
            return f.read()

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_debug_is_quiet_by_default_but_logged(self, mock_stdout):
        self.logger.debug("found repo at products:http://bs/x/")
        self.assertEqual(mock_stdout.getvalue(), "")
        self.assertIn("[DEBUG] found repo at products:http://bs/x/", self.read_log())

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_verbose_echoes_debug(self, mock_stdout):
        self.logger.set_verbosity(cli_logger.VERBOSE)
        self.logger.debug("using default repo 'main'")
        self.logger.trace("not shown")
        self.assertIn("using default repo 'main'", mock_stdout.getvalue())
        self.assertNotIn("not shown", mock_stdout.getvalue())
        self.assertIn("[TRACE] not shown", self.read_log())

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_trace_echoes_everything(self, mock_stdout):
        self.logger.set_verbosity(cli_logger.TRACE)
        self.logger.trace("package repos: '['products', 'devel']'")
        self.assertIn("package repos", mock_stdout.getvalue())

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_errors_go_to_stderr(self, mock_stderr):
        self.logger.error("Unable to reach a repo directory at None")
        self.assertIn("Unable to reach a repo directory at None", mock_stderr.getvalue())
        self.assertIn("[ERROR]", self.read_log())

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_exception_logs_traceback(self, mock_stderr):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            self.logger.exception(*sys.exc_info())
        log = self.read_log()
        self.assertIn("An unhandled exception occurred: boom", log)
        self.assertIn("[TRACEBACK] >> RuntimeError: boom", log)

if __name__ == "__main__":
    unittest.main()
