import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.path.join(os.path.expanduser("~"), ".hostrepo", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

QUIET, NORMAL, VERBOSE, TRACE = range(4)

class Logger:
    def __init__(self, verbosity=NORMAL):
        self.verbosity = verbosity
        self.log_file = os.path.join(
            LOG_DIR,
            f"hostrepo_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, err=False, prefix="", echo=True):
        timestamp = self._get_timestamp()
        log_message = f"[{timestamp}] [{level}] {message}\n"
        if echo:
            stream = sys.stderr if err else sys.stdout
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)

        # Debug and trace lines always land in the file, even when not echoed
        with open(self.log_file, "a") as f:
            f.write(log_message)

    def set_verbosity(self, verbosity):
        self.verbosity = verbosity

    def info(self, message):
        self._log("INFO", message, Fore.CYAN, echo=self.verbosity > QUIET)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}",
                  echo=self.verbosity > QUIET)

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, err=True,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, err=True,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM, echo=self.verbosity >= VERBOSE)

    def trace(self, message):
        self._log("TRACE", message, Fore.MAGENTA + Style.DIM, echo=self.verbosity >= TRACE)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, err=True,
                              echo=self.verbosity >= VERBOSE)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file():
    """Return the path to the latest log file."""
    log_files = [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
