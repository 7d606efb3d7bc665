from urllib.parse import urljoin

import requests

from .cli_logger import logger
from .errors import ProbeFailure
from .host import UnixHost


class ExistenceProbe:
    """Answers "does this exist?" for host paths and buildserver links.

    Both checks return True or False; anything else (a command that exits
    with an unexpected code, a connection error) raises ProbeFailure.
    """

    def __init__(self, host=None, session=None, timeout=30):
        self.host = host or UnixHost()
        self.session = session or requests.Session()
        self.timeout = timeout

    def path_exists(self, path):
        return self.host.directory_exists(path)

    def link_exists(self, link, limit=10):
        """Check that ``link`` answers a HEAD request with 200, following redirects."""
        if not link:
            return False

        url = link
        for _ in range(limit + 1):
            try:
                response = self.session.head(url, allow_redirects=False, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                raise ProbeFailure(f"Error checking link {url}: {e}") from e

            if not response.is_redirect:
                logger.trace(f"HEAD {url} -> {response.status_code}")
                return response.status_code == 200
            url = urljoin(url, response.headers["location"])
            logger.trace(f"HEAD {link} redirected to {url}")

        logger.warning(f"Too many redirects while checking {link}")
        return False
