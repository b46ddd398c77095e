"""HTTP transport built on requests."""
import logging
from typing import Callable, Optional

import requests

from tvdbapi.exceptions import TVDBError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "tvdbapi/0.1.0"


class HttpTransport:
    """Performs blocking GET requests and returns the raw body.

    A caller-supplied session is shared, never closed by the transport;
    thread safety across callers is whatever that session provides.
    """

    def __init__(self,
                 session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 user_agent: str = DEFAULT_USER_AGENT):
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent, "Accept": "application/xml, text/xml"}

    def get(self, url: str, redact: Optional[Callable[[str], str]] = None) -> bytes:
        """Fetch ``url`` and return the body.

        Args:
            url: Fully built request URL
            redact: Hides secrets in text that reaches logs or exceptions

        Raises:
            TVDBError: On connection errors, timeouts, non-2xx status or an empty body
        """
        redact = redact or (lambda text: text)
        safe_url = redact(url)
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"HTTP {status} from {safe_url}")
            raise TVDBError(f"Unexpected HTTP status {status}", safe_url) from e
        except requests.Timeout as e:
            logger.error(f"Timed out after {self.timeout}s: {safe_url}")
            raise TVDBError(f"Request timed out after {self.timeout}s", safe_url) from e
        except requests.RequestException as e:
            # requests quotes the request path in connection errors
            reason = redact(str(e))
            logger.error(f"Request failed for {safe_url}: {reason}")
            raise TVDBError(f"Unable to reach host: {reason}", safe_url) from e

        body = response.content
        if not body or not body.strip():
            logger.error(f"Empty response body from {safe_url}")
            raise TVDBError("Empty response body", safe_url)
        return body

    def close(self):
        """Close the session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
