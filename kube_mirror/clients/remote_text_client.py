import logging
import time

import requests

from kube_mirror.errors import FetchError

logger = logging.getLogger(__name__)


class RemoteTextClient:
    def __init__(self, timeout: float = 30, retries: int = 3, retry_delay: float = 2):
        self.timeout: float = timeout
        self.retries: int = retries
        self.retry_delay: float = retry_delay

    def fetch(self, url: str) -> str:
        attempts = max(self.retries, 0) + 1
        for attempt in range(1, attempts + 1):
            try:
                return self._get(url)
            except FetchError as e:
                retryable = e.status_code is None or e.status_code >= 500
                if not retryable or attempt == attempts:
                    raise
                logger.warning(f"Attempt {attempt}/{attempts} to fetch {url} failed: {e}")
                time.sleep(self.retry_delay)
        raise FetchError(url, "no attempt made")

    def _get(self, url: str) -> str:
        headers = {"Accept": "*/*"}
        try:
            response = requests.get(url=url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        if response.status_code != 200:
            raise FetchError(url, f"responded with status: {response.status_code}", response.status_code)
        return response.text
