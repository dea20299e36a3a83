import time
import requests
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


def new_session() -> requests.Session:
    """Create a new requests session with default headers (no retries)"""
    session = requests.Session()

    # Set default headers
    session.headers.update(
        {"User-Agent": "placement-stats/1.0", "Accept": "application/json"}
    )

    return session


def get_json(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = 30,
) -> Any:
    """Single GET request with JSON parsing - no retries or rate limiting

    Args:
        session: HTTP session to use
        url: URL to fetch
        params: Optional query parameters
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON response

    Raises:
        requests.RequestException: On connection or HTTP errors
        ValueError: On invalid JSON responses
    """
    start = time.time()
    response = session.get(url, params=params, timeout=timeout)
    response.raise_for_status()

    data = response.json()
    logger.info(f"Fetched from {url}: {time.time() - start:.2f} seconds")
    return data
