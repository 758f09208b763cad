#!/usr/bin/env python3
"""
Radix Node Client
Blocking HTTP access to the node's status endpoints
"""

import logging
from typing import Any, Optional

import requests

from .exceptions import TransportError
from .flatten import load_json
from .models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class RadixNodeClient:
    """Fetches raw payloads from a Radix node; every failure is a TransportError"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'radix-info/1.0',
            'Accept': 'application/json'
        })

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch(self, method: str, path: str) -> bytes:
        """
        Issue a request with an empty body and return the response body.

        Args:
            method: GET or POST
            path: Endpoint path relative to the base URL

        Returns:
            Raw response body
        """
        url = self.url(path)
        method = method.upper()
        headers = {'Content-Type': 'application/json'} if method == "POST" else None

        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise TransportError(url, method, f"timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            raise TransportError(url, method, f"HTTP {e.response.status_code}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(url, method, str(e)) from e

        logger.debug(f"{method} {url} -> {response.status_code} ({len(response.content)} bytes)")
        return response.content

    def get_json(self, path: str) -> Any:
        return load_json(self.fetch("GET", path), self.url(path))

    def post_json(self, path: str) -> Any:
        return load_json(self.fetch("POST", path), self.url(path))

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
