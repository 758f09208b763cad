#!/usr/bin/env python3
"""
Base Extractor
Shared shape of the per-endpoint extractors
"""

import logging
from abc import ABC, abstractmethod

from ..client import RadixNodeClient
from ..registry import MetricRegistry


class BaseExtractor(ABC):
    """Fetches one endpoint and writes its gauges into a registry"""

    stage = "base"
    method = "GET"
    path = "/"

    def __init__(self, client: RadixNodeClient):
        self.client = client
        self.logger = logging.getLogger(f"{__package__}.{self.stage}")

    def fetch(self):
        if self.method == "POST":
            return self.client.post_json(self.path)
        return self.client.get_json(self.path)

    @abstractmethod
    def extract(self, registry: MetricRegistry) -> None:
        """Fetch the endpoint and register its metrics"""
