#!/usr/bin/env python3
"""
Peers Extractor
Counts the node's peers from /system/peers
"""

from ..exceptions import ProjectionError
from ..registry import MetricRegistry
from .base import BaseExtractor


class PeersExtractor(BaseExtractor):
    stage = "peers"
    path = "/system/peers"

    def extract(self, registry: MetricRegistry) -> None:
        peers = self.fetch()
        if not isinstance(peers, list):
            raise ProjectionError(self.path, f"expected an array, got {type(peers).__name__}")

        registry.set_static("peers_count", len(peers))
        self.logger.info(f"Peers: {len(peers)}")
