#!/usr/bin/env python3
"""
Radix Info Harvester
Runs the four endpoint extractors in order and writes the textfile only if all succeed
"""

import logging
import sys
import time
from typing import List, Optional

from .client import RadixNodeClient
from .exceptions import HarvestError, RadixInfoError
from .exposition import write_textfile
from .extractors import (
    BaseExtractor,
    EpochProofExtractor,
    PeersExtractor,
    SystemInfoExtractor,
    ValidatorExtractor,
)
from .models import HarvesterConfig
from .registry import MetricRegistry


def setup_logging(level=logging.INFO):
    """Set up logging configuration to stderr only"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

logger = logging.getLogger(__name__)


class RadixInfoHarvester:
    """One-shot harvest of a Radix node's status into a Prometheus textfile"""

    def __init__(self, config: Optional[HarvesterConfig] = None,
                 client: Optional[RadixNodeClient] = None):
        self.config = config or HarvesterConfig()
        self._owns_client = client is None
        self.client = client or RadixNodeClient(self.config.base_url, timeout=self.config.timeout)

    def build_extractors(self) -> List[BaseExtractor]:
        """Extractors in the order they run"""
        return [
            SystemInfoExtractor(self.client, prefix=self.config.prefix),
            PeersExtractor(self.client),
            EpochProofExtractor(self.client),
            ValidatorExtractor(self.client),
        ]

    def collect(self) -> MetricRegistry:
        """
        Run every extractor against a fresh registry.

        Stops at the first failure and raises HarvestError naming the stage.
        """
        registry = MetricRegistry(namespace=self.config.namespace)

        for extractor in self.build_extractors():
            start_time = time.time()
            try:
                extractor.extract(registry)
            except RadixInfoError as e:
                logger.error(f"Stage {extractor.stage} failed: {e}")
                raise HarvestError(extractor.stage, e) from e
            logger.debug(f"Stage {extractor.stage} done in {time.time() - start_time:.3f}s")

        return registry

    def run(self) -> str:
        """Collect all metrics, then write the textfile. Returns its path."""
        logger.info(f"Harvesting {self.config.base_url}")
        try:
            registry = self.collect()
            try:
                return write_textfile(registry, self.config.output_dir, self.config.filename)
            except RadixInfoError as e:
                logger.error(f"Stage write failed: {e}")
                raise HarvestError("write", e) from e
        finally:
            if self._owns_client:
                self.client.close()
