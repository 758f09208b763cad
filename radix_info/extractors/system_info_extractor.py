#!/usr/bin/env python3
"""
System Info Extractor
Registers every numeric field of /system/info as a gauge
"""

from typing import Any, Dict, FrozenSet

from ..client import RadixNodeClient
from ..flatten import filter_keys, flatten_json
from ..models import INFO_DENYLIST
from ..registry import MetricRegistry
from .base import BaseExtractor


class SystemInfoExtractor(BaseExtractor):
    """Flattens /system/info, drops denylisted keys and registers numeric leaves"""

    stage = "system_info"
    path = "/system/info"

    def __init__(self, client: RadixNodeClient, prefix: str = "radix_",
                 denylist: FrozenSet[str] = INFO_DENYLIST):
        super().__init__(client)
        self.prefix = prefix
        self.denylist = denylist

    def flatten(self, document: Any) -> Dict[str, Any]:
        return filter_keys(flatten_json(document, self.prefix), self.denylist)

    def extract(self, registry: MetricRegistry) -> None:
        flat = self.flatten(self.fetch())
        registered = registry.register_numeric(flat)
        self.logger.info(f"Registered {len(registered)} of {len(flat)} info fields")
