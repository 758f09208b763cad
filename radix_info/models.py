#!/usr/bin/env python3
"""
Radix Info Models
Run configuration and the static metric tables
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet


DEFAULT_BASE_URL = "http://localhost:3333"
DEFAULT_TIMEOUT = 10
TEXTFILE_NAME = "radix_info.prom"

# Stake fields on the epoch proof are fixed-point integers at this scale
STAKE_SCALE = 1e18

# Flattened /system/info names that are strings or pacemaker tuning knobs
INFO_DENYLIST: FrozenSet[str] = frozenset({
    "radix_info_system_version_system_version_agent_version",
    "radix_info_system_version_system_version_protocol_version",
    "radix_agent_protocol",
    "radix_agent_version",
    "radix_info_configuration_pacemakerRate",
    "radix_info_configuration_pacemakerTimeout",
    "radix_info_configuration_pacemakerMaxExponent",
})


@dataclass(frozen=True)
class StaticMetric:
    """Gauge declared before any endpoint is queried"""
    key: str
    documentation: str = ""

    def full_name(self, namespace: str) -> str:
        if not namespace:
            return self.key
        return f"{namespace}_{self.key}"


STATIC_METRICS: Dict[str, StaticMetric] = {
    metric.key: metric
    for metric in (
        StaticMetric("peers_count", "Count of Validator Peers"),
        StaticMetric("next_validators_count"),
        StaticMetric("next_validators_stake_min"),
        StaticMetric("next_validators_stake_max"),
        StaticMetric("stake_total"),
        StaticMetric("delegators_count"),
    )
}


@dataclass
class HarvesterConfig:
    """Settings for one harvest run"""
    base_url: str = DEFAULT_BASE_URL
    output_dir: str = "."
    timeout: int = DEFAULT_TIMEOUT
    prefix: str = "radix_"
    namespace: str = "radix_validator"
    filename: str = TEXTFILE_NAME

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")
