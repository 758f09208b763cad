"""
radix-info: one-shot Prometheus textfile exporter for Radix validator nodes
"""

from .harvester import RadixInfoHarvester, setup_logging
from .registry import MetricRegistry
from .client import RadixNodeClient
from .models import HarvesterConfig, INFO_DENYLIST, STATIC_METRICS
from .flatten import flatten_json, filter_keys, load_json
from .utils import min_max
from .exposition import write_textfile
from .exceptions import *


__version__ = "1.0.0"
__author__ = "PGDN Team"

__all__ = [
    "RadixInfoHarvester",
    "MetricRegistry",
    "RadixNodeClient",
    "HarvesterConfig",
    "INFO_DENYLIST",
    "STATIC_METRICS",
    "flatten_json",
    "filter_keys",
    "load_json",
    "min_max",
    "write_textfile",
    "setup_logging",
    "RadixInfoError",
    "TransportError",
    "MalformedInputError",
    "FlattenError",
    "ProjectionError",
    "EmptyAggregationError",
    "NameCollisionError",
    "InvalidMetricNameError",
    "ExpositionError",
    "HarvestError"
]
