#!/usr/bin/env python3
"""
Metric Registry
Append-only set of named gauges backed by a prometheus_client CollectorRegistry
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from prometheus_client import CollectorRegistry, Gauge

from .exceptions import InvalidMetricNameError, NameCollisionError
from .models import STATIC_METRICS, StaticMetric
from .utils import is_number

logger = logging.getLogger(__name__)

METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")


class MetricRegistry:
    """
    Named gauges for a single harvest run.

    Static gauges are declared up front from the static metric table and set
    by the extractors; dynamic gauges are added as they are discovered. A name
    can only be registered once, a second registration raises
    NameCollisionError. Gauges are never removed.
    """

    def __init__(self, namespace: str = "radix_validator",
                 static_metrics: Optional[Mapping[str, StaticMetric]] = None):
        self.namespace = namespace
        self.collector_registry = CollectorRegistry()
        self._gauges: Dict[str, Gauge] = {}
        self._static_names: Dict[str, str] = {}

        if static_metrics is None:
            static_metrics = STATIC_METRICS
        for key, metric in static_metrics.items():
            self._static_names[key] = metric.full_name(namespace)
            self.declare(self._static_names[key], metric.documentation)

    def declare(self, name: str, documentation: str = "") -> Gauge:
        """Create a gauge under name, failing if the name is taken or invalid"""
        if not METRIC_NAME_RE.match(name):
            raise InvalidMetricNameError(name)
        if name in self._gauges:
            raise NameCollisionError(name)

        gauge = Gauge(name, documentation, registry=self.collector_registry)
        self._gauges[name] = gauge
        return gauge

    def static_name(self, key: str) -> str:
        """Full exposed name of a static metric, e.g. peers_count"""
        return self._static_names[key]

    def set_static(self, key: str, value: float) -> None:
        name = self.static_name(key)
        self._gauges[name].set(value)
        logger.debug(f"{name} = {value}")

    def register(self, name: str, value: float, documentation: str = "") -> None:
        """Register a dynamically discovered gauge and set its value"""
        self.declare(name, documentation).set(value)

    def register_numeric(self, flat: Mapping[str, Any]) -> List[str]:
        """
        Register every numeric entry of a flattened mapping.

        Strings, booleans, nulls and integers too large for a float are
        skipped; names are used verbatim.

        Returns:
            Names of the gauges that were registered
        """
        registered = []
        for name, value in flat.items():
            if not is_number(value):
                logger.debug(f"Skipping non-numeric field {name}")
                continue
            try:
                number = float(value)
            except OverflowError:
                logger.debug(f"Skipping {name}, too large for a float")
                continue
            self.register(name, number)
            registered.append(name)
        return registered

    def get(self, name: str) -> Optional[float]:
        """Current value of a gauge, None if it is not registered"""
        if name not in self._gauges:
            return None
        return self.collector_registry.get_sample_value(name)

    def get_static(self, key: str) -> Optional[float]:
        return self.get(self.static_name(key))

    def names(self) -> List[str]:
        return list(self._gauges)

    def as_dict(self) -> Dict[str, float]:
        return {name: self.get(name) for name in self._gauges}

    def __contains__(self, name: str) -> bool:
        return name in self._gauges

    def __len__(self) -> int:
        return len(self._gauges)
