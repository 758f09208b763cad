#!/usr/bin/env python3
"""
Textfile Exposition
Writes a MetricRegistry in the Prometheus text format for the textfile collector
"""

import logging
import os

from prometheus_client import write_to_textfile

from .exceptions import ExpositionError
from .models import TEXTFILE_NAME
from .registry import MetricRegistry

logger = logging.getLogger(__name__)


def write_textfile(registry: MetricRegistry, output_dir: str = ".",
                   filename: str = TEXTFILE_NAME) -> str:
    """
    Write the registry to <output_dir>/<filename>.

    prometheus_client writes to a temporary file and renames it over the
    target, so an existing file is either fully replaced or left untouched.

    Returns:
        Path of the written file
    """
    if not os.path.isdir(output_dir):
        raise ExpositionError(output_dir, "output directory does not exist")

    path = os.path.join(output_dir, filename)
    try:
        write_to_textfile(path, registry.collector_registry)
    except OSError as e:
        raise ExpositionError(path, str(e)) from e

    logger.info(f"Wrote {len(registry)} metrics to {path}")
    return path
