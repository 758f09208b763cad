#!/usr/bin/env python3
"""
Validator Extractor
Reads the node's own stake and delegators from /node/validator
"""

from ..registry import MetricRegistry
from ..utils import project, project_array, to_float
from .base import BaseExtractor

TOTAL_STAKE_PATH = "validator.totalStake"
STAKES_PATH = "validator.stakes"


class ValidatorExtractor(BaseExtractor):
    """
    The node only answers this endpoint on POST. totalStake is exported as
    returned, without the fixed-point scaling applied to epoch proof stakes.
    """

    stage = "validator"
    method = "POST"
    path = "/node/validator"

    def extract(self, registry: MetricRegistry) -> None:
        document = self.fetch()
        total_stake = to_float(project(document, TOTAL_STAKE_PATH), TOTAL_STAKE_PATH)
        stakes = project_array(document, STAKES_PATH)

        registry.set_static("stake_total", total_stake)
        registry.set_static("delegators_count", len(stakes))
        self.logger.info(f"Validator stake: {total_stake}, delegators: {len(stakes)}")
