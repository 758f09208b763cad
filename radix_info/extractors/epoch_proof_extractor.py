#!/usr/bin/env python3
"""
Epoch Proof Extractor
Aggregates the stakes of the next validator set from /system/epochproof
"""

from typing import Any, List

from ..exceptions import ProjectionError
from ..models import STAKE_SCALE
from ..registry import MetricRegistry
from ..utils import min_max, project_array, to_float
from .base import BaseExtractor

NEXT_VALIDATORS_PATH = "header.nextValidators"


class EpochProofExtractor(BaseExtractor):
    """Counts next-epoch validators and records their min/max stake in whole units"""

    stage = "epoch_proof"
    path = "/system/epochproof"

    def stakes(self, document: Any) -> List[float]:
        """Project header.nextValidators[].stake as raw fixed-point floats"""
        validators = project_array(document, NEXT_VALIDATORS_PATH)

        stakes = []
        for index, validator in enumerate(validators):
            path = f"{NEXT_VALIDATORS_PATH}.{index}.stake"
            if not isinstance(validator, dict) or "stake" not in validator:
                raise ProjectionError(path, "field is missing")
            stakes.append(to_float(validator["stake"], path))
        return stakes

    def extract(self, registry: MetricRegistry) -> None:
        stakes = self.stakes(self.fetch())
        min_stake, max_stake = min_max(stakes)

        registry.set_static("next_validators_count", len(stakes))
        registry.set_static("next_validators_stake_min", min_stake / STAKE_SCALE)
        registry.set_static("next_validators_stake_max", max_stake / STAKE_SCALE)
        self.logger.info(
            f"Next validators: {len(stakes)}, stake {min_stake / STAKE_SCALE:.2f}"
            f" - {max_stake / STAKE_SCALE:.2f}"
        )
