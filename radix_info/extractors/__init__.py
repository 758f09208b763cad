"""
Radix Info Extractors
One extractor per node status endpoint
"""

from .base import BaseExtractor
from .system_info_extractor import SystemInfoExtractor
from .peers_extractor import PeersExtractor
from .epoch_proof_extractor import EpochProofExtractor
from .validator_extractor import ValidatorExtractor

__all__ = [
    'BaseExtractor',
    'SystemInfoExtractor',
    'PeersExtractor',
    'EpochProofExtractor',
    'ValidatorExtractor'
]
