"""Simulation parameters"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .channels.awgn import NoiseParameters
from .channels.modulation import ModulationScheme
from .codes.convolutional import CodingScheme

MAX_SAMPLES = 100_000


@dataclass
class SimulationConfig:
    """Parameters of one simulation run"""

    # Waveform
    amplitude: float = 1.0
    frequency: float = 0.05          # cycles per sample
    num_samples: int = 1000

    # Noise
    snr_db: float = 10.0
    bit_rate: float = 1000.0         # Eb/N0 only
    bandwidth: float = 0.1
    seed: int = 0

    # Digital path
    modulation: ModulationScheme = ModulationScheme.BPSK
    coding: CodingScheme = CodingScheme.NONE

    def __post_init__(self):
        self.modulation = ModulationScheme.parse(self.modulation)
        self.coding = CodingScheme.parse(self.coding)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'SimulationConfig':
        """Build from a mapping, ignoring unknown keys; scheme names may be strings"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def noise_parameters(self) -> NoiseParameters:
        return NoiseParameters(self.snr_db, self.bit_rate, self.bandwidth, self.seed)
