"""Parameter and result validation"""

import numpy as np

from .config import MAX_SAMPLES, SimulationConfig
from .metrics import DecodingMetrics


class Validator:
    """Range checks for caller input, sanity checks for results"""

    @staticmethod
    def validate_config(config: SimulationConfig) -> None:
        """Raise ValueError on the first out-of-range parameter"""
        if config.amplitude <= 0:
            raise ValueError("Amplitude must be greater than 0")
        if config.frequency <= 0:
            raise ValueError("Frequency must be greater than 0")
        if (isinstance(config.num_samples, bool) or not isinstance(config.num_samples, (int, np.integer))
                or not 1 <= config.num_samples <= MAX_SAMPLES):
            raise ValueError("Number of samples must be between 1 and 100,000")
        if config.snr_db < 0:
            raise ValueError("SNR must be non-negative")
        if config.bit_rate <= 0:
            raise ValueError("Bit rate must be greater than 0")
        if config.bandwidth <= 0:
            raise ValueError("Bandwidth must be greater than 0")
        if isinstance(config.seed, bool) or not isinstance(config.seed, (int, np.integer)) or config.seed < 0:
            raise ValueError("Seed must be a non-negative integer")

    @staticmethod
    def snr_within_tolerance(measured_db: float, target_db: float, tolerance_db: float = 1.0) -> bool:
        """Measured SNR close to target"""
        return abs(measured_db - target_db) <= tolerance_db

    @staticmethod
    def exact_recovery(decoded: np.ndarray, transmitted: np.ndarray) -> bool:
        """Decoded bits equal transmitted bits"""
        return np.array_equal(np.asarray(decoded), np.asarray(transmitted))

    @staticmethod
    def ber_reasonable(true_bits: np.ndarray, decoded_bits: np.ndarray, max_ber: float = 0.2) -> bool:
        """BER below a ceiling"""
        return DecodingMetrics.bit_error_rate(true_bits, decoded_bits) < max_ber
