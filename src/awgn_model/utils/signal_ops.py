"""Sample-level utilities for real waveforms"""

import numpy as np


class SignalOps:
    """Power and decibel helpers (float64 arrays)"""

    @staticmethod
    def as_waveform(samples) -> np.ndarray:
        """Copy into a 1-D float64 array"""
        return np.array(samples, dtype=np.float64).reshape(-1)

    @staticmethod
    def mean_power(samples: np.ndarray) -> float:
        """Mean of squared samples"""
        samples = np.asarray(samples, dtype=np.float64)
        if samples.size == 0:
            raise ValueError("Cannot compute the power of an empty signal")
        return float(np.mean(samples ** 2))

    @staticmethod
    def db_to_linear(value_db: float) -> float:
        return 10.0 ** (value_db / 10.0)

    @staticmethod
    def linear_to_db(value: float) -> float:
        return 10.0 * np.log10(value)
