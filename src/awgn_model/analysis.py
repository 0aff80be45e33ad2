"""Measured SNR, zero crossings and phasor statistics"""

import logging
from typing import Optional, Tuple

import numpy as np

from .metrics import AnalysisResult
from .utils.signal_ops import SignalOps

logger = logging.getLogger(__name__)


def _check_pair(original: np.ndarray, noisy: np.ndarray) -> None:
    if len(original) != len(noisy):
        raise ValueError("Signal and noisy signal must have the same size")


def compute_snr(original, noisy) -> float:
    """10*log10(P_signal / P_noise), inf when the difference is exactly zero"""
    original = np.asarray(original, dtype=np.float64)
    noisy = np.asarray(noisy, dtype=np.float64)
    _check_pair(original, noisy)
    signal_power = SignalOps.mean_power(original)
    noise_power = SignalOps.mean_power(noisy - original)
    if noise_power == 0.0:
        return float('inf')
    return float(SignalOps.linear_to_db(signal_power / noise_power))


def compute_zero_crossings(noisy, frequency: float, bandwidth: float, snr_db: float) -> float:
    """Expected zero-crossing rate of a sine in band-limited noise

    f * sqrt((snr + 1 + B^2 / (12 f^2)) / (snr + 1)). Closed form; the
    samples themselves are not inspected.
    """
    snr_linear = SignalOps.db_to_linear(snr_db)
    term = (snr_linear + 1 + bandwidth ** 2 / (12 * frequency ** 2)) / (snr_linear + 1)
    return float(frequency * np.sqrt(term))


def compute_zero_crossing_points(noisy) -> np.ndarray:
    """Indices i where noisy[i-1] -> noisy[i] crosses zero

    Counted when one side is strictly negative and the other >= 0, or one
    side strictly positive and the other <= 0.
    """
    noisy = np.asarray(noisy, dtype=np.float64)
    prev, cur = noisy[:-1], noisy[1:]
    crossing = ((prev < 0) & (cur >= 0)) | ((prev > 0) & (cur <= 0))
    return np.flatnonzero(crossing) + 1


def compute_phasor_statistics(noisy, original, seed: int) -> Tuple[float, float, float]:
    """Fractions of a 2-D Gaussian cloud within 1, 2 and 3 sigma

    sigma = sqrt(P_noise / 2) from the measured noise. The cloud itself is
    drawn fresh from `seed`, one (re, im) pair per sample.
    """
    noisy = np.asarray(noisy, dtype=np.float64)
    original = np.asarray(original, dtype=np.float64)
    _check_pair(original, noisy)
    noise_power = SignalOps.mean_power(noisy - original)
    sigma = np.sqrt(noise_power / 2)

    rng = np.random.default_rng(seed)
    cloud = rng.normal(0.0, sigma, size=(len(noisy), 2))
    magnitude = np.hypot(cloud[:, 0], cloud[:, 1])
    return tuple(float(np.mean(magnitude <= k * sigma)) for k in (1, 2, 3))


class Analyzer:
    """Computes an AnalysisResult from a clean/noisy pair"""

    def __init__(self, seed: int = 0):
        self.seed = seed

    compute_snr = staticmethod(compute_snr)
    compute_zero_crossings = staticmethod(compute_zero_crossings)
    compute_zero_crossing_points = staticmethod(compute_zero_crossing_points)
    compute_phasor_statistics = staticmethod(compute_phasor_statistics)

    def analyze(self, original, noisy, frequency: Optional[float] = None,
                bandwidth: Optional[float] = None, snr_db: Optional[float] = None) -> AnalysisResult:
        """All metrics at once; the zero-crossing rate needs frequency, bandwidth and snr_db"""
        result = AnalysisResult(
            measured_snr_db=compute_snr(original, noisy),
            zero_crossing_indices=compute_zero_crossing_points(noisy),
            phasor_fractions=compute_phasor_statistics(noisy, original, self.seed),
        )
        if frequency is not None and bandwidth is not None and snr_db is not None:
            result.zero_crossing_rate = compute_zero_crossings(noisy, frequency, bandwidth, snr_db)
        logger.debug("Measured SNR %.3f dB, %d zero crossings, phasor %s",
                     result.measured_snr_db, len(result.zero_crossing_indices), result.phasor_fractions)
        return result
