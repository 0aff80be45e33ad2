"""Result containers and bit-level metrics"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy.special import erfc
from scipy.stats import rayleigh

from .channels.modulation import ModulationScheme


@dataclass
class AnalysisResult:
    """Metrics of one clean/noisy pair"""
    measured_snr_db: float
    zero_crossing_indices: np.ndarray
    phasor_fractions: Tuple[float, float, float]
    zero_crossing_rate: Optional[float] = None
    bit_error_rate: Optional[float] = None


@dataclass
class DecodingMetrics:
    """Metrics for decoded bit streams"""

    @staticmethod
    def bit_errors(true_bits: np.ndarray, decoded_bits: np.ndarray) -> int:
        """Mismatches over the overlapping prefix"""
        true_bits = np.asarray(true_bits)
        decoded_bits = np.asarray(decoded_bits)
        n = min(len(true_bits), len(decoded_bits))
        return int(np.count_nonzero(true_bits[:n] != decoded_bits[:n]))

    @staticmethod
    def bit_error_rate(true_bits: np.ndarray, decoded_bits: np.ndarray) -> float:
        """BER over the transmitted length; bits lost to truncation are not counted"""
        if len(true_bits) == 0:
            return 0.0
        return DecodingMetrics.bit_errors(true_bits, decoded_bits) / len(true_bits)

    @staticmethod
    def theoretical_ber(modulation, snr_db: float) -> float:
        """Uncoded hard-decision BER at a per-sample SNR

        BPSK/QPSK: Q(sqrt(snr)). 16-QAM: 3/4 Q(sqrt(snr/5)), the nearest-neighbour
        form for the Gray-ordered level table.
        """
        modulation = ModulationScheme.parse(modulation)
        snr = 10 ** (snr_db / 10)
        if modulation is ModulationScheme.QAM16:
            return float(0.375 * erfc(np.sqrt(snr / 10)))
        return float(0.5 * erfc(np.sqrt(snr / 2)))

    @staticmethod
    def rayleigh_fractions() -> Tuple[float, float, float]:
        """P(|z| <= k*sigma), k = 1, 2, 3, for a 2-D Gaussian with per-axis sigma"""
        return tuple(float(rayleigh.cdf(k)) for k in (1, 2, 3))
