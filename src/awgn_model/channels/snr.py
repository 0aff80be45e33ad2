"""SNR controller: target SNR to absolute noise power, Eb/N0"""

import numpy as np

from ..utils.signal_ops import SignalOps


def noise_power(signal_power: float, target_snr_db: float) -> float:
    """signal_power / 10^(target_snr_db/10)"""
    return signal_power / SignalOps.db_to_linear(target_snr_db)


def calculate_eb_n0(signal: np.ndarray, target_snr_db: float, bit_rate: float, bandwidth: float) -> float:
    """Eb/N0 in dB for a waveform sent at target_snr_db

    Eb/N0 = (P_s / R_b) / (P_n / B), with P_s the mean squared sample
    and P_n derived from the target SNR.
    """
    signal_power = SignalOps.mean_power(signal)
    eb = signal_power / bit_rate
    n0 = noise_power(signal_power, target_snr_db) / bandwidth
    return float(SignalOps.linear_to_db(eb / n0))


class SignalToNoiseRatio:
    """Holds target SNR, bit rate and bandwidth

    Every result is a pure function of these three values and the waveform
    passed in. Noise power is recomputed from the waveform on each call.
    """

    def __init__(self, target_snr_db: float, bit_rate: float = 1.0, bandwidth: float = 1.0):
        self.target_snr_db = target_snr_db
        self.bit_rate = bit_rate
        self.bandwidth = bandwidth

    def noise_power(self, signal_power: float) -> float:
        return noise_power(signal_power, self.target_snr_db)

    def noise_power_for(self, signal: np.ndarray) -> float:
        """Noise power that puts `signal` at the target SNR"""
        return self.noise_power(SignalOps.mean_power(signal))

    def eb_n0_db(self, signal: np.ndarray) -> float:
        return calculate_eb_n0(signal, self.target_snr_db, self.bit_rate, self.bandwidth)
