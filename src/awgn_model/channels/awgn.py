"""AWGN Channel model"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .channel_model import ChannelModel
from .snr import SignalToNoiseRatio
from ..codes.convolutional import CodingScheme
from ..utils.signal_ops import SignalOps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoiseParameters:
    """Everything besides the waveform that fixes the noise sequence"""
    target_snr_db: float
    bit_rate: float = 1.0
    bandwidth: float = 1.0
    seed: int = 0


def box_muller(num_samples: int, seed: int) -> np.ndarray:
    """Standard-normal samples, one uniform pair per output sample

    Draws are consumed in order u1(0), u2(0), u1(1), u2(1), ... so a seed
    and a length always give the same sequence. u1 is taken as 1 - u to
    keep it in (0, 1].
    """
    rng = np.random.default_rng(seed)
    uniforms = rng.random((num_samples, 2))
    u1 = 1.0 - uniforms[:, 0]
    u2 = uniforms[:, 1]
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


def add_noise(signal, params: NoiseParameters) -> np.ndarray:
    """Return signal + N(0, P_n) with P_n = P_s / 10^(SNR/10)

    The input is never modified. An empty signal gives an empty result.
    """
    signal = SignalOps.as_waveform(signal)
    if signal.size == 0:
        return signal
    noise_power = SignalToNoiseRatio(params.target_snr_db).noise_power_for(signal)
    noise_std = np.sqrt(noise_power)
    logger.debug("AWGN: %d samples, noise power %.6g (SNR %.2f dB, seed %d)",
                 signal.size, noise_power, params.target_snr_db, params.seed)
    return signal + noise_std * box_muller(signal.size, params.seed)


class AWGNChannel:
    """AWGN channel

    Owns the SNR controller and, for the digital path, a ChannelModel.
    """

    def __init__(self, snr_db: float, bit_rate: float = 1.0, bandwidth: float = 1.0,
                 modulation=None, coding=CodingScheme.NONE, seed: int = 0):
        """
        Args:
            snr_db: target SNR in dB
            bit_rate: bits per second (Eb/N0 conversion)
            bandwidth: noise bandwidth (Eb/N0 conversion)
            modulation: scheme for the digital path, None for analog use
            coding: channel coding applied by the ChannelModel
            seed: noise generator seed
        """
        self.params = NoiseParameters(snr_db, bit_rate, bandwidth, seed)
        self.snr_controller = SignalToNoiseRatio(snr_db, bit_rate, bandwidth)
        self.channel_model: Optional[ChannelModel] = None
        if modulation is not None:
            self.channel_model = ChannelModel(modulation, coding)

    def transmit(self, signal) -> np.ndarray:
        """Add AWGN at the configured SNR and seed"""
        return add_noise(signal, self.params)

    def eb_n0_db(self, signal) -> float:
        return self.snr_controller.eb_n0_db(signal)
