"""One simulation run: analog sine path and digital modulation path"""

import logging
from dataclasses import dataclass

import numpy as np

from .analysis import Analyzer
from .channels.awgn import AWGNChannel, add_noise
from .config import SimulationConfig
from .metrics import AnalysisResult, DecodingMetrics
from .signals.generator import generate_waveform
from .validators import Validator

logger = logging.getLogger(__name__)


@dataclass
class AnalogResult:
    waveform: np.ndarray
    noisy: np.ndarray
    analysis: AnalysisResult


@dataclass
class DigitalResult:
    bits: np.ndarray
    symbols: np.ndarray
    noisy: np.ndarray
    decoded_bits: np.ndarray
    eb_n0_db: float
    analysis: AnalysisResult

    @property
    def bit_error_rate(self) -> float:
        return self.analysis.bit_error_rate


# mixed into the bit-source seed so bits and noise use different streams
BIT_STREAM_KEY = 1


def random_bits(num_bits: int, seed: int) -> np.ndarray:
    """Uniform 0/1 source, reproducible from seed"""
    return np.random.default_rng([seed, BIT_STREAM_KEY]).integers(0, 2, size=num_bits, dtype=np.int64)


def run_analog(config: SimulationConfig) -> AnalogResult:
    """Sine -> AWGN -> measured SNR, zero crossings, phasor fractions"""
    Validator.validate_config(config)
    waveform = generate_waveform(config.num_samples, config.amplitude, config.frequency)
    noisy = add_noise(waveform, config.noise_parameters())
    analysis = Analyzer(config.seed).analyze(
        waveform, noisy, frequency=config.frequency, bandwidth=config.bandwidth, snr_db=config.snr_db)
    logger.info("Analog run: target %.2f dB, measured %.2f dB", config.snr_db, analysis.measured_snr_db)
    return AnalogResult(waveform, noisy, analysis)


def run_digital(config: SimulationConfig) -> DigitalResult:
    """Random bits -> modulate -> scale -> AWGN -> demodulate -> BER, Eb/N0"""
    Validator.validate_config(config)
    channel = AWGNChannel(config.snr_db, config.bit_rate, config.bandwidth,
                          config.modulation, config.coding, config.seed)
    model = channel.channel_model

    bits = random_bits(config.num_samples, config.seed)
    symbols = config.amplitude * model.modulate(bits)
    if symbols.size == 0:
        raise ValueError(f"{config.num_samples} bit(s) do not fill one {model.modulation.label} symbol")
    noisy = channel.transmit(symbols)
    decoded = model.demodulate(noisy)

    analysis = Analyzer(config.seed).analyze(symbols, noisy)
    analysis.bit_error_rate = DecodingMetrics.bit_error_rate(bits, decoded)
    eb_n0 = channel.eb_n0_db(symbols)
    logger.info("Digital run %s/%s: BER %.4f, Eb/N0 %.2f dB",
                model.modulation.label, model.coding.label, analysis.bit_error_rate, eb_n0)
    return DigitalResult(bits, symbols, noisy, decoded, eb_n0, analysis)
