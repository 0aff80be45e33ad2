"""AWGN channel simulation and analysis"""

import logging

__version__ = "0.1.0"

from .signals.generator import SignalGenerator, generate_waveform
from .channels.snr import SignalToNoiseRatio, calculate_eb_n0, noise_power
from .channels.modulation import Modulation, ModulationScheme
from .codes.convolutional import CodingScheme, ConvolutionalCode
from .channels.channel_model import ChannelModel
from .channels.awgn import AWGNChannel, NoiseParameters, add_noise
from .analysis import (
    Analyzer,
    compute_phasor_statistics,
    compute_snr,
    compute_zero_crossing_points,
    compute_zero_crossings,
)
from .metrics import AnalysisResult, DecodingMetrics
from .config import SimulationConfig
from .validators import Validator
from .pipeline import AnalogResult, DigitalResult, run_analog, run_digital
from .benchmark import BERBenchmark

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'SignalGenerator',
    'generate_waveform',
    'SignalToNoiseRatio',
    'calculate_eb_n0',
    'noise_power',
    'Modulation',
    'ModulationScheme',
    'CodingScheme',
    'ConvolutionalCode',
    'ChannelModel',
    'AWGNChannel',
    'NoiseParameters',
    'add_noise',
    'Analyzer',
    'compute_snr',
    'compute_zero_crossings',
    'compute_zero_crossing_points',
    'compute_phasor_statistics',
    'AnalysisResult',
    'DecodingMetrics',
    'SimulationConfig',
    'Validator',
    'AnalogResult',
    'DigitalResult',
    'run_analog',
    'run_digital',
    'BERBenchmark',
]
