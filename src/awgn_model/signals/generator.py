"""Deterministic sine source"""

import numpy as np


def generate_waveform(num_samples: int, amplitude: float, frequency: float) -> np.ndarray:
    """amplitude * sin(2*pi*frequency*i) for i in [0, num_samples)

    Args:
        num_samples: number of samples (1..100000, checked by the caller)
        amplitude: peak amplitude (> 0)
        frequency: normalized frequency in cycles per sample (> 0)
    """
    i = np.arange(num_samples, dtype=np.float64)
    return amplitude * np.sin(2.0 * np.pi * frequency * i)


class SignalGenerator:
    """Sampled periodic waveform source"""

    def __init__(self, num_samples: int, amplitude: float = 1.0, frequency: float = 0.05):
        self.num_samples = num_samples
        self.amplitude = amplitude
        self.frequency = frequency

    def generate(self) -> np.ndarray:
        return generate_waveform(self.num_samples, self.amplitude, self.frequency)
