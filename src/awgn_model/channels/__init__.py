from .awgn import AWGNChannel, NoiseParameters, add_noise, box_muller
from .channel_model import ChannelModel
from .modulation import Modulation, ModulationScheme
from .snr import SignalToNoiseRatio, calculate_eb_n0, noise_power

__all__ = [
    'AWGNChannel',
    'NoiseParameters',
    'add_noise',
    'box_muller',
    'ChannelModel',
    'Modulation',
    'ModulationScheme',
    'SignalToNoiseRatio',
    'calculate_eb_n0',
    'noise_power',
]
