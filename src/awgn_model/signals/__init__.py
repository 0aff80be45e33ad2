from .generator import SignalGenerator, generate_waveform

__all__ = ['SignalGenerator', 'generate_waveform']
