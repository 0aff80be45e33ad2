from .signal_ops import SignalOps

__all__ = ['SignalOps']
