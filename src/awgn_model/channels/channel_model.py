"""Digital modulation with optional convolutional coding"""

import logging

import numpy as np

from .modulation import SCHEME_TABLE, ModulationScheme
from ..codes.convolutional import CodingScheme, ConvolutionalCode

logger = logging.getLogger(__name__)


class ChannelModel:
    """Fixed (modulation, coding) pair

    Accepts enum members or their names. Anything outside
    {BPSK, QPSK, 16-QAM} x {None, Convolutional} raises ValueError.
    """

    def __init__(self, modulation=ModulationScheme.BPSK, coding=CodingScheme.NONE):
        self.modulation = ModulationScheme.parse(modulation)
        self.coding = CodingScheme.parse(coding)
        self.bits_per_symbol = self.modulation.bits_per_symbol
        self.code_rate = self.coding.code_rate
        self._modulate, self._demodulate = SCHEME_TABLE[self.modulation]
        logger.debug("ChannelModel %s/%s: %d bit(s) per symbol, rate %.2f",
                     self.modulation.label, self.coding.label, self.bits_per_symbol, self.code_rate)

    @property
    def is_coded(self) -> bool:
        return self.coding is CodingScheme.CONVOLUTIONAL

    def encode(self, bits) -> np.ndarray:
        """Identity without coding, rate-1/2 encoding otherwise"""
        bits = np.asarray(bits, dtype=np.int64).reshape(-1)
        if self.is_coded:
            return ConvolutionalCode.encode(bits)
        return bits.copy()

    def decode(self, soft_bits) -> np.ndarray:
        """Simplified pairwise decoder; plain hard decisions without coding"""
        soft_bits = np.asarray(soft_bits, dtype=np.float64).reshape(-1)
        if self.is_coded:
            return ConvolutionalCode.decode(soft_bits)
        return self.demodulate(soft_bits)

    def modulate(self, bits) -> np.ndarray:
        return self._modulate(self.encode(bits))

    def demodulate(self, symbols) -> np.ndarray:
        """Hard decisions, or the simplified decoder on the raw values when coded"""
        symbols = np.asarray(symbols, dtype=np.float64).reshape(-1)
        if self.is_coded:
            # raw received values, not sliced bits
            return ConvolutionalCode.decode(symbols)
        return self._demodulate(symbols)
