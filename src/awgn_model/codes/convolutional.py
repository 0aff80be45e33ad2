"""Rate-1/2 convolutional code (K=3, generators 7 and 5 octal)"""

from enum import Enum

import numpy as np
from numba import njit


class CodingScheme(Enum):
    """Channel coding options, with their code rate"""

    NONE = ('None', 1.0)
    CONVOLUTIONAL = ('Convolutional', 0.5)

    def __init__(self, label: str, code_rate: float):
        self.label = label
        self.code_rate = code_rate

    @classmethod
    def parse(cls, value) -> 'CodingScheme':
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.name, member.label.upper()):
                    return member
        raise ValueError(f"Unsupported coding scheme: {value!r}")


@njit
def encode_kernel(bits: np.ndarray) -> np.ndarray:
    """Shift-register encoder; state starts at 0 for every call"""
    encoded = np.empty(2 * bits.shape[0], dtype=np.int64)
    state = 0
    for i in range(bits.shape[0]):
        b = bits[i] & 1
        encoded[2 * i] = (b ^ ((state >> 1) & 1) ^ (state & 1)) & 1
        encoded[2 * i + 1] = (b ^ (state & 1)) & 1
        state = ((state >> 1) | (b << 2)) & 7
    return encoded


class ConvolutionalCode:
    """Rate-1/2 encoder with a simplified (non-Viterbi) decoder"""

    rate = 0.5
    constraint_length = 3

    @staticmethod
    def encode(bits) -> np.ndarray:
        """Two coded bits per input bit"""
        bits = np.ascontiguousarray(bits, dtype=np.int64)
        return encode_kernel(bits)

    @staticmethod
    def decode(soft_bits) -> np.ndarray:
        """Hard-threshold each pair at 0 and XOR it into one bit

        No trellis search and no error correction. A trailing unpaired
        value is dropped.
        """
        soft_bits = np.asarray(soft_bits, dtype=np.float64)
        usable = (len(soft_bits) // 2) * 2
        hard = (soft_bits[:usable] > 0).astype(np.int64).reshape(-1, 2)
        return hard[:, 0] ^ hard[:, 1]
