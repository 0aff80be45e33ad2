"""Bit-to-symbol mapping for BPSK, QPSK and 16-QAM"""

import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)

QPSK_SCALE = np.sqrt(2.0) / 2.0
QAM16_SCALE = np.sqrt(10.0)
# 2-bit index -> amplitude level; Gray along -3, -1, +1, +3 (00, 01, 11, 10)
QAM16_LEVELS = np.array([-3.0, -1.0, 3.0, 1.0])


class ModulationScheme(Enum):
    """Supported schemes, with their label and bits per symbol"""

    BPSK = ('BPSK', 1)
    QPSK = ('QPSK', 2)
    QAM16 = ('16-QAM', 4)

    def __init__(self, label: str, bits_per_symbol: int):
        self.label = label
        self.bits_per_symbol = bits_per_symbol

    @classmethod
    def parse(cls, value) -> 'ModulationScheme':
        """Accept a member or a name such as 'bpsk', '16-QAM', 'QAM16'"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace('-', '').replace('_', '')
            aliases = {'BPSK': cls.BPSK, 'QPSK': cls.QPSK, 'QAM16': cls.QAM16, '16QAM': cls.QAM16}
            if key in aliases:
                return aliases[key]
        raise ValueError(f"Unsupported modulation scheme: {value!r}")


class Modulation:
    """Hard-decision mappers for real-valued symbol streams

    QPSK and 16-QAM store in-phase and quadrature parts as consecutive
    real entries. Bits beyond the last complete symbol are dropped.
    """

    @staticmethod
    def _bits(bits) -> np.ndarray:
        return np.asarray(bits, dtype=np.int64).reshape(-1)

    @staticmethod
    def _values(symbols) -> np.ndarray:
        return np.asarray(symbols, dtype=np.float64).reshape(-1)

    @staticmethod
    def _complete(bits: np.ndarray, group: int) -> np.ndarray:
        usable = (len(bits) // group) * group
        if usable != len(bits):
            logger.debug("Dropping %d trailing bit(s) not filling a %d-bit symbol", len(bits) - usable, group)
        return bits[:usable]

    @staticmethod
    def modulate_bpsk(bits: np.ndarray) -> np.ndarray:
        """1 -> +1.0, 0 -> -1.0"""
        bits = Modulation._bits(bits)
        return np.where(bits != 0, 1.0, -1.0)

    @staticmethod
    def demodulate_bpsk(symbols: np.ndarray) -> np.ndarray:
        return (Modulation._values(symbols) > 0).astype(np.int64)

    @staticmethod
    def modulate_qpsk(bits: np.ndarray) -> np.ndarray:
        """Bit pairs -> (I, Q), each +-sqrt(2)/2"""
        bits = Modulation._complete(Modulation._bits(bits), 2)
        return np.where(bits != 0, QPSK_SCALE, -QPSK_SCALE)

    @staticmethod
    def demodulate_qpsk(symbols: np.ndarray) -> np.ndarray:
        symbols = Modulation._complete(Modulation._values(symbols), 2)
        return (symbols > 0).astype(np.int64)

    @staticmethod
    def modulate_qam16(bits: np.ndarray) -> np.ndarray:
        """4-bit groups -> [I, Q, I, Q]

        Levels per axis: 00 -> -3, 01 -> -1, 10 -> +3, 11 -> +1, over sqrt(10).
        """
        groups = (Modulation._complete(Modulation._bits(bits), 4).reshape(-1, 4) != 0).astype(np.int64)
        i_level = QAM16_LEVELS[2 * groups[:, 0] + groups[:, 1]] / QAM16_SCALE
        q_level = QAM16_LEVELS[2 * groups[:, 2] + groups[:, 3]] / QAM16_SCALE
        return np.column_stack([i_level, q_level, i_level, q_level]).reshape(-1)

    @staticmethod
    def _slice_qam16_axis(values: np.ndarray) -> np.ndarray:
        """Two thresholds at 0 and +-2 (unscaled) -> 2 bits per value"""
        scaled = values * QAM16_SCALE
        high = (scaled > 0).astype(np.int64)
        inner = ((scaled >= -2.0) & (scaled <= 2.0)).astype(np.int64)
        return np.column_stack([high, inner])

    @staticmethod
    def demodulate_qam16(symbols: np.ndarray) -> np.ndarray:
        """Slices I (slot 1) and Q (slot 2) of each group; slots 3 and 4 are ignored"""
        groups = Modulation._complete(Modulation._values(symbols), 4).reshape(-1, 4)
        i_bits = Modulation._slice_qam16_axis(groups[:, 0])
        q_bits = Modulation._slice_qam16_axis(groups[:, 1])
        return np.hstack([i_bits, q_bits]).reshape(-1)


# scheme -> (modulate, demodulate)
SCHEME_TABLE = {
    ModulationScheme.BPSK: (Modulation.modulate_bpsk, Modulation.demodulate_bpsk),
    ModulationScheme.QPSK: (Modulation.modulate_qpsk, Modulation.demodulate_qpsk),
    ModulationScheme.QAM16: (Modulation.modulate_qam16, Modulation.demodulate_qam16),
}
