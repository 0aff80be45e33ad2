import numpy as np
import pytest

from awgn_model.channels.channel_model import ChannelModel
from awgn_model.channels.modulation import ModulationScheme
from awgn_model.codes.convolutional import CodingScheme
from awgn_model.metrics import DecodingMetrics


def test_bpsk_round_trip_example():
    bits = [1, 0, 1, 1, 0]
    tx = ChannelModel(ModulationScheme.BPSK, CodingScheme.NONE)
    rx = ChannelModel(ModulationScheme.BPSK, CodingScheme.NONE)
    assert rx.demodulate(tx.modulate(bits)).tolist() == bits


@pytest.mark.parametrize("modulation,num_bits", [
    ("BPSK", 101),
    ("QPSK", 200),
    ("16-QAM", 400),
])
def test_noiseless_round_trip(modulation, num_bits):
    bits = np.random.default_rng(3).integers(0, 2, size=num_bits)
    model = ChannelModel(modulation)
    decoded = model.demodulate(model.modulate(bits))
    assert np.array_equal(decoded, bits)
    assert DecodingMetrics.bit_error_rate(bits, decoded) == 0.0


def test_derived_parameters():
    model = ChannelModel("QPSK", "Convolutional")
    assert model.bits_per_symbol == 2
    assert model.code_rate == 0.5
    assert ChannelModel("16-QAM").code_rate == 1.0
    assert ChannelModel("16-QAM").bits_per_symbol == 4


@pytest.mark.parametrize("modulation,coding", [
    ("8PSK", "None"),
    ("BPSK", "LDPC"),
    (None, None),
])
def test_unsupported_scheme(modulation, coding):
    with pytest.raises(ValueError):
        ChannelModel(modulation, coding)


def test_encode_is_identity_without_coding():
    bits = np.array([1, 0, 0, 1])
    encoded = ChannelModel("BPSK").encode(bits)
    assert np.array_equal(encoded, bits)
    assert encoded is not bits


def test_coded_modulation_doubles_symbol_count():
    model = ChannelModel("BPSK", "Convolutional")
    assert len(model.modulate([1, 0, 1, 1, 0])) == 10
    assert len(ChannelModel("QPSK", "Convolutional").modulate([1, 0, 1])) == 6


def test_coded_demodulate_uses_simplified_decoder():
    model = ChannelModel("BPSK", "Convolutional")
    decoded = model.demodulate(model.modulate([1, 0, 1, 1, 0]))
    assert decoded.tolist() == [0, 0, 1, 0, 1]


def test_decode_without_coding_is_hard_decision():
    model = ChannelModel("QPSK")
    assert model.decode([0.5, -0.5, -0.1, 0.2]).tolist() == [1, 0, 0, 1]


def test_qpsk_drops_trailing_bit():
    model = ChannelModel("QPSK")
    bits = [1, 1, 0, 1, 0]
    assert model.demodulate(model.modulate(bits)).tolist() == [1, 1, 0, 1]
