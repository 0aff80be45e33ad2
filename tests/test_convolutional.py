import numpy as np
import pytest

from awgn_model.codes.convolutional import CodingScheme, ConvolutionalCode


def test_code_rates():
    assert CodingScheme.NONE.code_rate == 1.0
    assert CodingScheme.CONVOLUTIONAL.code_rate == 0.5


@pytest.mark.parametrize("name,expected", [
    ("None", CodingScheme.NONE),
    (None, CodingScheme.NONE),
    ("convolutional", CodingScheme.CONVOLUTIONAL),
    ("CONVOLUTIONAL", CodingScheme.CONVOLUTIONAL),
])
def test_parse(name, expected):
    assert CodingScheme.parse(name) is expected


def test_parse_rejects_unsupported():
    with pytest.raises(ValueError):
        CodingScheme.parse("turbo")


def test_encoder_output_for_known_sequence():
    # generators 7, 5 (octal), register starting at 0
    encoded = ConvolutionalCode.encode([1, 0, 1, 1, 0])
    assert encoded.tolist() == [1, 1, 0, 0, 0, 1, 0, 0, 1, 0]


def test_encoder_state_resets_between_calls():
    first = ConvolutionalCode.encode([1, 1, 1])
    second = ConvolutionalCode.encode([1, 1, 1])
    assert np.array_equal(first, second)


def test_encoder_all_zero_input():
    assert ConvolutionalCode.encode(np.zeros(8, dtype=int)).tolist() == [0] * 16


def test_encoder_empty_input():
    assert ConvolutionalCode.encode(np.array([], dtype=np.int64)).size == 0


def test_decoder_xors_hard_decided_pairs():
    assert ConvolutionalCode.decode([0.9, 0.2, -0.3, 0.7, -1.0, -1.0]).tolist() == [0, 1, 0]


def test_decoder_drops_unpaired_value():
    assert ConvolutionalCode.decode([1.0, -1.0, 1.0]).tolist() == [1]


def test_simplified_decoder_returns_input_delayed_by_two():
    bits = np.array([1, 0, 1, 1, 0, 0, 1, 1, 1, 0])
    soft = np.where(ConvolutionalCode.encode(bits) == 1, 1.0, -1.0)
    decoded = ConvolutionalCode.decode(soft)
    assert decoded[:2].tolist() == [0, 0]
    assert np.array_equal(decoded[2:], bits[:-2])
