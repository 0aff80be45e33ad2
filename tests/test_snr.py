import math

import numpy as np
import pytest

from awgn_model.channels.snr import SignalToNoiseRatio, calculate_eb_n0, noise_power


def test_noise_power_from_target_snr():
    assert noise_power(1.0, 0.0) == pytest.approx(1.0)
    assert noise_power(1.0, 10.0) == pytest.approx(0.1)
    assert noise_power(0.5, 20.0) == pytest.approx(0.005)
    assert noise_power(2.0, 10 * math.log10(2.0)) == pytest.approx(1.0)


def test_noise_power_recomputed_from_each_waveform():
    ctrl = SignalToNoiseRatio(target_snr_db=10.0)
    assert ctrl.noise_power_for(np.ones(100)) == pytest.approx(0.1)
    assert ctrl.noise_power_for(2 * np.ones(100)) == pytest.approx(0.4)


def test_eb_n0_offsets_snr_by_bandwidth_over_bit_rate():
    signal = np.ones(64)
    # 10 dB + 10*log10(0.1 / 1000)
    assert calculate_eb_n0(signal, 10.0, 1000.0, 0.1) == pytest.approx(-30.0)
    assert calculate_eb_n0(signal, 5.0, 1.0, 1.0) == pytest.approx(5.0)


def test_eb_n0_independent_of_signal_scale():
    ctrl = SignalToNoiseRatio(target_snr_db=6.0, bit_rate=2.0, bandwidth=4.0)
    assert ctrl.eb_n0_db(np.ones(10)) == pytest.approx(ctrl.eb_n0_db(7 * np.ones(10)))
    assert ctrl.eb_n0_db(np.ones(10)) == pytest.approx(6.0 + 10 * math.log10(2.0))


def test_configuration_changes_take_effect():
    ctrl = SignalToNoiseRatio(target_snr_db=0.0)
    ctrl.target_snr_db = 20.0
    assert ctrl.noise_power(1.0) == pytest.approx(0.01)


def test_empty_signal_rejected():
    with pytest.raises(ValueError):
        calculate_eb_n0(np.array([]), 10.0, 1.0, 1.0)
