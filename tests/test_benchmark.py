import numpy as np
import pytest

from awgn_model.benchmark import COLUMNS, BERBenchmark


def test_sweep_tracks_theory_for_bpsk():
    df = BERBenchmark(modulation="BPSK", num_bits=20_000, seed=1).run([0.0, 4.0], progress=False)
    assert list(df.columns) == COLUMNS
    assert len(df) == 2
    assert df['ber'].iloc[0] == pytest.approx(df['theoretical_ber'].iloc[0], abs=0.02)
    assert df['ber'].iloc[1] < df['ber'].iloc[0]
    assert (df['num_bits'] == 20_000).all()
    assert np.allclose(df['measured_snr_db'], df['snr_db'], atol=0.3)


def test_coded_sweep_has_no_theory():
    df = BERBenchmark(modulation="QPSK", coding="Convolutional", num_bits=1000).run([5.0], progress=False)
    assert np.isnan(df['theoretical_ber'].iloc[0])


def test_empty_sweep():
    df = BERBenchmark(num_bits=100).run([], progress=False)
    assert df.empty
    assert list(df.columns) == COLUMNS
