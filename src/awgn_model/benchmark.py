"""BER vs SNR sweep for the digital path"""

import logging
from dataclasses import replace

import numpy as np
import pandas as pd
from tqdm import tqdm

from .codes.convolutional import CodingScheme
from .config import SimulationConfig
from .metrics import DecodingMetrics
from .pipeline import run_digital

logger = logging.getLogger(__name__)

COLUMNS = ['snr_db', 'ber', 'theoretical_ber', 'measured_snr_db', 'eb_n0_db', 'num_bits', 'errors']


class BERBenchmark:
    """Runs the digital pipeline once per SNR point"""

    def __init__(self, modulation='BPSK', coding=CodingScheme.NONE, num_bits: int = 10000,
                 amplitude: float = 1.0, bit_rate: float = 1000.0, bandwidth: float = 0.1, seed: int = 0):
        self.base_config = SimulationConfig(
            amplitude=amplitude,
            num_samples=num_bits,
            bit_rate=bit_rate,
            bandwidth=bandwidth,
            seed=seed,
            modulation=modulation,
            coding=coding,
        )

    def run(self, snr_dbs: list = None, progress: bool = True) -> pd.DataFrame:
        if snr_dbs is None:
            snr_dbs = np.arange(0.0, 12.5, 1.0)
        config = self.base_config
        uncoded = config.coding is CodingScheme.NONE
        results = []
        for snr_db in tqdm(snr_dbs, desc=f"SNR ({config.modulation.label}/{config.coding.label})", disable=not progress):
            result = run_digital(replace(config, snr_db=float(snr_db)))
            theory = DecodingMetrics.theoretical_ber(config.modulation, snr_db) if uncoded else np.nan
            results.append({
                'snr_db': float(snr_db),
                'ber': result.bit_error_rate,
                'theoretical_ber': theory,
                'measured_snr_db': result.analysis.measured_snr_db,
                'eb_n0_db': result.eb_n0_db,
                'num_bits': len(result.bits),
                'errors': DecodingMetrics.bit_errors(result.bits, result.decoded_bits),
            })
        df = pd.DataFrame(results, columns=COLUMNS)
        if not df.empty:
            self.summary(df)
        return df

    def summary(self, df: pd.DataFrame) -> None:
        config = self.base_config
        logger.info("SUMMARY for %s/%s, %d bits per point", config.modulation.label, config.coding.label, config.num_samples)
        logger.info("  Min BER: %.2e", df['ber'].min())
        gap = (df['ber'] - df['theoretical_ber']).abs().mean()
        if not np.isnan(gap):
            logger.info("  Mean |BER - theory|: %.2e", gap)
