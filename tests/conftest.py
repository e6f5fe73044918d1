# tests/conftest.py
import logging

import pytest
import numpy as np

from resultsdb_core import (
    RealWaveform, ComplexWaveform, MappingPlot,
)

PACKAGE_LOGGER = "resultsdb_core"


@pytest.fixture
def debug_caplog(caplog):
    """caplog with the package logger lowered to DEBUG, for asserting on silent resampling."""
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)
    return caplog


@pytest.fixture
def ramp_wave() -> RealWaveform:
    """y = x on [0, 1], 11 samples, time axis in seconds."""
    x = np.linspace(0.0, 1.0, 11)
    return RealWaveform(x, x.copy(), "s", "V")


@pytest.fixture
def triangle_wave() -> RealWaveform:
    """0 -> 1 -> 0 -> -1 -> 0 on x = 0..4."""
    return RealWaveform([0, 1, 2, 3, 4], [0, 1, 0, -1, 0], "s", "V")


@pytest.fixture
def ac_wave() -> ComplexWaveform:
    """Three complex samples on a frequency axis."""
    return ComplexWaveform([1.0, 10.0, 100.0], [1 + 0j, 1j, -1 + 0j], "Hz", "V")


def first_order_loop_gain(freq: np.ndarray, dc_gain: float = 1e3, pole_hz: float = 1e3) -> np.ndarray:
    """A0 / (1 + j f / fp); its magnitude reaches 1 at fp * sqrt(A0^2 - 1)."""
    return dc_gain / (1 + 1j * freq / pole_hz)


@pytest.fixture
def loop_gain_plot() -> MappingPlot:
    """AC sweep 1 Hz .. 1 GHz (200 points/decade) with a complex 'loopGain' and a real 'vdd'."""
    freq = np.logspace(0, 9, 1801)
    return MappingPlot.from_mapping({
        "reference": "freq",
        "signals": {
            "freq": {"unit": "Hz", "samples": freq},
            "loopGain": {"unit": "", "samples": first_order_loop_gain(freq)},
            "vdd": {"unit": "V", "samples": np.full(freq.shape, 1.8)},
        },
    })


@pytest.fixture
def transient_plot() -> MappingPlot:
    """Real sweep over time with two node voltages."""
    return MappingPlot.from_mapping({
        "reference": "time",
        "signals": {
            "time": {"unit": "s", "samples": [0.0, 1e-9, 2e-9, 3e-9]},
            "out": {"unit": "V", "samples": [0.0, 0.5, 1.0, 1.0]},
            "in": {"unit": "V", "samples": [1.0, 1.0, 1.0, 1.0]},
        },
    })


@pytest.fixture
def op_plot() -> MappingPlot:
    """Operating-point result: every signal holds exactly one sample."""
    return MappingPlot.from_mapping({
        "reference": "index",
        "signals": {
            "index": {"samples": [0]},
            "out": {"unit": "V", "samples": [0.9]},
            "I(vdd)": {"unit": "A", "samples": [-1.5e-3]},
        },
    })
