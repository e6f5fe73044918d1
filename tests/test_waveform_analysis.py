# tests/test_waveform_analysis.py
import logging

import pytest
import numpy as np

from resultsdb_core import (
    RealWaveform, ComplexWaveform, RealValue,
)


class TestCrossings:

    def test_ramp_midpoint(self):
        ramp = RealWaveform([0.0, 1.0], [0.0, 1.0], "s", "V")
        crossing = ramp.cross(0.5, 1)
        assert crossing.get_value() == pytest.approx(0.5)
        assert crossing.unit == "s"

    def test_sample_on_level_is_counted_once(self, ramp_wave):
        assert ramp_wave.cross(0.5, 1).get_value() == pytest.approx(0.5)
        assert ramp_wave.cross(0.5, 2).is_nan()

    def test_all_crossings_as_marker_waveform(self, triangle_wave):
        markers = triangle_wave.cross(0.5)
        assert isinstance(markers, RealWaveform)
        np.testing.assert_allclose(markers.x, [0.5, 1.5])
        np.testing.assert_array_equal(markers.y, [0.5, 0.5])
        assert markers.unit_x == "s" and markers.unit_y == "V"

    def test_zero_crossings_through_samples(self, triangle_wave):
        markers = triangle_wave.cross(0.0)
        np.testing.assert_array_equal(markers.x, [0.0, 2.0, 4.0])

    def test_nth_edge(self, triangle_wave):
        assert triangle_wave.cross(-0.5, 1).get_value() == pytest.approx(2.5)
        assert triangle_wave.cross(-0.5, 2).get_value() == pytest.approx(3.5)
        assert triangle_wave.cross(-0.5, 3).is_nan()

    def test_flat_segment_reports_left_end(self):
        plateau = RealWaveform([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 1.0, 0.0])
        np.testing.assert_array_equal(plateau.cross(1.0).x, [1.0])

    def test_invalid_requests(self, triangle_wave):
        assert triangle_wave.cross(0.5, 0).is_nan()
        assert triangle_wave.cross(RealValue(), 1).is_nan()
        assert triangle_wave.cross(RealValue()).is_empty()
        assert triangle_wave.cross(RealValue(0.5, "V"), 1).get_value() == pytest.approx(0.5)

    def test_no_crossing(self, triangle_wave):
        assert triangle_wave.cross(5.0).is_empty()
        assert triangle_wave.cross(5.0, 1).is_nan()


class TestExtremaAndDecibel:

    def test_ymin_ymax(self, triangle_wave):
        assert triangle_wave.ymin() == RealValue(-1.0, "V")
        assert triangle_wave.ymax() == RealValue(1.0, "V")
        assert RealWaveform.empty().ymax().is_nan()

    def test_real_decibel(self):
        wave = RealWaveform([0.0, 1.0, 2.0], [1.0, 10.0, 100.0], "Hz", "V")
        np.testing.assert_allclose(wave.db10().y, [0.0, 10.0, 20.0])
        np.testing.assert_allclose(wave.db20().y, [0.0, 20.0, 40.0])
        assert wave.db20().unit_y == "dB"
        assert wave.db20().unit_x == "Hz"

    def test_decibel_of_zero_is_minus_infinity(self):
        assert np.isneginf(RealWaveform([0.0], [0.0]).db20().y[0])

    def test_real_decibel_of_negative_sample_is_nan(self):
        wave = RealWaveform([0.0, 1.0], [-10.0, 10.0])
        assert np.isnan(wave.db20().y[0])
        assert np.isnan(wave.db10().y[0])
        assert wave.db20().y[1] == pytest.approx(20.0)
        np.testing.assert_allclose(wave.abs().db20().y, [20.0, 20.0])

    def test_complex_decibel_uses_magnitude(self):
        wave = ComplexWaveform([1.0, 2.0], [10 + 0j, 100j])
        result = wave.db20()
        assert isinstance(result, RealWaveform)
        np.testing.assert_allclose(result.y, [20.0, 40.0])
        assert result.unit_y == "dB"


class TestComplexConversions:

    def test_parts(self, ac_wave):
        np.testing.assert_array_equal(ac_wave.real().y, [1.0, 0.0, -1.0])
        np.testing.assert_array_equal(ac_wave.imag().y, [0.0, 1.0, 0.0])
        np.testing.assert_array_equal(ac_wave.abs().y, [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(ac_wave.conjugate().y, [1 + 0j, -1j, -1 + 0j])
        assert isinstance(ac_wave.abs(), RealWaveform)
        assert ac_wave.real().unit_y == "V"

    def test_complex_phase(self, ac_wave):
        phase = ac_wave.phase_deg()
        np.testing.assert_allclose(phase.y, [0.0, 90.0, 180.0])
        assert phase.unit_y == "deg"

    def test_real_phase(self):
        phase = RealWaveform([0.0, 1.0, 2.0], [1.0, -1.0, np.nan]).phase_deg()
        np.testing.assert_array_equal(phase.y[:2], [0.0, 180.0])
        assert np.isnan(phase.y[2])
        assert phase.unit_y == "deg"


class TestElementwiseFunctions:

    def test_functions_are_unitless(self):
        wave = RealWaveform([0.0, 1.0], [2.0, 3.0], "s", "V")
        np.testing.assert_allclose(wave.pow(2).y, [4.0, 9.0])
        np.testing.assert_allclose(wave.ln().y, np.log([2.0, 3.0]))
        assert wave.pow(2).unit_y == ""
        assert wave.pow(2).unit_x == "s"

    def test_trigonometry(self):
        wave = RealWaveform([0.0, 1.0], [0.0, np.pi / 2])
        np.testing.assert_allclose(wave.sin().y, [0.0, 1.0], atol=1e-15)
        np.testing.assert_allclose(wave.cos().y, [1.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(wave.sin().asin().y, wave.y)
        np.testing.assert_allclose(RealWaveform([0.0], [1.0]).atan().y, [np.pi / 4])
        np.testing.assert_allclose(RealWaveform([0.0], [1.0]).acos().y, [0.0])
        np.testing.assert_allclose(RealWaveform([0.0], [np.pi / 4]).tan().y, [1.0])

    def test_out_of_domain_gives_nan(self):
        assert np.isnan(RealWaveform([0.0], [-1.0]).ln().y[0])
        assert np.isnan(RealWaveform([0.0], [2.0]).asin().y[0])


class TestTransientMeasures:

    def test_settling_time(self):
        # Crossings of 0.95 and 1.05; the last one is 1.2 -> 1.0 leaving 1.05 at x = 4.75.
        wave = RealWaveform([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [0.0, 2.0, 0.5, 1.2, 1.0, 1.0], "s", "V")
        settling = wave.settling_time(0.1)
        assert settling.get_value() == pytest.approx(3.75)
        assert settling.unit == "s"

    def test_settled_waveform(self):
        wave = RealWaveform([0.0, 1.0, 2.0], [1.0, 1.0, 1.0], "s")
        assert wave.settling_time(0.1).get_value() == 0.0

    def test_settling_time_of_empty_waveform(self):
        assert RealWaveform.empty().settling_time(0.1).is_nan()

    def test_wave_vs_wave(self):
        vin = RealWaveform([0.0, 1.0, 2.0], [0.0, 10.0, 20.0], "s", "V")
        iout = RealWaveform([0.0, 1.0, 2.0], [5.0, 6.0, 7.0], "s", "A")
        transfer = vin.wave_vs_wave(iout)
        np.testing.assert_array_equal(transfer.x, [0.0, 10.0, 20.0])
        np.testing.assert_array_equal(transfer.y, [5.0, 6.0, 7.0])
        assert transfer.unit_x == "V" and transfer.unit_y == "A"

    def test_wave_vs_complex_wave_warns(self, triangle_wave, ac_wave, caplog):
        with caplog.at_level(logging.WARNING):
            assert triangle_wave.wave_vs_wave(ac_wave).is_empty()
        assert "wave_vs_wave" in caplog.text
