# tests/test_plot.py
import pytest
import numpy as np

from resultsdb_core import (
    MappingPlot, PlotSource, PlotSchemaError, PlotSignalError, DiagnosableError,
)


def _raw(signals, reference="time"):
    return {"reference": reference, "signals": signals}


class TestMappingPlotConstruction:

    def test_valid_mapping(self, transient_plot):
        assert isinstance(transient_plot, PlotSource)
        assert transient_plot.point_count() == 4
        assert transient_plot.signal_names() == {"time", "out", "in"}
        assert transient_plot.reference_signal_name() == "time"
        assert transient_plot.unit("out") == "V"

    def test_unit_defaults_to_empty(self, op_plot):
        assert op_plot.unit("index") == ""

    def test_samples_are_read_only_float_arrays(self, transient_plot):
        samples = transient_plot.samples("out")
        assert samples.dtype == np.float64
        with pytest.raises(ValueError):
            samples[0] = 1.0

    def test_numpy_input_and_complex_detection(self):
        plot = MappingPlot.from_mapping(_raw({
            "freq": {"unit": "Hz", "samples": np.array([1.0, 10.0])},
            "H": {"samples": np.array([1 + 1j, 0.5j])},
        }, reference="freq"))
        assert plot.samples("H").dtype == np.complex128
        assert plot.samples("freq").dtype == np.float64
        assert plot.is_complex()

    def test_mixed_real_and_complex_samples_make_a_complex_signal(self):
        plot = MappingPlot.from_mapping(_raw({"time": {"samples": [0.0, 1j]}}))
        assert plot.samples("time").dtype == np.complex128

    def test_real_plot_is_not_complex(self, transient_plot):
        assert not transient_plot.is_complex()


class TestMappingPlotValidation:

    def test_reference_must_name_a_signal(self):
        with pytest.raises(PlotSchemaError) as excinfo:
            MappingPlot.from_mapping(_raw({"out": {"samples": [1.0]}}, reference="time"))
        assert "reference" in excinfo.value.errors
        assert "Plot Schema Error" in excinfo.value.get_diagnostic_report()

    def test_sample_counts_must_agree(self):
        with pytest.raises(PlotSchemaError) as excinfo:
            MappingPlot.from_mapping(_raw({
                "time": {"samples": [0.0, 1.0, 2.0]},
                "out": {"samples": [0.0, 1.0]},
            }))
        assert "signals" in excinfo.value.errors
        assert "same number of samples" in str(excinfo.value)

    def test_samples_must_not_be_empty(self):
        with pytest.raises(PlotSchemaError):
            MappingPlot.from_mapping(_raw({"time": {"samples": []}}))

    def test_samples_must_be_numbers(self):
        with pytest.raises(PlotSchemaError):
            MappingPlot.from_mapping(_raw({"time": {"samples": [0.0, "one"]}}))

    def test_unknown_keys_are_rejected(self):
        raw = _raw({"time": {"samples": [0.0]}})
        raw["comment"] = "not allowed"
        with pytest.raises(PlotSchemaError):
            MappingPlot.from_mapping(raw)

    def test_missing_signals(self):
        with pytest.raises(PlotSchemaError) as excinfo:
            MappingPlot.from_mapping({"reference": "time"})
        assert "signals" in excinfo.value.errors

    def test_non_mapping_input(self):
        with pytest.raises(PlotSchemaError):
            MappingPlot.from_mapping(["time"])


class TestMappingPlotLookups:

    def test_unknown_signal(self, transient_plot):
        with pytest.raises(PlotSignalError) as excinfo:
            transient_plot.samples("vout")
        error = excinfo.value
        assert isinstance(error, DiagnosableError)
        assert error.signal == "vout"
        report = error.get_diagnostic_report()
        assert "Unknown Plot Signal" in report
        assert "out" in report

    def test_unknown_unit_lookup(self, transient_plot):
        with pytest.raises(PlotSignalError):
            transient_plot.unit("vout")
