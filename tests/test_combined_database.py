# tests/test_combined_database.py
import logging

import pytest

from resultsdb_core import (
    CombinedResultsDatabase, RealResultsDatabase, ComplexResultsDatabase,
    RealValue, ComplexValue, RealWaveform, ComplexWaveform, ElectricalReference,
    DatabaseContentError,
)


@pytest.fixture
def combined() -> CombinedResultsDatabase:
    return CombinedResultsDatabase.from_mappings(
        real={"vout": RealValue(0.9, "V"), "shared": RealValue(1.0)},
        complex={"shared": ComplexValue(2j), "zin": ComplexValue(50 + 5j, "Ohm")},
    )


class TestCombinedQueries:

    def test_names_are_the_union(self, combined):
        assert combined.get_value_names() == {"vout", "shared", "zin"}
        assert combined.get_wave_names() == set()
        assert combined.get_value_names_as_list() == ["shared", "vout", "zin"]

    def test_real_database_is_probed_first(self, combined):
        assert combined.get_value("shared") == RealValue(1.0)
        assert combined.get("shared") == RealValue(1.0)

    def test_real_waveform_shadows_complex_value(self):
        db = CombinedResultsDatabase(
            RealResultsDatabase.from_waveforms({"out": RealWaveform([0.0, 1.0], [0.0, 1.0], "s", "V")}),
            ComplexResultsDatabase.from_values({"out": ComplexValue(1j)}),
        )
        entry = db.get("out")
        assert isinstance(entry, RealWaveform)
        assert entry.unit_y == "V"
        assert isinstance(db.get(ElectricalReference("out")), RealWaveform)

    def test_falls_back_to_complex(self, combined):
        assert combined.get_value(ElectricalReference("zin")) == ComplexValue(50 + 5j, "Ohm")
        assert combined.is_value(ElectricalReference("zin"))

    def test_absent_names(self, combined):
        assert combined.get("nope") is None
        assert not combined.is_member("nope")
        assert "nope" not in combined
        assert "vout" in combined

    def test_mixed_modes_across_halves(self):
        db = CombinedResultsDatabase(
            RealResultsDatabase.from_waveforms({"tran": RealWaveform([0.0, 1.0], [0.0, 1.0])}),
            ComplexResultsDatabase.from_values({"z": ComplexValue(1j)}),
        )
        assert db.is_waveform_name("tran")
        assert db.is_value_name("z")
        assert isinstance(db.get("tran"), RealWaveform)
        assert isinstance(db.get("z"), ComplexValue)
        assert db.real_db.is_waveform_name("tran")
        assert db.complex_db.is_value_name("z")

    def test_wrong_kind_access_warns(self, combined, caplog):
        with caplog.at_level(logging.WARNING):
            assert combined.get_waveform("vout") is None
        assert "stored as a value" in caplog.text

    def test_complex_waveform_lookup(self):
        db = CombinedResultsDatabase.from_mappings(complex={"H": ComplexWaveform([0.0, 1.0], [1j, 1j])})
        assert isinstance(db.get_waveform("H"), ComplexWaveform)
        assert db.get_wave_names_as_list() == ["H"]


class TestCombinedEmptiness:

    def test_empty(self):
        db = CombinedResultsDatabase.empty()
        assert db.is_empty()
        assert not db.is_member("x")
        assert db.get("x") is None

    def test_one_populated_half_is_not_empty(self):
        db = CombinedResultsDatabase.from_mappings(real={"a": RealValue(1.0)})
        assert not db.is_empty()

    def test_invalid_half_is_rejected(self):
        with pytest.raises(DatabaseContentError):
            CombinedResultsDatabase.from_mappings(real={"z": ComplexValue(1j)})
