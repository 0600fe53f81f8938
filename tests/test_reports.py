"""Tests for the report generation module."""

from natural_units.core.config import FactorDefinition
from natural_units.core.presets import cgs_to_geom, cgs_to_si
from natural_units.reports.summary import generate_text_report, save_text_report


def _make_definition() -> FactorDefinition:
    return FactorDefinition.from_factor(
        cgs_to_geom(), "cgs", "geometrized", preset="geom", name="Test Factor"
    )


class TestTextReport:
    def test_sections(self):
        text = generate_text_report(_make_definition())
        assert "Test Factor" in text
        assert "SYSTEMS" in text
        assert "CONVERSION FACTORS" in text
        assert "EXAMPLE CONVERSIONS" in text

    def test_all_dimensions_listed(self):
        text = generate_text_report(_make_definition())
        for label in ("Time", "Angular velocity", "Energy density", "Density"):
            assert label in text

    def test_solar_mass_example(self):
        text = generate_text_report(_make_definition())
        assert "1.4766" in text

    def test_no_examples_for_non_cgs_source(self):
        definition = FactorDefinition.from_factor(cgs_to_si(), "si", "cgs")
        text = generate_text_report(definition)
        assert "EXAMPLE CONVERSIONS" not in text

    def test_save(self, tmp_path):
        path = tmp_path / "report.txt"
        save_text_report(_make_definition(), str(path))
        assert "CONVERSION FACTORS" in path.read_text(encoding="utf-8")

    def test_unlabelled_systems(self):
        definition = FactorDefinition(conv_mass=2.0, conv_length=3.0, conv_time=5.0)
        text = generate_text_report(definition)
        assert "Source" in text
        assert "—" in text
        assert "EXAMPLE CONVERSIONS" not in text
