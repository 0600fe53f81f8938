"""Tests for conversion factor derivation and application."""

import dataclasses
import math

import numpy as np
import pytest

from natural_units.core.dimension import Dimension
from natural_units.core.factor import ConversionFactor, apply, convert, invert

# Explicit dimension -> field table, independent of Dimension.field_name
FIELDS = {
    Dimension.TIME: "conv_time",
    Dimension.LENGTH: "conv_length",
    Dimension.MASS: "conv_mass",
    Dimension.VELOCITY: "conv_velocity",
    Dimension.MOMENTUM: "conv_momentum",
    Dimension.ANGULAR_VELOCITY: "conv_angular_velocity",
    Dimension.ACCELERATION: "conv_acceleration",
    Dimension.ENERGY: "conv_energy",
    Dimension.ENERGY_DENSITY: "conv_energy_density",
    Dimension.ANGULAR_MOMENTUM: "conv_angular_momentum",
    Dimension.FORCE: "conv_force",
    Dimension.POWER: "conv_power",
    Dimension.PRESSURE: "conv_pressure",
    Dimension.DENSITY: "conv_density",
}

BASES = [
    (1.0, 1.0, 1.0),
    (1e3, 1e2, 1.0),
    (2.0, 3.0, 5.0),
    (7.4261e-29, 1.0, 2.99792458e10),
    (0.5, 1e-7, 3e4),
]


class TestDerivation:
    @pytest.mark.parametrize("m, l, t", BASES)
    def test_base_factors_kept(self, m, l, t):
        f = ConversionFactor(m, l, t)
        assert f.conv_mass == m
        assert f.conv_length == l
        assert f.conv_time == t
        assert f.base_factors() == (m, l, t)

    @pytest.mark.parametrize("m, l, t", BASES)
    def test_derived_formulas_exact(self, m, l, t):
        f = ConversionFactor(m, l, t)
        v = l / t
        assert f.conv_velocity == v
        assert f.conv_momentum == m * v
        assert f.conv_angular_velocity == 1.0 / t
        assert f.conv_acceleration == v / t
        assert f.conv_energy == m * (v * v)
        assert f.conv_energy_density == f.conv_energy / (l * l * l)
        assert f.conv_angular_momentum == f.conv_momentum * l
        assert f.conv_force == m * f.conv_acceleration
        assert f.conv_power == f.conv_energy / t
        assert f.conv_pressure == f.conv_force / (l * l)
        assert f.conv_density == m / (l * l * l)

    def test_reproducible(self):
        a = ConversionFactor(1.234e-5, 6.789e3, 4.2)
        b = ConversionFactor(1.234e-5, 6.789e3, 4.2)
        assert a == b
        assert a.as_dict() == b.as_dict()

    def test_integer_inputs_coerced(self):
        f = ConversionFactor(1000, 100, 1)
        assert isinstance(f.conv_mass, float)
        assert isinstance(f.conv_energy, float)
        assert f.conv_energy == pytest.approx(1e7)

    def test_derived_fields_not_constructor_args(self):
        with pytest.raises(TypeError):
            ConversionFactor(1.0, 1.0, 1.0, conv_velocity=2.0)

    def test_immutable(self):
        f = ConversionFactor(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.conv_mass = 5.0

    def test_as_dict_covers_all_dimensions(self):
        d = ConversionFactor(2.0, 3.0, 5.0).as_dict()
        assert set(d) == {dim.value for dim in Dimension}
        assert len(d) == 14


class TestFloatingPointPropagation:
    def test_zero_time_gives_inf(self):
        f = ConversionFactor(1.0, 1.0, 0.0)
        assert math.isinf(f.conv_velocity)
        assert math.isinf(f.conv_angular_velocity)

    def test_zero_length_gives_inf_density(self):
        f = ConversionFactor(1.0, 0.0, 1.0)
        assert math.isinf(f.conv_density)
        assert f.conv_velocity == 0.0

    def test_all_zero_gives_nan(self):
        f = ConversionFactor(0.0, 0.0, 0.0)
        assert math.isnan(f.conv_velocity)
        assert math.isnan(f.conv_density)

    def test_negative_accepted(self):
        f = ConversionFactor(-1.0, 2.0, 1.0)
        assert f.conv_mass == -1.0
        assert f.conv_energy == pytest.approx(-4.0)

    def test_invert_by_zero_factor(self):
        f = ConversionFactor(0.0, 1.0, 1.0)
        assert math.isinf(invert(1.0, Dimension.MASS, f))
        assert math.isnan(invert(0.0, Dimension.MASS, f))


class TestApplyInvert:
    @pytest.mark.parametrize("dim", list(Dimension))
    def test_dispatch_routes_to_field(self, dim):
        f = ConversionFactor(2.0, 3.0, 5.0)
        expected = getattr(f, FIELDS[dim])
        assert f.factor(dim) == expected
        assert apply(1.0, dim, f) == expected
        assert apply(4.0, dim, f) == 4.0 * expected
        assert invert(4.0, dim, f) == 4.0 / expected

    def test_dispatch_fields_distinct(self):
        assert len(set(FIELDS.values())) == len(Dimension) == 14
        assert {d.field_name for d in Dimension} == set(FIELDS.values())

    @pytest.mark.parametrize("dim", list(Dimension))
    def test_identity_factor(self, dim):
        f = ConversionFactor(1.0, 1.0, 1.0)
        assert apply(3.25, dim, f) == 3.25
        assert invert(3.25, dim, f) == 3.25

    @pytest.mark.parametrize("m, l, t", BASES)
    @pytest.mark.parametrize("dim", list(Dimension))
    def test_round_trip(self, m, l, t, dim):
        f = ConversionFactor(m, l, t)
        v = 1.98848e33
        assert invert(apply(v, dim, f), dim, f) == pytest.approx(v, rel=1e-12)

    def test_methods_match_functions(self):
        f = ConversionFactor(1e3, 1e2, 1.0)
        assert f.apply(2.0, Dimension.FORCE) == apply(2.0, Dimension.FORCE, f)
        assert f.invert(2.0, Dimension.FORCE) == invert(2.0, Dimension.FORCE, f)

    def test_convert_alias(self):
        f = ConversionFactor(1e3, 1e2, 1.0)
        assert convert(1.0, Dimension.MASS, f) == 1000.0

    def test_returns_float_for_scalar(self):
        f = ConversionFactor(1e3, 1e2, 1.0)
        assert type(apply(1.0, Dimension.MASS, f)) is float
        assert type(invert(1.0, Dimension.MASS, f)) is float

    def test_numpy_array(self):
        f = ConversionFactor(1e3, 1e2, 1.0)
        values = np.array([1.0, 2.0, 3.0])
        out = apply(values, Dimension.LENGTH, f)
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, [100.0, 200.0, 300.0])
        np.testing.assert_allclose(invert(out, Dimension.LENGTH, f), values)


class TestAlgebra:
    def test_inverse_undoes_apply(self):
        f = ConversionFactor(1e3, 1e2, 1.0)
        back = f.inverse()
        for dim in Dimension:
            assert apply(apply(5.0, dim, f), dim, back) == pytest.approx(5.0, rel=1e-12)

    def test_inverse_base_factors(self):
        back = ConversionFactor(4.0, 2.0, 8.0).inverse()
        assert back.base_factors() == (0.25, 0.5, 0.125)

    def test_compose_multiplies_factors(self):
        a = ConversionFactor(2.0, 3.0, 5.0)
        b = ConversionFactor(7.0, 11.0, 13.0)
        ab = a.compose(b)
        for dim in Dimension:
            assert ab.factor(dim) == pytest.approx(a.factor(dim) * b.factor(dim), rel=1e-12)

    def test_compose_with_inverse_is_identity(self):
        f = ConversionFactor(7.4261e-29, 1.0, 2.99792458e10)
        ident = f.compose(f.inverse())
        for dim in Dimension:
            assert ident.factor(dim) == pytest.approx(1.0, rel=1e-12)


class TestEquality:
    def test_equal_bases(self):
        assert ConversionFactor(1000, 100, 1) == ConversionFactor(1e3, 1e2, 1.0)

    def test_different_bases(self):
        assert ConversionFactor(1.0, 2.0, 3.0) != ConversionFactor(1.0, 2.0, 4.0)

    def test_nan_factor_equals_itself(self):
        f = ConversionFactor(0.0, 0.0, 0.0)
        assert math.isnan(f.conv_velocity)
        assert f == f
        assert f == ConversionFactor(0.0, 0.0, 0.0)

    def test_hashable(self):
        factors = {
            ConversionFactor(0.0, 0.0, 0.0),
            ConversionFactor(0.0, 0.0, 0.0),
            ConversionFactor(1.0, 1.0, 1.0),
        }
        assert len(factors) == 2

    def test_not_equal_to_other_types(self):
        assert ConversionFactor(1.0, 1.0, 1.0) != (1.0, 1.0, 1.0)
