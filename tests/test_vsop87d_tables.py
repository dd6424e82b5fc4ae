"""Tests for the packed VSOP87D series tables."""

import numpy as np
import pytest

from vsop87jax.vsop87d import (
    COORDINATES,
    EARTH_ID,
    JUPITER_ID,
    MARS_ID,
    MAX_POWER,
    MERCURY_ID,
    NEPTUNE_ID,
    SATURN_ID,
    URANUS_ID,
    VENUS_ID,
    VSOP87D_TABLES,
    SeriesTable,
)

# Number of powers of t used per coordinate (L, B, R).  The outer planets
# drop high powers of latitude and distance in the published solution.
_EXPECTED_POWERS = {
    MERCURY_ID: ("Mercury", 6, 6, 5),
    VENUS_ID: ("Venus", 6, 6, 5),
    EARTH_ID: ("Earth", 6, 5, 5),
    MARS_ID: ("Mars", 6, 6, 5),
    JUPITER_ID: ("Jupiter", 6, 6, 5),
    SATURN_ID: ("Saturn", 6, 6, 5),
    URANUS_ID: ("Uranus", 6, 5, 4),
    NEPTUNE_ID: ("Neptune", 6, 6, 4),
}


class TestPlanetTables:
    def test_eight_planets(self):
        assert len(VSOP87D_TABLES) == 8

    @pytest.mark.parametrize("planet_id", sorted(_EXPECTED_POWERS))
    def test_names_match_ids(self, planet_id):
        assert VSOP87D_TABLES[planet_id].name == _EXPECTED_POWERS[planet_id][0]

    @pytest.mark.parametrize("planet_id", sorted(_EXPECTED_POWERS))
    def test_power_counts(self, planet_id):
        table = VSOP87D_TABLES[planet_id]
        _, n_l, n_b, n_r = _EXPECTED_POWERS[planet_id]
        assert table.powers("L") == n_l
        assert table.powers("B") == n_b
        assert table.powers("R") == n_r

    @pytest.mark.parametrize("planet_id", sorted(_EXPECTED_POWERS))
    def test_used_slots_are_populated(self, planet_id):
        table = VSOP87D_TABLES[planet_id]
        for coordinate in COORDINATES:
            for terms in table.slots(coordinate):
                assert terms.ndim == 2
                assert terms.shape[1] == 3
                assert terms.shape[0] > 0

    @pytest.mark.parametrize("planet_id", sorted(_EXPECTED_POWERS))
    def test_arena_is_contiguous_and_complete(self, planet_id):
        table = VSOP87D_TABLES[planet_id]
        stop_prev = 0
        for ranges in table.slot_ranges:
            for start, stop in ranges:
                assert start == stop_prev
                stop_prev = stop
        assert stop_prev == table.n_terms

    def test_terms_are_float64_and_read_only(self):
        table = VSOP87D_TABLES[JUPITER_ID]
        assert table.terms.dtype == np.float64
        assert not table.terms.flags.writeable
        with pytest.raises(ValueError):
            table.terms[0, 0] = 1.0

    def test_terms_are_finite(self):
        for table in VSOP87D_TABLES:
            assert np.all(np.isfinite(table.terms))

    def test_earth_leading_longitude_term(self):
        # Mean longitude of the Earth at J2000
        assert VSOP87D_TABLES[EARTH_ID].slot("L", 0)[0].tolist() == [
            1.75347045673,
            0.0,
            0.0,
        ]

    def test_earth_longitude_rate(self):
        # One revolution per year: 2pi * 1000 rad per Julian millennium
        assert VSOP87D_TABLES[EARTH_ID].slot("L", 1)[0, 0] == pytest.approx(
            6283.31966747491, abs=1e-8
        )

    def test_neptune_high_latitude_powers(self):
        table = VSOP87D_TABLES[NEPTUNE_ID]
        assert table.slot("B", 4).shape == (1, 3)
        assert table.slot("B", 5).shape == (1, 3)

    def test_unused_power_is_empty(self):
        # Uranus and Neptune distances stop at t**3
        assert VSOP87D_TABLES[URANUS_ID].slot("R", 4).shape == (0, 3)
        assert VSOP87D_TABLES[NEPTUNE_ID].slot("R", 5).shape == (0, 3)
        assert VSOP87D_TABLES[EARTH_ID].slot("B", 5).shape == (0, 3)


class TestSeriesTableLookup:
    def test_unknown_coordinate_raises(self):
        with pytest.raises(ValueError, match="Unknown coordinate"):
            VSOP87D_TABLES[MARS_ID].slot("X", 0)

    def test_unknown_coordinate_powers_raises(self):
        with pytest.raises(ValueError, match="Unknown coordinate"):
            VSOP87D_TABLES[MARS_ID].powers("l")

    @pytest.mark.parametrize("power", [-1, MAX_POWER + 1])
    def test_power_out_of_range_raises(self, power):
        with pytest.raises(ValueError, match="Power must be in"):
            VSOP87D_TABLES[MARS_ID].slot("L", power)


class TestSeriesTableFromSlots:
    def test_packs_slots_in_order(self):
        table = SeriesTable.from_slots(
            "Test",
            L=[[(1.0, 0.0, 0.0)], [(2.0, 0.1, 1.0), (3.0, 0.2, 2.0)]],
            B=[[(4.0, 0.0, 0.0)]],
            R=[[(5.0, 0.0, 0.0)], [], [(6.0, 0.3, 3.0)]],
        )
        assert table.n_terms == 6
        assert table.powers("L") == 2
        assert table.powers("B") == 1
        assert table.powers("R") == 3
        assert table.slot("L", 1)[:, 0].tolist() == [2.0, 3.0]
        assert table.slot("R", 1).shape == (0, 3)
        assert table.slot("R", 2).tolist() == [[6.0, 0.3, 3.0]]

    def test_all_empty(self):
        table = SeriesTable.from_slots("Empty", L=[], B=[], R=[])
        assert table.terms.shape == (0, 3)
        assert table.slots("L") == ()

    def test_too_many_powers_raises(self):
        with pytest.raises(ValueError, match="at most"):
            SeriesTable.from_slots(
                "Test", L=[[(1.0, 0.0, 0.0)]] * (MAX_POWER + 2), B=[], R=[]
            )
