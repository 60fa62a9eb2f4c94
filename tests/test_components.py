import math

import pytest

from particle_evolution.components import Bond, Group, Particle, Settings, Vec2


def test_length_and_length_squared_agree():
    v = Vec2(3.0, 4.0)
    assert v.length() == pytest.approx(5.0)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_normalize_gives_unit_vector_in_same_direction():
    v = Vec2(-7.0, 2.5)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.to_angle() == pytest.approx(v.to_angle())


def test_normalize_zero_vector_is_nan():
    n = Vec2().normalize()
    assert [math.isnan(component) for component in n] == [True, True]


def test_clamp_leaves_short_vector_alone():
    v = Vec2(1.0, 2.0)
    assert v.clamp_length_max(10.0) == v


def test_clamp_shortens_long_vector_keeping_direction():
    v = Vec2(300.0, -400.0)
    c = v.clamp_length_max(10.0)
    assert c.length() == pytest.approx(10.0)
    assert c.to_angle() == pytest.approx(v.to_angle())


def test_to_angle_of_axes():
    assert Vec2(0.0, 2.0).to_angle() == pytest.approx(math.pi / 2)
    assert Vec2(-1.0, 0.0).to_angle() == pytest.approx(math.pi)


def test_distance_is_symmetric_and_matches_squared():
    a = Vec2(1.5, -2.0)
    b = Vec2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance_squared(b) == pytest.approx(a.distance(b) ** 2)
    assert a.distance(b) == pytest.approx((a - b).length())


def test_midpoint_is_equidistant():
    a = Vec2(10.0, 0.0)
    b = Vec2(-2.0, 8.0)
    m = a.midpoint(b)
    assert m.distance(a) == pytest.approx(m.distance(b))
    assert m.distance(a) * 2 == pytest.approx(a.distance(b))


def test_arithmetic_round_trip():
    a = Vec2(1.25, -3.5)
    b = Vec2(4.0, 0.5)
    assert (a + b) - b == a
    assert -a + a == Vec2()
    assert tuple(a * 2) == tuple(2 * a)
    assert (a * 4) / 4 == a


def test_settings_defaults():
    s = Settings()
    assert s.extents == Vec2(1280.0, 720.0)
    assert s.friction == pytest.approx(0.01)


def test_particles_do_not_share_bond_lists():
    group = Group("red", 100.0, -1)
    assert group.radius == 100.0
    p = Particle(group=0, charge=1)
    q = Particle(group=0, charge=1)
    p.bonds.append(5)
    assert q.bonds == []


def test_bond_starts_with_unit_length():
    bond = Bond(1, 2, 3)
    assert bond.length == 1.0
    assert bond.position == Vec2()