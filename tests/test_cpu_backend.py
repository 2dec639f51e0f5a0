import math

import pytest

from nbody import constants
from nbody.backends import cpu
from nbody.errors import InvalidArgument
from nbody.helpers import sum_squares


def test_canonical_table_is_fixed():
    assert len(constants.CANONICAL_BODIES) == constants.BODIES_COUNT == 5
    assert [r.name for r in constants.CANONICAL_BODIES] == ['sun', 'jupiter', 'saturn', 'uranus', 'neptune']
    assert all(r.mass > 0 for r in constants.CANONICAL_BODIES)
    assert constants.SUN.mass == constants.SOLAR_MASS
    with pytest.raises(AttributeError):
        constants.SUN.mass = 1.0


def test_construction_leaves_table_untouched():
    backend = cpu.Backend()
    backend.advance(0.01)
    assert constants.SUN.velocity == (0.0, 0.0, 0.0)
    assert constants.JUPITER.position[0] == 4.84143144246472090e+00


def test_momentum_is_zero_after_construction():
    backend = cpu.Backend()
    assert math.sqrt(sum_squares(backend.momentum())) < 1e-15


def test_only_the_sun_velocity_is_offset():
    backend = cpu.Backend()
    for record, body in zip(constants.CANONICAL_BODIES[1:], backend.bodies[1:]):
        assert list(body.velocity) == list(record.velocity)
    assert list(backend.bodies[0].velocity) != [0.0, 0.0, 0.0]


def test_initial_energy():
    backend = cpu.Backend()
    assert f'{backend.energy():.9f}' == '-0.169075164'


def test_energy_after_1000_steps():
    backend = cpu.Backend()
    for _ in range(1000):
        backend.advance(0.01)
    assert f'{backend.energy():.9f}' == '-0.169087605'


def test_energy_is_a_pure_read():
    backend = cpu.Backend()
    assert backend.energy() == backend.energy()
    positions = [list(b.position) for b in backend.bodies]
    backend.energy()
    assert [list(b.position) for b in backend.bodies] == positions


def test_runs_are_deterministic():
    a, b = cpu.Backend(), cpu.Backend()
    for _ in range(200):
        a.step()
        b.step()
    assert a.energy() == b.energy()
    for ba, bb in zip(a.bodies, b.bodies):
        assert ba.position == bb.position
        assert ba.velocity == bb.velocity


def test_energy_drift_stays_small():
    backend = cpu.Backend()
    e0 = backend.energy()
    for _ in range(10000):
        backend.step()
    assert abs(backend.energy() - e0) < 1e-4


def test_every_step_processes_ten_pairs(monkeypatch):
    calls = []
    original = cpu.magnitude

    def counting(d, dt):
        calls.append(dt)
        return original(d, dt)

    monkeypatch.setattr(cpu, 'magnitude', counting)
    backend = cpu.Backend()
    assert backend.pairs == cpu.PAIRS
    assert len(backend.pairs) == constants.INTERACTIONS == 10
    assert all(i < j for i, j in backend.pairs)

    for n in range(1, 4):
        backend.advance(0.01)
        assert len(calls) == 10 * n


def test_velocities_use_pre_step_positions():
    backend = cpu.Backend()
    before = [b.position.copy() for b in backend.bodies]
    velocities = [b.velocity.copy() for b in backend.bodies]
    dt = 0.01

    backend.advance(dt)

    expected = [v.copy() for v in velocities]
    for i, j in cpu.PAIRS:
        d = before[i] - before[j]
        mag = cpu.magnitude(d, dt)
        expected[i] -= d * (backend.bodies[j].mass * mag)
        expected[j] += d * (backend.bodies[i].mass * mag)

    for body, v, p in zip(backend.bodies, expected, before):
        assert body.velocity == v
        assert body.position == p + v * dt


def test_momentum_stays_near_zero():
    backend = cpu.Backend()
    for _ in range(1000):
        backend.step()
    assert math.sqrt(sum_squares(backend.momentum())) < 1e-12


@pytest.mark.parametrize('config', [{}, {'dt': 0}, {'dt': -0.01}, {'dt': float('nan')}, {'dt': '0.01'}])
def test_bad_config_is_rejected(config):
    with pytest.raises(InvalidArgument):
        cpu.Backend(config=config)
