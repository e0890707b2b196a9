import pytest

from gridrush.config import GameConfig
from gridrush.engine.timing import max_enemies_for, ms_to_ticks, timing_for


def test_ms_to_ticks_never_zero():
    assert ms_to_ticks(1000, 60) == 60
    assert ms_to_ticks(2000, 60) == 120
    assert ms_to_ticks(1, 60) == 1


def test_projectile_cadence_speeds_up_with_level():
    assert timing_for(1).projectile_period == 120
    assert timing_for(11).projectile_period == 60
    assert timing_for(1).projectile_speed == pytest.approx(0.03)
    assert timing_for(6).projectile_speed == pytest.approx(0.06)


def test_speed_is_per_tick_and_follows_tick_rate():
    slow = timing_for(1, GameConfig(ticks_per_second=30))
    assert slow.projectile_speed == pytest.approx(0.06)
    assert slow.projectile_period == 60


def test_enemy_cadence():
    assert timing_for(5).enemy_step_period == 60
    assert timing_for(10).enemy_step_period == 30
    assert timing_for(5).enemy_spawn_period == 300


def test_enemy_limit_grows_then_caps():
    assert [max_enemies_for(l) for l in (1, 4, 5, 6, 7, 8, 20)] == [0, 0, 1, 2, 3, 3, 3]
    assert timing_for(3).max_enemies == 0
