import pytest

from d2calc.activity import (
    Activity,
    DifficultyOptions,
    Player,
    PlayerClass,
    gear_delta_mult,
    remove_pve_bonuses,
    rpl_mult,
    wep_delta_mult,
)


def _activity(power_delta=0, wep_delta=0, difficulty=DifficultyOptions.NORMAL, cap=100):
    rpl = 1600
    return Activity(
        difficulty=difficulty,
        rpl=rpl,
        cap=cap,
        player=Player(power=rpl + power_delta, wep_power=rpl + wep_delta),
    )


def test_unknown_difficulty_defaults_to_normal():
    assert DifficultyOptions(7) is DifficultyOptions.NORMAL
    assert DifficultyOptions(3) is DifficultyOptions.MASTER


def test_difficulty_data_names_and_caps():
    assert DifficultyOptions.NORMAL.difficulty_data().name == "Normal"
    assert DifficultyOptions.NORMAL.difficulty_data().cap == 50
    assert DifficultyOptions.MASTER.difficulty_data().cap == 20
    assert DifficultyOptions.RAID.difficulty_data().name == "Raid & Dungeon"


@pytest.mark.parametrize(
    "difficulty, expected",
    [
        (DifficultyOptions.NORMAL, 1.0),
        (DifficultyOptions.MASTER, 0.85),
        (DifficultyOptions.RAID, 0.925),
    ],
)
def test_table_at_zero(difficulty, expected):
    assert difficulty.difficulty_data().y_at(0.0) == pytest.approx(expected)


def test_table_interpolates_between_points():
    data = DifficultyOptions.NORMAL.difficulty_data()
    low, high = data.y_at(-10.0), data.y_at(0.0)
    mid = data.y_at(-5.0)
    assert low < mid < high
    assert mid == pytest.approx((low + high) / 2)


@pytest.mark.parametrize("x", [-100.0, 0.5])
def test_table_outside_domain_raises(x):
    with pytest.raises(ValueError):
        DifficultyOptions.NORMAL.difficulty_data().y_at(x)


def test_default_activity():
    activity = Activity()
    assert activity.rpl == 1600
    assert activity.cap == 100
    assert activity.player.power == 1810
    assert activity.player.wep_power == 1810
    assert activity.player.player_class is PlayerClass.UNKNOWN


def test_rpl_mult_increases_with_power():
    assert rpl_mult(10.0) == pytest.approx(1.0)
    assert rpl_mult(1600.0) > rpl_mult(1500.0)


def test_gear_delta_above_recommended_uses_zero_point():
    assert gear_delta_mult(_activity(power_delta=30)) == pytest.approx(
        gear_delta_mult(_activity(power_delta=0))
    )


def test_gear_delta_far_below_is_zero():
    assert gear_delta_mult(_activity(power_delta=-100)) == 0.0


def test_gear_delta_grows_with_power():
    assert gear_delta_mult(_activity(power_delta=-40)) < gear_delta_mult(_activity(power_delta=-20))


def test_wep_delta_at_parity_is_one():
    assert wep_delta_mult(_activity()) == pytest.approx(1.0)


def test_wep_delta_capped_by_difficulty():
    assert wep_delta_mult(_activity(wep_delta=210)) == pytest.approx(
        wep_delta_mult(_activity(wep_delta=50))
    )


def test_wep_delta_capped_by_activity_cap():
    assert wep_delta_mult(_activity(wep_delta=100, cap=10)) == pytest.approx(
        wep_delta_mult(_activity(wep_delta=10, cap=10))
    )


def test_wep_delta_below_recommended():
    far = wep_delta_mult(_activity(wep_delta=-80))
    near = wep_delta_mult(_activity(wep_delta=-40))
    assert 0.0 < far < near < 1.0
    assert wep_delta_mult(_activity(wep_delta=-150)) == 0.0


def test_pl_delta_is_product():
    activity = _activity(power_delta=-15, wep_delta=-15, difficulty=DifficultyOptions.MASTER)
    assert activity.pl_delta() == pytest.approx(
        gear_delta_mult(activity) * wep_delta_mult(activity)
    )
    assert activity.rpl_multiplier() == pytest.approx(rpl_mult(1600.0))


def test_remove_pve_bonuses_round_trip():
    activity = _activity(power_delta=-25, difficulty=DifficultyOptions.RAID)
    base = 1234.0
    scaled = base * gear_delta_mult(activity) * rpl_mult(float(activity.rpl)) * 1.5
    assert remove_pve_bonuses(scaled, 1.5, activity) == pytest.approx(base)