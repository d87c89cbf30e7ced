import dataclasses

import pytest

from skyraid.entities import BULLET, ENEMY_SHIP, Entity
from skyraid.input_commands import CommandSet
from skyraid.run_state import Phase


def test_idle_snapshot_has_no_player(core):
    snap = core.snapshot()
    assert snap.phase is Phase.IDLE
    assert snap.player is None
    assert snap.objects == () and snap.projectiles == ()


def test_snapshot_is_frozen(core):
    snap = core.start()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.player.x = 0  # type: ignore[misc]


def test_snapshot_is_detached_from_live_state(core):
    core.start()
    store = core.run.level.store
    enemy = store.spawn(Entity(200, 100, 32, 40, ENEMY_SHIP))
    snap = core.snapshot()
    enemy.y = 400
    core.run.economy.award(100)
    assert snap.objects[0].y == 100
    assert snap.score == 0


def test_snapshot_excludes_inactive_entities(core):
    core.start()
    store = core.run.level.store
    visible = store.spawn(Entity(200, 100, 32, 40, ENEMY_SHIP))
    store.spawn(Entity(100, 100, 32, 40, ENEMY_SHIP, active=False))
    store.spawn(Entity(100, 300, 4, 15, BULLET, active=False))
    snap = core.snapshot()
    assert [o.id for o in snap.objects] == [visible.id]
    assert snap.projectiles == ()


def test_snapshot_carries_hud_fields(core):
    core.start()
    for _ in range(10):
        snap = core.step(CommandSet(left=True))
    assert snap.phase is Phase.PLAYING
    assert snap.step == 10
    assert snap.level == 1
    assert snap.fuel == pytest.approx(300 - 10 * 0.12)
    assert snap.max_fuel == 300
    assert snap.lives == 3
    assert snap.distance == pytest.approx(35.0)
    assert snap.progress == pytest.approx(35.0 / 4000)
    assert not snap.weapons_hot
    assert snap.player.bank == -0.5
