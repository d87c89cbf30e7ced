from collections import Counter

from skyraid.config import GameConfig
from skyraid.entities import ENEMY_KINDS, FUEL
from skyraid.entity_store import EntityStore
from skyraid.rng_service import RNGService
from skyraid.spawn_director import SpawnDirector


def director(seed=5, **overrides):
    return SpawnDirector(GameConfig(**overrides), RNGService(seed))


def test_spawn_interval_shrinks_to_floor():
    cfg = GameConfig()
    assert cfg.spawn_interval(1) == 110
    assert cfg.spawn_interval(5) == 70
    assert cfg.spawn_interval(6) == 60
    assert cfg.spawn_interval(12) == 60


def test_tick_crossed():
    d = director()
    assert d.tick_crossed(220.0, 3.5, level=1)  # 220 % 110 == 0
    assert d.tick_crossed(223.4, 3.5, level=1)  # floor -> 3 < 3.5
    assert not d.tick_crossed(225.0, 3.5, level=1)


def test_opening_ladder_layout():
    store = EntityStore()
    placed = director().seed_opening(store)
    enemies = [e for e in placed if e.is_enemy]
    fuel = [e for e in placed if e.kind == FUEL]
    assert [e.y for e in enemies] == [-150 * i for i in range(1, 8)]
    assert [f.y for f in fuel] == [-525, -975]
    assert len(store.objects) == 9


def test_spawns_stay_inside_lanes():
    store = EntityStore()
    d = director(seed=77)
    for _ in range(200):
        d.spawn_enemy(store, 50)
        d.spawn_fuel(store, 100)
    for e in store.objects:
        if e.kind == FUEL:
            assert 100 <= e.x < 300
            assert (e.width, e.height) == (30, 40)
        else:
            assert e.kind in ENEMY_KINDS
            assert 60 <= e.x < 340


def test_enemy_variant_dimensions():
    store = EntityStore()
    d = director(seed=3)
    sizes = {}
    for _ in range(100):
        e = d.spawn_enemy(store, 50)
        sizes[e.kind] = (e.width, e.height)
    assert sizes == {"enemy_ship": (32, 40), "enemy_heli": (32, 30), "enemy_tank": (32, 24)}


def test_variant_weights():
    store = EntityStore()
    d = director(seed=11)
    kinds = Counter(d.spawn_enemy(store, 50).kind for _ in range(4000))
    assert 0.16 < kinds["enemy_tank"] / 4000 < 0.24


def test_update_spawns_only_on_tick():
    store = EntityStore()
    d = director(enemy_spawn_chance=1.0, fuel_spawn_chance=1.0)
    assert d.update(store, 225.0, 3.5, level=1) == []
    spawned = d.update(store, 220.0, 3.5, level=1)
    assert len(spawned) == 2
    assert spawned[0].is_enemy and spawned[0].y == -50
    assert spawned[1].kind == FUEL and spawned[1].y == -100


def test_same_seed_same_sequence():
    def run(seed):
        store = EntityStore()
        d = director(seed=seed)
        d.seed_opening(store)
        for offset in range(0, 2000, 2):
            d.update(store, float(offset), 3.5, level=1)
        return [(e.kind, round(e.x, 6), e.y) for e in store.objects]

    assert run(42) == run(42)
    assert run(42) != run(43)
