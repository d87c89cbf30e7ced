from skyraid.particle_system import ParticleSystem


def test_particle_system_spawn_and_update():
    ps = ParticleSystem(decay=0.03)
    p = ps.spawn(10, 20, 1.0, -2.0, "#fff", 3)
    assert len(ps) == 1
    ps.update()
    assert (p.x, p.y) == (11, 18)
    # life 1.0 decays by 0.03: still alive after 33 updates, gone after 34
    for _ in range(32):
        ps.update()
    assert len(ps) == 1
    assert ps.update() == 1
    assert len(ps) == 0


def test_short_lived_particles_purge_first():
    ps = ParticleSystem(decay=0.03)
    ps.spawn(0, 0, 0, 0, "#fff", 4, life=0.4)
    ps.spawn(0, 0, 0, 0, "#fff", 4)
    for _ in range(14):
        ps.update()
    assert len(ps) == 1
    assert list(ps)[0].life > 0.5
