import pytest
from conftest import ConstantRandom

from hunter.level_generator import DifficultyParameters, LevelGenerator
from hunter.rng_service import RNGService
from hunter.terrain import Platform


def test_rejects_level_zero():
    gen = LevelGenerator(rng=ConstantRandom())
    with pytest.raises(ValueError):
        gen.generate_level(0)


def test_golden_layout_level_one(constant_rng):
    level = LevelGenerator(960, 600, rng=constant_rng).generate_level(1)
    assert level.width == 5000
    assert level.points_to_advance == 100
    assert len(level.platforms) == 19

    ground = level.platforms[:12]
    assert [p.x for p in ground] == [i * 450 for i in range(12)]
    assert all((p.y, p.width, p.height, p.kind) == (550, 450, 50, "normal") for p in ground)

    elevated = level.platforms[12:]
    assert all(p == Platform(2350, 425, 200, 30, "normal") for p in elevated)

    species = [a.species for a in level.animals]
    assert species == ["rabbit"] * 15 + ["bird"] * 10 + ["squirrel"] * 10 + ["pig"] * 5
    rabbit = level.animals[0]
    assert (rabbit.x, rabbit.y, rabbit.direction) == (2500, 520, -1)
    bird = level.animals[15]
    assert (bird.x, bird.y, bird.time) == (2500, 225, 50)
    squirrel = level.animals[25]
    assert (squirrel.x, squirrel.y) == (2500, 390)
    pig = level.animals[35]
    assert (pig.x, pig.y) == (2500, 510)


def test_difficulty_is_monotonic():
    prev = DifficultyParameters.for_level(1)
    for n in range(2, 30):
        cur = DifficultyParameters.for_level(n)
        assert cur.level_width > prev.level_width
        assert cur.points_to_advance > prev.points_to_advance
        assert cur.platform_density >= prev.platform_density
        assert cur.gap_frequency >= prev.gap_frequency
        for species in cur.spawn_rates:
            assert cur.spawn_count(species) >= prev.spawn_count(species)
        prev = cur
    assert prev.platform_density == pytest.approx(0.9)
    assert prev.gap_frequency == pytest.approx(0.4)


def test_level_three_parameters():
    params = DifficultyParameters.for_level(3)
    assert params.level_width == 7000
    assert params.points_to_advance == 200
    assert params.spawn_count("rabbit") == 28
    assert params.spawn_count("pig") == 9


def test_gaps_drawn_when_roll_is_low():
    gen = LevelGenerator(rng=ConstantRandom(0.1))
    params = DifficultyParameters.for_level(1)
    assert gen.generate_ground(params) == []


def test_seeded_generation_is_reproducible():
    a = LevelGenerator(rng=RNGService(123)).generate_level(2)
    b = LevelGenerator(rng=RNGService(123)).generate_level(2)
    assert a.platforms == b.platforms
    assert [(x.species, x.x, x.y) for x in a.animals] == [(x.species, x.x, x.y) for x in b.animals]


def test_ground_walkers_stand_on_ground_and_squirrels_on_ledges():
    gen = LevelGenerator(960, 600, rng=RNGService(7))
    level = gen.generate_level(2)
    for animal in level.animals:
        bottom = animal.y + animal.height
        if animal.species in ("rabbit", "pig"):
            assert bottom == gen.ground_height
        elif animal.species == "squirrel":
            assert bottom < gen.ground_height
            assert any(p.y == pytest.approx(bottom) and p.spans(animal.x) for p in level.platforms)
        else:
            assert 50 <= animal.y <= gen.ground_height - 150


def test_find_platform_at_tolerance():
    gen = LevelGenerator(rng=ConstantRandom())
    plats = [Platform(0, 550, 100, 50)]
    assert gen.find_platform_at(50, 545, plats) is plats[0]
    assert gen.find_platform_at(50, 544, plats) is None
    assert gen.find_platform_at(101, 550, plats) is None


def test_spawn_collectible_unknown_kind_falls_back_to_bone():
    assert LevelGenerator.spawn_collectible(0, 0, "treat").kind == "treat"
    assert LevelGenerator.spawn_collectible(0, 0, "sock").kind == "bone"
