import pytest

from gridsims.perlin import (
    MT19937,
    PerlinNoise,
    fade,
    grad,
    lerp,
    max_amplitude,
    shuffle,
)

SAMPLES = [(0.1 * i + 0.03, -0.37 * i + 0.5, 0.21 * i - 1.7) for i in range(40)]


def test_mt19937_matches_standard_engine():
    rng = MT19937()
    for _ in range(9999):
        rng()
    assert rng() == 4123659995


def test_mt19937_same_seed_same_sequence():
    a, b = MT19937(42), MT19937(42)
    assert [a() for _ in range(700)] == [b() for _ in range(700)]


def test_mt19937_outputs_are_32_bit():
    rng = MT19937(7)
    assert all(0 <= rng() <= 0xFFFFFFFF for _ in range(1000))


def test_fade_endpoints_and_midpoint():
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == pytest.approx(0.5)


def test_lerp_endpoints():
    assert lerp(2.0, 9.0, 0.0) == 2.0
    assert lerp(2.0, 9.0, 1.0) == 9.0


def test_grad_zero_vector_is_zero():
    assert all(grad(h, 0.0, 0.0, 0.0) == 0.0 for h in range(256))


def test_grad_uses_low_four_bits():
    assert grad(3, 0.4, 0.7, 0.9) == grad(3 + 16, 0.4, 0.7, 0.9)


def test_shuffle_keeps_elements():
    items = list(range(256))
    shuffle(items, MT19937(123))
    assert sorted(items) == list(range(256))


def test_shuffle_with_constant_zero_source():
    items = [0, 1, 2, 3]
    shuffle(items, lambda: 0)
    assert items == [3, 0, 1, 2]


def test_shuffle_empty():
    items = []
    shuffle(items, MT19937())
    assert items == []


def test_max_amplitude_edges():
    assert max_amplitude(0, 0.5) == 0.0
    assert max_amplitude(1, 0.3) == 1.0


def test_default_permutation_from_table():
    state = PerlinNoise().serialize()
    assert state[:3] == (151, 160, 137)
    assert state[-1] == 180
    assert sorted(state) == list(range(256))


def test_seeded_permutation_is_reproducible():
    a, b = PerlinNoise(2024), PerlinNoise(2024)
    assert a.serialize() == b.serialize()
    assert sorted(a.serialize()) == list(range(256))


def test_reseed_with_random_source_matches_int_seed():
    a = PerlinNoise(99)
    b = PerlinNoise()
    b.reseed(MT19937(99))
    assert a.serialize() == b.serialize()


def test_serialize_deserialize_round_trip():
    source = PerlinNoise(5)
    target = PerlinNoise()
    target.deserialize(source.serialize())
    assert target.serialize() == source.serialize()
    assert target.noise3d(1.3, 2.7, 0.4) == source.noise3d(1.3, 2.7, 0.4)


@pytest.mark.parametrize("state", [list(range(255)), [0] * 255 + [256], [-1] + list(range(255))])
def test_deserialize_rejects_bad_state(state):
    with pytest.raises(ValueError):
        PerlinNoise().deserialize(state)


def test_noise_zero_on_lattice():
    noise = PerlinNoise(17)
    assert all(noise.noise3d(x, y, z) == 0.0 for x, y, z in [(0, 0, 0), (3, -2, 5), (-7, 1, 100)])


def test_noise_in_range():
    noise = PerlinNoise(3)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.noise3d(x, y, z) <= 1.0
        assert 0.0 <= noise.noise3d_01(x, y, z) <= 1.0
        assert 0.0 <= noise.noise2d_01(x, y) <= 1.0
        assert 0.0 <= noise.noise1d_01(x) <= 1.0


def test_noise_periodic_over_256():
    noise = PerlinNoise(11)
    assert noise.noise3d(0.3, 0.6, 0.9) == pytest.approx(noise.noise3d(256.3, 0.6, 0.9))


def test_lower_dimensions_use_default_offsets():
    noise = PerlinNoise(8)
    assert noise.noise1d(0.7) == noise.noise3d(0.7, 0.12345, 0.34567)
    assert noise.noise2d(0.7, 1.1) == noise.noise3d(0.7, 1.1, 0.34567)


def test_single_octave_equals_plain_noise():
    noise = PerlinNoise(21)
    for x, y, z in SAMPLES[:10]:
        assert noise.octave1d(x, 1) == noise.noise1d(x)
        assert noise.octave2d(x, y, 1) == noise.noise2d(x, y)
        assert noise.octave3d(x, y, z, 1) == noise.noise3d(x, y, z)
        assert noise.normalized_octave3d(x, y, z, 1) == noise.noise3d(x, y, z)
        assert noise.normalized_octave2d_01(x, y, 1) == pytest.approx(noise.noise2d_01(x, y))


def test_zero_octaves_gives_zero():
    noise = PerlinNoise()
    assert noise.octave3d(0.5, 0.5, 0.5, 0) == 0.0
    assert noise.octave1d_01(0.5, 0) == 0.5


def test_octave_variants_ranges():
    noise = PerlinNoise(4)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.octave1d_11(x, 6, 2.0) <= 1.0
        assert -1.0 <= noise.octave2d_11(x, y, 6, 2.0) <= 1.0
        assert -1.0 <= noise.octave3d_11(x, y, z, 6, 2.0) <= 1.0
        assert 0.0 <= noise.octave1d_01(x, 6, 2.0) <= 1.0
        assert 0.0 <= noise.octave2d_01(x, y, 6, 2.0) <= 1.0
        assert 0.0 <= noise.octave3d_01(x, y, z, 6, 2.0) <= 1.0
        assert -1.0 <= noise.normalized_octave1d(x, 4) <= 1.0
        assert -1.0 <= noise.normalized_octave2d(x, y, 4) <= 1.0
        assert 0.0 <= noise.normalized_octave1d_01(x, 4) <= 1.0
        assert 0.0 <= noise.normalized_octave3d_01(x, y, z, 4) <= 1.0


def test_clamped_octave_matches_unclamped_when_small():
    noise = PerlinNoise(9)
    for x, y, z in SAMPLES:
        raw = noise.octave3d(x, y, z, 3)
        if -1.0 < raw < 1.0:
            assert noise.octave3d_11(x, y, z, 3) == raw
        else:
            assert abs(noise.octave3d_11(x, y, z, 3)) == 1.0