"""Unit tests for effect kinds, update rules and the effect registry."""

import math
import random
import unittest

from fakes import make_particle

from burstfx.constants import CONFETTI_SHAPES
from burstfx.systems.particle.base import PARTICLE_DEFAULTS
from burstfx.systems.particle.effects import (
    CONFETTI_KIND,
    EXPLOSION_KIND,
    FIREWORKS_KIND,
    Effect,
    EffectKind,
    default_physics,
    update_confetti,
    update_explosion,
    update_fireworks,
)
from burstfx.systems.particle.registry import EffectRegistry, UnknownEffectTypeError


class TestResolveOptions(unittest.TestCase):
    """Test EffectKind.resolve_options."""

    def test_kind_defaults(self) -> None:
        """Test that each built-in kind carries its own defaults."""
        explosion = EXPLOSION_KIND.resolve_options()
        confetti = CONFETTI_KIND.resolve_options()
        fireworks = FIREWORKS_KIND.resolve_options()

        assert explosion["particles_per_explosion"] == 30
        assert (explosion["lifetime_min_ms"], explosion["lifetime_max_ms"]) == (600, 1400)
        assert explosion["gravity"] == 0.02
        assert confetti["particles_per_explosion"] == 50
        assert (confetti["particles_min_size"], confetti["particles_max_size"]) == (2, 8)
        assert confetti["gravity"] == 0.01
        assert fireworks["particles_per_explosion"] == 20
        assert (fireworks["particles_min_speed"], fireworks["particles_max_speed"]) == (5, 10)
        assert fireworks["gravity"] == -0.05

    def test_shared_defaults_fill_gaps(self) -> None:
        """Test that keys no kind sets come from PARTICLE_DEFAULTS."""
        resolved = EXPLOSION_KIND.resolve_options()

        assert resolved["lifetime_jitter"] == PARTICLE_DEFAULTS["lifetime_jitter"]
        assert resolved["glow_strength"] == 0
        assert resolved["lifetime_ms"] is None

    def test_caller_options_override_defaults(self) -> None:
        """Test that caller options win over kind defaults."""
        resolved = CONFETTI_KIND.resolve_options({"gravity": 0.5, "particles_per_explosion": 3})

        assert resolved["gravity"] == 0.5
        assert resolved["particles_per_explosion"] == 3
        assert resolved["friction_min"] == 0.98

    def test_none_values_are_ignored(self) -> None:
        """Test that None in caller options keeps the default."""
        resolved = FIREWORKS_KIND.resolve_options({"gravity": None, "particles_per_explosion": None})

        assert resolved["gravity"] == -0.05
        assert resolved["particles_per_explosion"] == 20

    def test_defaults_are_not_mutated(self) -> None:
        """Test that resolving never changes the kind's defaults."""
        EXPLOSION_KIND.resolve_options({"gravity": 9})

        assert EXPLOSION_KIND.defaults["gravity"] == 0.02


class TestEffectCreate(unittest.TestCase):
    """Test Effect.create."""

    def setUp(self) -> None:
        """Seed the generator."""
        random.seed(7)

    def test_spawns_configured_count(self) -> None:
        """Test that the effect eagerly spawns particles_per_explosion particles."""
        effect = Effect.create(EXPLOSION_KIND, (10.0, 20.0), {"particles_per_explosion": 12}, 0.0)

        assert len(effect.particles) == 12
        assert effect.effect_type == "explosion"
        assert effect.update_particle is update_explosion

    def test_default_counts(self) -> None:
        """Test default particle counts per kind."""
        assert len(Effect.create(EXPLOSION_KIND, (0.0, 0.0), None, 0.0).particles) == 30
        assert len(Effect.create(CONFETTI_KIND, (0.0, 0.0), None, 0.0).particles) == 50
        assert len(Effect.create(FIREWORKS_KIND, (0.0, 0.0), None, 0.0).particles) == 20

    def test_confetti_particles_are_decorated(self) -> None:
        """Test that confetti pieces get a shape, spin and sway."""
        effect = Effect.create(CONFETTI_KIND, (0.0, 0.0), {"particles_per_explosion": 200}, 0.0)

        shapes = {particle.shape for particle in effect.particles}
        assert shapes <= set(CONFETTI_SHAPES)
        for particle in effect.particles:
            assert 0 <= particle.angle < math.tau
            assert -0.1 <= particle.angular_velocity < 0.1
            assert 0.5 <= particle.sway < 2.0
            assert 0.6 <= particle.sway_freq < 2.2
            assert 0 <= particle.sway_phase < math.tau

    def test_fireworks_particles_have_peaks(self) -> None:
        """Test that default fireworks particles rise toward a peak."""
        effect = Effect.create(FIREWORKS_KIND, (50.0, 500.0), None, 0.0)

        assert all(particle.peak_y is not None for particle in effect.particles)
        assert not any(particle.exploded for particle in effect.particles)

    def test_glow_strength(self) -> None:
        """Test that glow strength comes from the resolved options."""
        assert Effect.create(EXPLOSION_KIND, (0.0, 0.0), None, 0.0).glow_strength == 0
        assert Effect.create(EXPLOSION_KIND, (0.0, 0.0), {"glow_strength": 2.5}, 0.0).glow_strength == 2.5

    def test_zero_particles_is_empty(self) -> None:
        """Test that an effect with no particles reports empty."""
        effect = Effect.create(EXPLOSION_KIND, (0.0, 0.0), {"particles_per_explosion": 0}, 0.0)

        assert effect.is_empty()


class TestUpdateRules(unittest.TestCase):
    """Test the per-particle update rules."""

    def test_explosion_applies_gravity_friction_then_moves(self) -> None:
        """Test the explosion rule's order of operations."""
        particle = make_particle(xv=2.0, yv=4.0, gravity=0.1, friction=0.5)

        keep = update_explosion(particle, 16.0, 0.0)

        assert keep is True
        assert math.isclose(particle.xv, 1.0)
        assert math.isclose(particle.yv, 2.05)
        assert math.isclose(particle.x, 1.0)
        assert math.isclose(particle.y, 2.05)

    def test_confetti_sway_scales_with_frame_time(self) -> None:
        """Test the sway impulse and its clamped frame-rate scale."""
        for delta_time, expected in ((16.0, 0.02), (100.0, 0.04), (1.0, 0.01), (24.0, 0.03)):
            particle = make_particle(sway=1.0, sway_freq=1.0, sway_phase=math.pi / 2)
            update_confetti(particle, delta_time, 0.0)
            assert math.isclose(particle.xv, expected), (delta_time, particle.xv)

    def test_confetti_sway_uses_seconds(self) -> None:
        """Test that the sway phase advances with the clock in seconds."""
        particle = make_particle(sway=2.0, sway_freq=1.0, sway_phase=0.0)

        update_confetti(particle, 16.0, 500.0)

        assert math.isclose(particle.xv, math.sin(0.5) * 0.02 * 2.0)

    def test_confetti_spins_and_falls(self) -> None:
        """Test that confetti rotates and then moves like an explosion particle."""
        particle = make_particle(angle=1.0, angular_velocity=0.1, gravity=0.01, sway=0.0)

        keep = update_confetti(particle, 16.0, 0.0)

        assert keep is True
        assert math.isclose(particle.angle, 1.1)
        assert math.isclose(particle.yv, 0.01)
        assert math.isclose(particle.y, 0.01)

    def test_fireworks_rises_before_peak(self) -> None:
        """Test that a rising particle accumulates negative gravity below its peak."""
        particle = make_particle(y=100.0, yv=-1.0, gravity=-0.05, peak_y=50.0)

        update_fireworks(particle, 16.0, 0.0)

        assert particle.exploded is False
        assert math.isclose(particle.yv, -1.05)
        assert math.isclose(particle.y, 98.95)

    def test_fireworks_bursts_once_past_peak(self) -> None:
        """Test the burst velocity when the particle passes its peak."""
        random.seed(3)
        for _ in range(200):
            particle = make_particle(x=5.0, y=40.0, yv=-1.0, gravity=-0.05, peak_y=50.0)
            keep = update_fireworks(particle, 16.0, 0.0)

            assert keep is True
            assert particle.exploded is True
            speed = math.hypot(particle.xv, particle.yv)
            assert 2 - 1e-9 <= speed < 6 + 1e-9
            assert math.isclose(particle.x, 5.0 + particle.xv)

    def test_fireworks_does_not_burst_twice(self) -> None:
        """Test that an exploded particle just falls with gravity."""
        particle = make_particle(y=10.0, xv=1.0, yv=2.0, gravity=-0.05, peak_y=50.0, exploded=True)

        update_fireworks(particle, 16.0, 0.0)

        assert math.isclose(particle.xv, 1.0)
        assert math.isclose(particle.yv, 1.95)

    def test_fireworks_with_positive_gravity_never_bursts(self) -> None:
        """Test that falling particles behave like explosion particles."""
        particle = make_particle(y=10.0, yv=1.0, gravity=0.2)

        update_fireworks(particle, 16.0, 0.0)

        assert particle.exploded is False
        assert math.isclose(particle.yv, 1.2)

    def test_default_physics_kick(self) -> None:
        """Test the fallback physics burst past the peak."""
        random.seed(5)
        for _ in range(200):
            particle = make_particle(y=40.0, gravity=-0.05, peak_y=50.0)
            default_physics(particle)

            assert particle.exploded is True
            assert -2 <= particle.xv < 2
            assert 1 <= particle.yv < 3

    def test_default_physics_plain_motion(self) -> None:
        """Test the fallback physics without a peak."""
        particle = make_particle(xv=1.0, yv=1.0, gravity=1.0, friction=0.5)

        default_physics(particle)

        assert math.isclose(particle.xv, 0.5)
        assert math.isclose(particle.yv, 1.0)
        assert math.isclose(particle.x, 0.5)
        assert math.isclose(particle.y, 1.0)


class TestEffectRegistry(unittest.TestCase):
    """Test EffectRegistry."""

    def tearDown(self) -> None:
        """Remove kinds registered by the tests."""
        EffectRegistry.unregister("sparkle")
        EffectRegistry.unregister("explosion_copy")

    def test_builtin_kinds_registered(self) -> None:
        """Test that the three built-in kinds are available."""
        kinds = EffectRegistry.get_all()

        assert kinds["explosion"] is EXPLOSION_KIND
        assert kinds["confetti"] is CONFETTI_KIND
        assert kinds["fireworks"] is FIREWORKS_KIND

    def test_unknown_type_raises(self) -> None:
        """Test that an unknown type fails with a descriptive error."""
        with self.assertRaises(UnknownEffectTypeError) as ctx:
            EffectRegistry.get("smoke")

        assert ctx.exception.effect_type == "smoke"
        assert "smoke" in str(ctx.exception)
        assert isinstance(ctx.exception, ValueError)

    def test_register_custom_kind(self) -> None:
        """Test registering and looking up a custom kind."""
        kind = EffectKind(name="sparkle", defaults={"particles_per_explosion": 3})

        returned = EffectRegistry.register(kind)

        assert returned is kind
        assert EffectRegistry.is_registered("sparkle")
        assert EffectRegistry.get("sparkle") is kind

    def test_reregister_warns(self) -> None:
        """Test that registering a name twice logs a warning."""
        EffectRegistry.register(EffectKind(name="explosion_copy"))

        with self.assertLogs("burstfx.systems.particle.registry", level="WARNING") as logs:
            EffectRegistry.register(EffectKind(name="explosion_copy"))

        assert any("explosion_copy" in line for line in logs.output)

    def test_empty_name_rejected(self) -> None:
        """Test that kinds need a name."""
        with self.assertRaises(ValueError):
            EffectRegistry.register(EffectKind(name=""))

    def test_unregister_missing_is_noop(self) -> None:
        """Test that unregistering an unknown name does nothing."""
        EffectRegistry.unregister("never-registered")

        assert not EffectRegistry.is_registered("never-registered")
