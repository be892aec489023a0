"""Tests for the rating system registry."""

import pytest

from oppr.core.errors import (
    DuplicateRatingSystemError,
    RatingSystemNotFoundError,
    RegistryFrozenError,
)
from oppr.ranking import (
    EloRatingSystem,
    GlickoRatingSystem,
    OpenSkillRatingSystem,
    RatingSystem,
    RatingSystemRegistry,
    get_rating_system,
    get_registered_rating_systems,
    has_rating_system,
    register_default_systems,
    register_rating_system,
)


@pytest.fixture
def registry():
    return RatingSystemRegistry()


class TestRegistry:
    """Tests for registration and lookup."""

    def test_starts_empty(self, registry):
        """Test a new registry has no systems."""
        assert registry.get_all() == []
        assert len(registry) == 0

    def test_register_and_get(self, registry):
        """Test a registered system can be fetched by id."""
        glicko = GlickoRatingSystem()
        registry.register(glicko)

        assert registry.get("glicko") is glicko
        assert registry.get_rating_system("glicko") is glicko
        assert registry.has("glicko")
        assert "glicko" in registry

    def test_duplicate_id_raises(self, registry):
        """Test registering the same id twice raises."""
        registry.register(GlickoRatingSystem())
        with pytest.raises(DuplicateRatingSystemError):
            registry.register(GlickoRatingSystem())

    def test_get_missing_returns_none(self, registry):
        """Test the non-throwing lookup returns None."""
        assert registry.get("elo") is None

    def test_missing_lists_available(self, registry):
        """Test the error lists registered ids in sorted order."""
        registry.register(OpenSkillRatingSystem())
        registry.register(EloRatingSystem())
        with pytest.raises(RatingSystemNotFoundError, match="Available systems: elo, openskill"):
            registry.get_rating_system("glicko")

    def test_missing_on_empty_registry(self, registry):
        """Test the error says none when nothing is registered."""
        with pytest.raises(RatingSystemNotFoundError, match="Available systems: none"):
            registry.get_rating_system("glicko")

    def test_unregister(self, registry):
        """Test unregister reports whether the id existed."""
        registry.register(EloRatingSystem())
        assert registry.unregister("elo") is True
        assert registry.unregister("elo") is False

    def test_clear(self, registry):
        """Test clear empties the registry."""
        register_default_systems(registry)
        registry.clear()
        assert registry.get_all() == []

    def test_registration_order(self, registry):
        """Test ids are listed in registration order."""
        register_default_systems(registry)
        assert registry.get_all() == ["glicko", "elo", "openskill"]


class TestFreeze:
    """Tests for the init-then-read lifecycle."""

    def test_frozen_rejects_writes(self, registry):
        """Test register and unregister fail after freeze."""
        register_default_systems(registry, freeze=True)

        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(EloRatingSystem())
        with pytest.raises(RegistryFrozenError):
            registry.unregister("elo")

    def test_frozen_allows_reads(self, registry):
        """Test lookups keep working after freeze."""
        register_default_systems(registry, freeze=True)
        assert registry.get_rating_system("elo").id == "elo"

    def test_clear_reopens(self, registry):
        """Test clear resets the frozen flag."""
        registry.freeze()
        registry.clear()
        registry.register(EloRatingSystem())
        assert registry.has("elo")


class TestModuleFunctions:
    """Tests for the module-level helpers."""

    def test_explicit_registry(self, registry):
        """Test helpers operate on the registry passed in."""
        register_rating_system(GlickoRatingSystem(), registry)

        assert has_rating_system("glicko", registry)
        assert get_registered_rating_systems(registry) == ["glicko"]
        assert get_rating_system("glicko", registry).name == "Glicko Rating System"

    def test_empty_registry_not_replaced_by_default(self, registry):
        """Test an empty registry argument is used, not the default one."""
        with pytest.raises(RatingSystemNotFoundError, match="none"):
            get_rating_system("glicko", registry)


class TestProtocol:
    """Tests for protocol conformance."""

    @pytest.mark.parametrize(
        "system", [GlickoRatingSystem(), EloRatingSystem(), OpenSkillRatingSystem()]
    )
    def test_bundled_systems_satisfy_protocol(self, system):
        """Test bundled systems are RatingSystem instances."""
        assert isinstance(system, RatingSystem)
