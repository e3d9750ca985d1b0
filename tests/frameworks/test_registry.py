"""Tests for FrameworkRegistry and default_registry."""

from __future__ import annotations

import logging

import pytest

from scaffoldctl.domain.composer import FamilySpec, FileContribution
from scaffoldctl.domain.options import OptionSpec
from scaffoldctl.frameworks.builder import FrameworkBuilder
from scaffoldctl.frameworks.families import BUILTIN_FAMILIES
from scaffoldctl.frameworks.registry import (
    FrameworkRegistry,
    UnknownFrameworkError,
    default_registry,
)


def _family(name: str, *aliases: str) -> FamilySpec:
    return FamilySpec(
        name=name,
        label=name.title(),
        category="Testing",
        aliases=aliases or (name,),
        options=(OptionSpec("docker", False, bool),),
        files=(FileContribution("README.md"),),
    )


class TestRegistration:
    def test_register_and_resolve(self) -> None:
        registry = FrameworkRegistry()
        builder = FrameworkBuilder(_family("alpha", "alpha", "alpha-ts"))
        registry.register(builder)
        assert registry.resolve("alpha-ts") is builder
        assert len(registry) == 1

    def test_collision_across_builders(self) -> None:
        registry = FrameworkRegistry()
        registry.register(FrameworkBuilder(_family("alpha", "alpha", "shared")))
        with pytest.raises(ValueError, match="already claimed by 'alpha'"):
            registry.register(FrameworkBuilder(_family("beta", "beta", "SHARED")))
        assert registry.resolve("beta") is None

    def test_duplicate_within_builder(self) -> None:
        registry = FrameworkRegistry()
        with pytest.raises(ValueError, match="claims an identifier twice"):
            registry.register(FrameworkBuilder(_family("alpha", "alpha", "Alpha")))
        assert len(registry) == 0


class TestResolve:
    def test_case_insensitive(self, registry: FrameworkRegistry) -> None:
        assert registry.resolve("REACT") is registry.resolve("react")
        assert registry.resolve("  Vite-TS ") is registry.resolve("vite")

    @pytest.mark.parametrize("identifier", ["reac", "spring-boot-web", "", "next.js"])
    def test_no_prefix_or_fuzzy_match(self, registry: FrameworkRegistry, identifier: str) -> None:
        assert registry.resolve(identifier) is None

    def test_contains(self, registry: FrameworkRegistry) -> None:
        assert "nestjs-graphql" in registry
        assert "cobol" not in registry
        assert 42 not in registry

    def test_require_unknown(self, registry: FrameworkRegistry) -> None:
        with pytest.raises(UnknownFrameworkError) as excinfo:
            registry.require("not-a-real-framework")
        assert excinfo.value.identifier == "not-a-real-framework"
        assert "react" in excinfo.value.supported
        assert "Supported frameworks: spring-boot" in str(excinfo.value)

    def test_every_identifier_resolves_to_its_claimant(self, registry: FrameworkRegistry) -> None:
        for builder in registry.builders():
            for identifier in builder.identifiers:
                assert registry.resolve(identifier) is builder


class TestListing:
    def test_builtin_families_registered(self, registry: FrameworkRegistry) -> None:
        assert len(registry) == len(BUILTIN_FAMILIES) == 12

    def test_identifiers_are_disjoint(self, registry: FrameworkRegistry) -> None:
        identifiers = registry.list_identifiers()
        assert len(identifiers) == len(set(identifiers))

    def test_registration_then_alias_order(self, registry: FrameworkRegistry) -> None:
        identifiers = registry.list_identifiers()
        assert identifiers[:4] == ["spring-boot", "spring", "spring-mvc", "spring-webflux"]
        assert identifiers[-2:] == ["nuxt", "nuxt3"]

    def test_listing_is_stable(self, registry: FrameworkRegistry) -> None:
        assert registry.list_identifiers() == registry.list_identifiers()
        assert default_registry().list_identifiers() == registry.list_identifiers()

    def test_grouped_categories(self, registry: FrameworkRegistry) -> None:
        groups = registry.grouped()
        assert list(groups) == [
            "Spring/Java",
            "Frontend",
            "Nuxt.js/Vue",
            "Python",
            "JavaScript/TypeScript",
            "Next.js/React",
        ]
        assert groups["Frontend"] == [
            "react",
            "react-vite",
            "react-cra",
            "vite",
            "vite-vanilla",
            "vite-ts",
        ]
        assert sum(len(v) for v in groups.values()) == len(registry.list_identifiers())

    def test_canonical_names_resolve(self, registry: FrameworkRegistry) -> None:
        for name in (
            "spring-boot",
            "react",
            "vue",
            "fastapi",
            "django",
            "flask",
            "vite",
            "express",
            "fastify",
            "nestjs",
            "next",
            "nuxt",
        ):
            builder = registry.resolve(name)
            assert builder is not None
            assert builder.name == name


class TestDefaultRegistry:
    def test_fresh_instances(self) -> None:
        assert default_registry() is not default_registry()

    def test_extra_families_registered_after_builtins(self) -> None:
        registry = default_registry([_family("astro", "astro", "astro-ts")])
        assert registry.list_identifiers()[-2:] == ["astro", "astro-ts"]
        assert len(registry) == 13

    def test_colliding_extra_family_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="scaffoldctl.frameworks.registry"):
            registry = default_registry([_family("my-react", "react")])
        assert len(registry) == 12
        assert registry.require("react").name == "react"
        assert "Skipping plugin framework my-react" in caplog.text
