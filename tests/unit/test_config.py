"""Unit tests for MappingConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluent_mapping.core.config import MappingConfig
from fluent_mapping.core.enums import GenerationStrategy
from fluent_mapping.core.naming import DefaultNamingStrategy, UnderscoreNamingStrategy


class TestMappingConfig:
    def test_defaults(self) -> None:
        config = MappingConfig()
        assert config.naming_strategy == "default"
        assert config.default_generation_strategy is GenerationStrategy.AUTO
        assert config.custom_types == []
        assert type(config.build_naming_strategy()) is DefaultNamingStrategy

    def test_from_dict(self) -> None:
        config = MappingConfig.model_validate(
            {
                "naming_strategy": "underscore",
                "default_generation_strategy": "identity",
                "custom_types": ["money"],
            }
        )
        assert isinstance(config.build_naming_strategy(), UnderscoreNamingStrategy)
        assert config.default_generation_strategy is GenerationStrategy.IDENTITY
        assert config.build_type_registry().has("money")

    def test_unknown_naming_strategy(self) -> None:
        with pytest.raises(ValidationError):
            MappingConfig(naming_strategy="camel")

    def test_unknown_generation_strategy(self) -> None:
        with pytest.raises(ValidationError):
            MappingConfig(default_generation_strategy="hilo")
