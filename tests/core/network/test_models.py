"""Tests for the network document schemas."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from agentnet.core.network.models import (
    AgentFrontMatter,
    CompileFailure,
    ManifestFrontMatter,
    McpConfig,
    ProviderPreset,
    SkillFrontMatter,
)


def _agent_data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "helper",
        "role": "Helper",
        "description": "Helps.",
        "defaultModel": "acme/m3",
    }
    data.update(overrides)
    return data


class TestManifestFrontMatter:
    def test_defaults(self) -> None:
        manifest = ManifestFrontMatter.model_validate(
            {
                "name": "net",
                "version": "1.0.0",
                "providers": {"acme": {"high": "m1", "medium": "m2", "low": "m3"}},
            }
        )
        assert manifest.defaults.temperature == pytest.approx(0.1)
        assert manifest.providers["acme"].medium == "m2"

    def test_providers_required(self) -> None:
        with pytest.raises(ValidationError):
            ManifestFrontMatter.model_validate({"name": "net", "version": "1"})

    def test_preset_needs_all_tiers(self) -> None:
        with pytest.raises(ValidationError):
            ManifestFrontMatter.model_validate(
                {"name": "net", "version": "1", "providers": {"acme": {"high": "m1"}}}
            )

    def test_numeric_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ManifestFrontMatter.model_validate(
                {
                    "name": "net",
                    "version": 1.0,
                    "providers": {"acme": {"high": "a", "medium": "b", "low": "c"}},
                }
            )

    def test_default_temperature_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ManifestFrontMatter.model_validate(
                {
                    "name": "net",
                    "version": "1",
                    "defaults": {"temperature": 2.5},
                    "providers": {},
                }
            )

    def test_default_temperature_rejects_strings(self) -> None:
        with pytest.raises(ValidationError):
            ManifestFrontMatter.model_validate(
                {
                    "name": "net",
                    "version": "1",
                    "defaults": {"temperature": "0.5"},
                    "providers": {},
                }
            )

    def test_preset_for_variant(self) -> None:
        preset = ProviderPreset(high="h", medium="m", low="l")
        assert preset.for_variant("high") == "h"
        assert preset.for_variant("low") == "l"


class TestAgentFrontMatter:
    def test_defaults(self) -> None:
        agent = AgentFrontMatter.model_validate(_agent_data())
        assert agent.primary is False
        assert agent.variant == "low"
        assert agent.default_temperature == pytest.approx(0.1)
        assert agent.delegates == []
        assert agent.skills == []
        assert agent.capabilities == []
        assert agent.constraints == []
        assert agent.triggers == []
        assert agent.delegation_hints == []
        assert agent.delegation_note is None

    def test_camel_case_keys(self) -> None:
        agent = AgentFrontMatter.model_validate(
            _agent_data(
                defaultTemperature=0.7,
                delegationHints=["when stuck"],
                delegationNote="Ask first",
            )
        )
        assert agent.default_model == "acme/m3"
        assert agent.default_temperature == pytest.approx(0.7)
        assert agent.delegation_hints == ["when stuck"]
        assert agent.delegation_note == "Ask first"

    def test_snake_case_keys_accepted(self) -> None:
        data = _agent_data()
        data["default_model"] = data.pop("defaultModel")
        agent = AgentFrontMatter.model_validate(data)
        assert agent.default_model == "acme/m3"

    @pytest.mark.parametrize("name", ["Helper", "my_agent", "has space", ""])
    def test_name_pattern(self, name: str) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(name=name))

    @pytest.mark.parametrize("temperature", [-0.1, 2.1])
    def test_temperature_bounds(self, temperature: float) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(defaultTemperature=temperature))

    def test_temperature_bounds_inclusive(self) -> None:
        assert AgentFrontMatter.model_validate(_agent_data(defaultTemperature=2)).default_temperature == 2

    def test_unknown_variant(self) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(variant="ultra"))

    @pytest.mark.parametrize("value", ["yes", "on", "true", 1])
    def test_primary_must_be_boolean(self, value: Any) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(primary=value))

    @pytest.mark.parametrize("value", ["0.5", True])
    def test_temperature_must_be_numeric(self, value: Any) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(defaultTemperature=value))

    def test_parsed_literals_accepted(self) -> None:
        agent = AgentFrontMatter.model_validate(_agent_data(primary=True, defaultTemperature=1))
        assert agent.primary is True
        assert agent.default_temperature == 1

    @pytest.mark.parametrize("missing", ["role", "description", "defaultModel"])
    def test_required_fields(self, missing: str) -> None:
        data = _agent_data()
        del data[missing]
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(data)

    def test_empty_mapping_is_not_a_list(self) -> None:
        with pytest.raises(ValidationError):
            AgentFrontMatter.model_validate(_agent_data(delegates={}))

    def test_unknown_keys_ignored(self) -> None:
        agent = AgentFrontMatter.model_validate(_agent_data(color="blue"))
        assert not hasattr(agent, "color")


class TestSkillFrontMatter:
    def test_builtin_default(self) -> None:
        skill = SkillFrontMatter.model_validate({"name": "search", "description": "d"})
        assert skill.type == "builtin"
        assert skill.mcp is None

    def test_mcp_requires_config(self) -> None:
        with pytest.raises(ValidationError, match="no mcp configuration"):
            SkillFrontMatter.model_validate({"name": "pw", "description": "d", "type": "mcp"})

    def test_mcp_with_package(self) -> None:
        skill = SkillFrontMatter.model_validate(
            {
                "name": "pw",
                "description": "d",
                "type": "mcp",
                "mcp": {"package": "@playwright/mcp"},
            }
        )
        assert skill.mcp is not None
        assert skill.mcp.package == "@playwright/mcp"
        assert skill.mcp.args == []

    def test_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            SkillFrontMatter.model_validate({"name": "x", "description": "d", "type": "http"})


class TestMcpConfig:
    def test_command(self) -> None:
        config = McpConfig(command="server", args=["--stdio"])
        assert config.command == "server"
        assert config.args == ["--stdio"]

    def test_requires_command_or_package(self) -> None:
        with pytest.raises(ValidationError, match="Either command or package"):
            McpConfig(args=["x"])


class TestCompileFailure:
    def test_requires_at_least_one_error(self) -> None:
        with pytest.raises(ValidationError):
            CompileFailure(errors=[])
