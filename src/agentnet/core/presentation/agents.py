"""Agent definitions — turn a compiled network into per-agent runtime config.

The model for each agent comes from the manifest's provider preset, picked by
the agent's variant.  Prompts containing ``{{DELEGATES_BLURB}}`` get the
agent's delegation blurb substituted in.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from agentnet.core.network.errors import UnknownProviderError
from agentnet.core.network.models import CompiledNetwork  # noqa: TC001
from agentnet.core.presentation.templates import (
    DELEGATES_BLURB,
    generate_delegates_blurb,
    render_template,
)

_PRIMARY_PERMISSION = {"question": "allow"}


class AgentRuntimeConfig(BaseModel):
    model: str
    temperature: float
    prompt: str
    mode: Literal["primary", "subagent"]
    permission: dict[str, str] | None = None


class AgentDefinition(BaseModel):
    name: str
    description: str = ""
    config: AgentRuntimeConfig


def build_agent_definitions(network: CompiledNetwork, provider: str) -> list[AgentDefinition]:
    """Build one :class:`AgentDefinition` per agent, in network order.

    Raises:
        UnknownProviderError: If the manifest has no preset for *provider*.
    """
    providers = network.manifest.front_matter.providers
    preset = providers.get(provider)
    if preset is None:
        raise UnknownProviderError(provider, sorted(providers))

    definitions: list[AgentDefinition] = []
    for agent_id, agent in network.agents.items():
        fm = agent.front_matter
        prompt = agent.content
        if f"{{{{{DELEGATES_BLURB}}}}}" in prompt:
            prompt = render_template(
                prompt, {DELEGATES_BLURB: generate_delegates_blurb(agent_id, network)}
            )

        definitions.append(
            AgentDefinition(
                name=fm.name,
                description=fm.description,
                config=AgentRuntimeConfig(
                    model=preset.for_variant(fm.variant),
                    temperature=fm.default_temperature,
                    prompt=prompt,
                    mode="primary" if fm.primary else "subagent",
                    permission=dict(_PRIMARY_PERMISSION) if fm.primary else None,
                ),
            )
        )

    return definitions
