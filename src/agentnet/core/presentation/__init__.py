"""Presentation — diagrams, summaries, prompt templates, and agent definitions."""

from agentnet.core.presentation.agents import (
    AgentDefinition,
    AgentRuntimeConfig,
    build_agent_definitions,
)
from agentnet.core.presentation.render import generate_mermaid_diagram, generate_network_summary
from agentnet.core.presentation.templates import (
    DELEGATES_BLURB,
    generate_delegates_blurb,
    render_template,
)

__all__ = [
    "DELEGATES_BLURB",
    "AgentDefinition",
    "AgentRuntimeConfig",
    "build_agent_definitions",
    "generate_delegates_blurb",
    "generate_mermaid_diagram",
    "generate_network_summary",
    "render_template",
]
