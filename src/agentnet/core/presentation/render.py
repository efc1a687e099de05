"""Deterministic text renderings of a compiled network."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentnet.core.network.models import CompiledNetwork

_CLASS_DEFS = [
    "    classDef primary fill:#f9f,stroke:#333,stroke-width:2px",
    "    classDef subagent fill:#bbf,stroke:#333",
    "    classDef skill fill:#bfb,stroke:#393,stroke-dasharray: 5 5",
]


def generate_mermaid_diagram(network: CompiledNetwork) -> str:
    """Render the network as a Mermaid ``graph TD`` definition.

    Primary agents get ``[[...]]`` nodes, other agents ``[...]``, and skills
    ``((...))`` nodes prefixed with ``skill_``.  Delegation edges are solid,
    skill usage edges dotted.
    """
    lines: list[str] = ["graph TD"]

    for agent_id, agent in network.agents.items():
        label = agent.front_matter.role or agent_id
        if agent.front_matter.primary:
            lines.append(f'    {agent_id}[["{label}"]]')
        else:
            lines.append(f'    {agent_id}["{label}"]')

    lines.append("")
    for skill_id in network.skills:
        lines.append(f'    skill_{skill_id}(("{skill_id}"))')

    lines.append("")
    for agent_id, delegates in network.delegation_graph.items():
        for delegate_id in delegates:
            lines.append(f"    {agent_id} -->|delegates| {delegate_id}")

    lines.append("")
    for agent_id, skill_ids in network.skill_graph.items():
        for skill_id in skill_ids:
            lines.append(f"    {agent_id} -.->|uses| skill_{skill_id}")

    lines.append("")
    lines.append("    %% Styling")
    lines.extend(_CLASS_DEFS)

    for agent_id, agent in network.agents.items():
        css_class = "primary" if agent.front_matter.primary else "subagent"
        lines.append(f"    class {agent_id} {css_class}")

    for skill_id in network.skills:
        lines.append(f"    class skill_{skill_id} skill")

    return "\n".join(lines)


def generate_network_summary(network: CompiledNetwork) -> str:
    """Render a short line-oriented overview of the network."""
    manifest = network.manifest.front_matter
    lines: list[str] = [
        f"Network: {manifest.name} v{manifest.version}",
        f"Agents: {len(network.agents)}",
        f"Skills: {len(network.skills)}",
        "",
        "Agents:",
    ]

    for agent_id, agent in network.agents.items():
        fm = agent.front_matter
        marker = "★" if fm.primary else "•"
        lines.append(f"  {marker} {agent_id} ({fm.variant})")
        if fm.delegates:
            lines.append(f"      delegates: {', '.join(fm.delegates)}")
        if fm.skills:
            lines.append(f"      skills: {', '.join(fm.skills)}")

    lines.append("")
    lines.append("Skills:")
    for skill_id, skill in network.skills.items():
        kind = "[MCP]" if skill.front_matter.type == "mcp" else "[builtin]"
        lines.append(f"  • {skill_id} {kind}")

    return "\n".join(lines)
