"""Prompt templating — ``{{KEY}}`` substitution and delegation blurbs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from agentnet.core.network.models import AgentFrontMatter, CompiledNetwork

DELEGATES_BLURB = "DELEGATES_BLURB"

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{KEY}}`` in *template* with ``variables[KEY]``.

    Substitution is a single pass: placeholders appearing inside substituted
    values are not expanded.  Placeholders without a matching variable are
    left untouched.
    """
    return _PLACEHOLDER_RE.sub(lambda m: variables.get(m[1], m[0]), template)


def _format_delegate(fm: AgentFrontMatter) -> str:
    triggers = ", ".join(f'"{trigger}"' for trigger in fm.triggers)
    lines = [f"@{fm.name}"]
    if fm.delegation_note:
        lines.append(f"- About: {fm.delegation_note}")
    lines += [
        f"- Role: {fm.role}",
        f"- Capabilities: {'; '.join(fm.capabilities)}",
        f"- Tools/Constraints: {'; '.join(fm.constraints)}",
        f"- Triggers: {triggers}",
        f"- Delegate to @{fm.name} when you need things such as:",
    ]
    lines.extend(f"  * {hint}" for hint in fm.delegation_hints)
    return "\n".join(lines)


def generate_delegates_blurb(agent_id: str, network: CompiledNetwork) -> str:
    """Describe the agents *agent_id* may delegate to, one block per delegate.

    Delegate ids that do not resolve to an agent are skipped.
    """
    agent = network.agents.get(agent_id)
    if agent is None:
        return ""

    blocks = [
        _format_delegate(network.agents[delegate_id].front_matter)
        for delegate_id in agent.front_matter.delegates
        if delegate_id in network.agents
    ]
    return "\n\n".join(blocks)
