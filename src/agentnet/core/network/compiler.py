"""Network compiler — the link phase.

Resolves every cross-document reference of a loaded network and builds the
delegation and skill graphs.  Unlike loading, linking never raises: all
problems are collected and returned together as a :class:`CompileFailure`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from agentnet.core.network.config import WILDCARD, LoaderConfig
from agentnet.core.network.loader import load_network
from agentnet.core.network.models import (
    CompiledNetwork,
    CompileFailure,
    CompilerDiagnostic,
    CompileResult,
    CompileSuccess,
    ParsedAgent,
    ParsedManifest,
    ParsedSkill,
)
from agentnet.utils.telemetry import (
    ATTR_AGENT_COUNT,
    ATTR_COMPILE_SUCCESS,
    ATTR_DIAGNOSTIC_COUNT,
    ATTR_SKILL_COUNT,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


def _link_diagnostics(
    agents: Mapping[str, ParsedAgent],
    skills: Mapping[str, ParsedSkill],
) -> list[CompilerDiagnostic]:
    """Collect unresolved delegates and skills, then MCP skills lacking a launcher.

    The MCP check mirrors :class:`SkillFrontMatter` validation and only fires
    for skills constructed without it.
    """
    agent_ids = set(agents)
    skill_ids = set(skills)
    diagnostics: list[CompilerDiagnostic] = []

    for agent_id, agent in agents.items():
        for delegate_id in agent.front_matter.delegates:
            if delegate_id not in agent_ids:
                diagnostics.append(
                    CompilerDiagnostic(
                        type="missing_agent",
                        message=(
                            f"Agent '{agent_id}' delegates to '{delegate_id}', "
                            f"but '{delegate_id}' does not exist."
                        ),
                        source=agent_id,
                        target=delegate_id,
                    )
                )

        for skill_id in agent.front_matter.skills:
            if skill_id == WILDCARD:
                continue
            if skill_id not in skill_ids:
                diagnostics.append(
                    CompilerDiagnostic(
                        type="missing_skill",
                        message=(
                            f"Agent '{agent_id}' requires skill '{skill_id}', "
                            f"but '{skill_id}' is not defined."
                        ),
                        source=agent_id,
                        target=skill_id,
                    )
                )

    for skill_id, skill in skills.items():
        if skill.front_matter.type == "mcp" and skill.front_matter.mcp is None:
            diagnostics.append(
                CompilerDiagnostic(
                    type="schema_error",
                    message=f"Skill '{skill_id}' is type 'mcp' but has no mcp configuration.",
                    source=skill_id,
                )
            )

    return diagnostics


def compile_network(
    manifest: ParsedManifest,
    agents: Mapping[str, ParsedAgent],
    skills: Mapping[str, ParsedSkill],
) -> CompileResult:
    """Link a loaded network.

    Returns a :class:`CompileSuccess` carrying the compiled network, or a
    :class:`CompileFailure` listing every missing reference (agents in
    iteration order, delegates before skills, then skills).  The inputs are
    not modified.
    """
    with _tracer.start_as_current_span("agentnet.compile") as span:
        span.set_attribute(ATTR_AGENT_COUNT, len(agents))
        span.set_attribute(ATTR_SKILL_COUNT, len(skills))

        diagnostics = _link_diagnostics(agents, skills)
        span.set_attribute(ATTR_DIAGNOSTIC_COUNT, len(diagnostics))
        span.set_attribute(ATTR_COMPILE_SUCCESS, not diagnostics)

        if diagnostics:
            logger.debug("Link phase found %d problem(s)", len(diagnostics))
            return CompileFailure(errors=diagnostics)

        all_skills = list(skills)
        delegation_graph: dict[str, list[str]] = {}
        skill_graph: dict[str, list[str]] = {}

        for agent_id, agent in agents.items():
            delegation_graph[agent_id] = list(agent.front_matter.delegates)
            if WILDCARD in agent.front_matter.skills:
                skill_graph[agent_id] = list(all_skills)
            else:
                skill_graph[agent_id] = list(agent.front_matter.skills)

    logger.debug("Compiled network %s", manifest.front_matter.name)
    return CompileSuccess(
        network=CompiledNetwork(
            manifest=manifest,
            agents=dict(agents),
            skills=dict(skills),
            delegation_graph=delegation_graph,
            skill_graph=skill_graph,
        )
    )


def load_and_compile(
    network_dir: str | Path, *, config: LoaderConfig | None = None
) -> CompileResult:
    """Load a network directory and link it.

    This is the main entry point.  Load-time problems raise
    :class:`~agentnet.core.network.errors.NetworkLoadError`; link-time
    problems are returned in a :class:`CompileFailure`.
    """
    loaded = load_network(Path(network_dir), config=config)
    return compile_network(loaded.manifest, loaded.agents, loaded.skills)
