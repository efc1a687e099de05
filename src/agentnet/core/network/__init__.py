"""Network — document schemas, loading, linking, and cycle detection."""

from agentnet.core.network.compiler import compile_network, load_and_compile
from agentnet.core.network.config import WILDCARD, LoaderConfig
from agentnet.core.network.cycles import detect_cycles, diagnose_cycles, format_cycle
from agentnet.core.network.errors import NetworkError, NetworkLoadError, UnknownProviderError
from agentnet.core.network.loader import load_agents, load_manifest, load_network, load_skills
from agentnet.core.network.models import (
    AgentFrontMatter,
    CompiledNetwork,
    CompileFailure,
    CompilerDiagnostic,
    CompileResult,
    CompileSuccess,
    LoadedNetwork,
    ManifestDefaults,
    ManifestFrontMatter,
    McpConfig,
    ParsedAgent,
    ParsedManifest,
    ParsedSkill,
    ProviderPreset,
    SkillFrontMatter,
)

__all__ = [
    "WILDCARD",
    "AgentFrontMatter",
    "CompileFailure",
    "CompileResult",
    "CompileSuccess",
    "CompiledNetwork",
    "CompilerDiagnostic",
    "LoadedNetwork",
    "LoaderConfig",
    "ManifestDefaults",
    "ManifestFrontMatter",
    "McpConfig",
    "NetworkError",
    "NetworkLoadError",
    "ParsedAgent",
    "ParsedManifest",
    "ParsedSkill",
    "ProviderPreset",
    "SkillFrontMatter",
    "UnknownProviderError",
    "compile_network",
    "detect_cycles",
    "diagnose_cycles",
    "format_cycle",
    "load_agents",
    "load_and_compile",
    "load_manifest",
    "load_network",
    "load_skills",
]
