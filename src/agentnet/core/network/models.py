"""Network models — schemas for the manifest, agent, and skill documents.

A network directory holds one ``manifest.md``, an ``agents/`` directory and
an optional ``skills/`` directory.  Each document starts with a front-matter
header validated against one of the schemas below; the free-text body is
kept alongside as ``content``.

Example agent header::

    ---
    name: orchestrator
    primary: true
    role: Coordinates the team
    description: Entry point of the network.
    delegates: [helper]
    skills:
      - "*"
    variant: high
    defaultModel: acme/m1
    ---

On-disk keys are camelCase; the models expose snake_case attributes and
accept either spelling.  Boolean and numeric fields are strict: only the
parsed literals are accepted, never strings such as ``yes`` or ``"0.5"``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, model_validator
from pydantic.alias_generators import to_camel

NAME_PATTERN = r"^[a-z0-9-]+$"

ModelVariant = Literal["high", "medium", "low"]
SkillType = Literal["mcp", "builtin"]
DiagnosticType = Literal["missing_agent", "missing_skill", "cycle_detected", "schema_error"]


class _FrontMatterModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


class ProviderPreset(_FrontMatterModel):
    """Concrete model identifiers for one provider, keyed by tier."""

    high: str
    medium: str
    low: str

    def for_variant(self, variant: ModelVariant) -> str:
        return getattr(self, variant)


class ManifestDefaults(_FrontMatterModel):
    temperature: StrictFloat = Field(default=0.1, ge=0, le=2)


class ManifestFrontMatter(_FrontMatterModel):
    """Network identity and provider tier mappings."""

    name: str
    version: str
    defaults: ManifestDefaults = Field(default_factory=ManifestDefaults)
    providers: dict[str, ProviderPreset]


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class AgentFrontMatter(_FrontMatterModel):
    """A role in the network: who it may delegate to and which skills it uses."""

    name: str = Field(pattern=NAME_PATTERN)
    primary: StrictBool = False
    role: str
    description: str

    delegates: list[str] = []
    skills: list[str] = []

    variant: ModelVariant = "low"
    default_model: str
    default_temperature: StrictFloat = Field(default=0.1, ge=0, le=2)

    capabilities: list[str] = []
    constraints: list[str] = []
    triggers: list[str] = []
    delegation_hints: list[str] = []
    delegation_note: str | None = None


# ---------------------------------------------------------------------------
# Skill
# ---------------------------------------------------------------------------


class McpConfig(_FrontMatterModel):
    """How to launch the MCP server backing a skill."""

    command: str | None = None
    package: str | None = None
    args: list[str] = []

    @model_validator(mode="after")
    def _require_launcher(self) -> McpConfig:
        if not self.command and not self.package:
            msg = "Either command or package must be provided"
            raise ValueError(msg)
        return self


class SkillFrontMatter(_FrontMatterModel):
    """A capability agents can use: a builtin prompt or an MCP-backed tool."""

    name: str = Field(pattern=NAME_PATTERN)
    description: str
    type: SkillType = "builtin"
    mcp: McpConfig | None = None

    @model_validator(mode="after")
    def _require_mcp_config(self) -> SkillFrontMatter:
        if self.type == "mcp" and self.mcp is None:
            msg = f"Skill '{self.name}' is type 'mcp' but has no mcp configuration"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Parsed documents
# ---------------------------------------------------------------------------


class ParsedManifest(BaseModel):
    front_matter: ManifestFrontMatter
    content: str = ""


class ParsedAgent(BaseModel):
    front_matter: AgentFrontMatter
    content: str = ""


class ParsedSkill(BaseModel):
    front_matter: SkillFrontMatter
    content: str = ""


class LoadedNetwork(BaseModel):
    """Validated documents of one network directory, not yet linked."""

    manifest: ParsedManifest
    agents: dict[str, ParsedAgent] = {}
    skills: dict[str, ParsedSkill] = {}


# ---------------------------------------------------------------------------
# Compiler output
# ---------------------------------------------------------------------------


class CompiledNetwork(BaseModel):
    """A fully linked network.

    Every id in ``delegation_graph`` values is a key of ``agents`` and every
    id in ``skill_graph`` values is a key of ``skills``.
    """

    manifest: ParsedManifest
    agents: dict[str, ParsedAgent]
    skills: dict[str, ParsedSkill]
    delegation_graph: dict[str, list[str]]
    skill_graph: dict[str, list[str]]


class CompilerDiagnostic(BaseModel):
    """One structural problem found while linking."""

    type: DiagnosticType
    message: str
    source: str
    target: str | None = None


class CompileSuccess(BaseModel):
    success: Literal[True] = True
    network: CompiledNetwork


class CompileFailure(BaseModel):
    success: Literal[False] = False
    errors: list[CompilerDiagnostic] = Field(min_length=1)


CompileResult = CompileSuccess | CompileFailure
