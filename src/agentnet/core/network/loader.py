"""Network loader — read and validate the documents of a network directory.

Typical usage::

    network = load_network(Path("network"))
    network.agents["orchestrator"].front_matter.delegates

Loading is fail-fast: the first unreadable, unparsable, or invalid file
raises :class:`~agentnet.core.network.errors.NetworkLoadError` and nothing
else is loaded.  Records are keyed by the ``name`` declared in their front
matter, not by file name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from agentnet.core.frontmatter import FrontMatter, FrontMatterError, extract_front_matter
from agentnet.core.network.config import LoaderConfig
from agentnet.core.network.errors import NetworkLoadError
from agentnet.core.network.models import (
    AgentFrontMatter,
    LoadedNetwork,
    ManifestFrontMatter,
    ParsedAgent,
    ParsedManifest,
    ParsedSkill,
    SkillFrontMatter,
)
from agentnet.utils.telemetry import (
    ATTR_AGENT_COUNT,
    ATTR_NETWORK_DIR,
    ATTR_NETWORK_NAME,
    ATTR_SKILL_COUNT,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_SchemaT = TypeVar("_SchemaT", bound=BaseModel)

_DEFAULT_CONFIG = LoaderConfig()


def _read_document(path: Path) -> FrontMatter:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NetworkLoadError(str(path), f"Cannot read file: {exc}") from exc

    try:
        return extract_front_matter(text)
    except FrontMatterError as exc:
        raise NetworkLoadError(str(path), str(exc)) from exc


def _validate(path: Path, schema: type[_SchemaT], header: dict) -> _SchemaT:
    try:
        return schema.model_validate(header)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise NetworkLoadError(
            str(path),
            f"Schema validation failed: {problems}",
            details=exc.errors(include_url=False),
        ) from exc


def _document_files(directory: Path, config: LoaderConfig) -> list[Path]:
    suffix = config.normalized_extension
    return sorted(p for p in directory.iterdir() if p.suffix == suffix and p.is_file())


def load_manifest(
    network_dir: str | Path, *, config: LoaderConfig | None = None
) -> ParsedManifest:
    """Load and validate ``<network_dir>/manifest.md``.

    Raises:
        NetworkLoadError: If the manifest is missing or invalid.
    """
    config = config or _DEFAULT_CONFIG
    path = Path(network_dir) / config.manifest_file

    if not path.is_file():
        raise NetworkLoadError(str(path), "Manifest file not found")

    document = _read_document(path)
    front_matter = _validate(path, ManifestFrontMatter, document.header)
    logger.debug("Loaded manifest %s from %s", front_matter.name, path)
    return ParsedManifest(front_matter=front_matter, content=document.body)


def load_agents(
    network_dir: str | Path, *, config: LoaderConfig | None = None
) -> dict[str, ParsedAgent]:
    """Load every agent document from ``<network_dir>/agents/``.

    Raises:
        NetworkLoadError: If the directory is missing or any file is invalid.
    """
    config = config or _DEFAULT_CONFIG
    agents_dir = Path(network_dir) / config.agents_dir

    if not agents_dir.is_dir():
        raise NetworkLoadError(str(agents_dir), "Agents directory not found")

    agents: dict[str, ParsedAgent] = {}
    for path in _document_files(agents_dir, config):
        document = _read_document(path)
        front_matter = _validate(path, AgentFrontMatter, document.header)

        if front_matter.name in agents:
            logger.warning(
                "Duplicate agent name '%s' at %s replaces an earlier definition",
                front_matter.name,
                path,
            )
        agents[front_matter.name] = ParsedAgent(front_matter=front_matter, content=document.body)
        logger.debug("Loaded agent %s from %s", front_matter.name, path)

    return agents


def load_skills(
    network_dir: str | Path, *, config: LoaderConfig | None = None
) -> dict[str, ParsedSkill]:
    """Load every skill document from ``<network_dir>/skills/``.

    The skills directory is optional; when absent no skills are returned.

    Raises:
        NetworkLoadError: If any skill file is invalid.
    """
    config = config or _DEFAULT_CONFIG
    skills_dir = Path(network_dir) / config.skills_dir

    skills: dict[str, ParsedSkill] = {}
    if not skills_dir.is_dir():
        logger.debug("No skills directory at %s", skills_dir)
        return skills

    for path in _document_files(skills_dir, config):
        document = _read_document(path)
        front_matter = _validate(path, SkillFrontMatter, document.header)

        if front_matter.name in skills:
            logger.warning(
                "Duplicate skill name '%s' at %s replaces an earlier definition",
                front_matter.name,
                path,
            )
        skills[front_matter.name] = ParsedSkill(front_matter=front_matter, content=document.body)
        logger.debug("Loaded skill %s from %s", front_matter.name, path)

    return skills


def load_network(
    network_dir: str | Path, *, config: LoaderConfig | None = None
) -> LoadedNetwork:
    """Load the manifest, agents, and skills of a network directory."""
    with _tracer.start_as_current_span("agentnet.load") as span:
        span.set_attribute(ATTR_NETWORK_DIR, str(network_dir))

        manifest = load_manifest(network_dir, config=config)
        agents = load_agents(network_dir, config=config)
        skills = load_skills(network_dir, config=config)

        span.set_attribute(ATTR_NETWORK_NAME, manifest.front_matter.name)
        span.set_attribute(ATTR_AGENT_COUNT, len(agents))
        span.set_attribute(ATTR_SKILL_COUNT, len(skills))

    logger.info(
        "Loaded network %s: %d agent(s), %d skill(s)",
        manifest.front_matter.name,
        len(agents),
        len(skills),
    )
    return LoadedNetwork(manifest=manifest, agents=agents, skills=skills)
