"""Loader configuration — the on-disk layout of a network directory."""

from pydantic import BaseModel

WILDCARD = "*"


class LoaderConfig(BaseModel):
    """Where the loader looks for network documents.

    The defaults describe the standard layout::

        <network>/manifest.md
        <network>/agents/*.md
        <network>/skills/*.md      (optional)
    """

    extension: str = ".md"
    manifest_name: str = "manifest"
    agents_dir: str = "agents"
    skills_dir: str = "skills"

    @property
    def manifest_file(self) -> str:
        """File name of the manifest, including the extension."""
        return f"{self.manifest_name}{self.normalized_extension}"

    @property
    def normalized_extension(self) -> str:
        if self.extension.startswith("."):
            return self.extension
        return f".{self.extension}"
