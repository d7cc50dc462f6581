"""
Manifest model — the parts of package.json electron-fix reads.

Besides the two dependency maps, package.json may carry a few
top-level override keys (``symbols``, ``origin``, ``entry``,
``pathTxt``). ``PWD`` is never in the file: the CLI adds it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ELECTRON = "electron"


class Manifest(BaseModel):
    """A package.json, augmented with the directory it was read from."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = ""
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    pwd: str | None = Field(None, alias="PWD")     # project root (None = not checked)
    symbols: bool = False                          # fetch the -symbols archive
    origin: str | None = None                      # mirror override
    entry: str | None = None                       # download directory override
    path_txt: dict[str, str] = Field(default_factory=dict, alias="pathTxt")

    def declared_specifier(self, package: str = ELECTRON) -> str:
        """Version specifier from dependencies, falling back to devDependencies."""
        return self.dependencies.get(package) or self.dev_dependencies.get(package) or ""

    def declares(self, package: str = ELECTRON) -> bool:
        """Whether either dependency map names ``package``."""
        return bool(self.dependencies.get(package) or self.dev_dependencies.get(package))
