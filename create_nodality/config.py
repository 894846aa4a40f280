"""create-nodality configuration.

Centralised, typed configuration for the scaffolder. Settings use Pydantic v2
models so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Global scaffolder configuration.

    Holds the library being scaffolded for and the external tools used to
    install and build the generated project.  Instances are created once by
    the CLI entry point and then passed through the rest of the system.
    """

    model_config = ConfigDict(frozen=True)

    library_name: str = Field(default="nodality")
    library_bundle_path: str = Field(
        default="/node_modules/nodality/dist/index.esm.js",
        description="Distributable the import map aliases the library to",
    )
    library_import: str = Field(default="Des", description="Primary API imported by the app stub")
    mount_selector: str = Field(default="#mount")
    package_manager: str = Field(default="npm", min_length=1)
    dev_server_port: int = Field(default=4000, ge=1, le=65535)

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def mount_id(self) -> str:
        """Element id referenced by :attr:`mount_selector`."""
        return self.mount_selector.lstrip("#")

    @property
    def install_command(self) -> list[str]:
        """Command that installs the generated project's dependencies."""
        return [self.package_manager, "install"]

    @property
    def build_command(self) -> list[str]:
        """Command that runs the generated project's ``build`` script."""
        return [self.package_manager, "run", "build"]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_NODALITY_PACKAGE_MANAGER, CREATE_NODALITY_PORT.

        Keyword *overrides* whose value is not ``None`` win over the
        environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_NODALITY_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CREATE_NODALITY_PACKAGE_MANAGER"]
        if os.environ.get("CREATE_NODALITY_PORT"):
            kwargs["dev_server_port"] = int(os.environ["CREATE_NODALITY_PORT"])

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
