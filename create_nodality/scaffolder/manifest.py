"""The ``package.json`` manifest of a generated project."""

from __future__ import annotations

from ..config import Config
from ..models import ManifestDescriptor

MANIFEST_VERSION = "1.0.0"

WEBPACK_CONFIG_FILE = "webpack.config.js"

# Pinned toolchain the generated project builds and serves with.
DEV_DEPENDENCIES: dict[str, str] = {
    "@babel/core": "^7.28.4",
    "@babel/preset-env": "^7.28.3",
    "babel-loader": "^9.2.1",
    "live-server": "^1.2.2",
    "npm-run-all": "^4.1.5",
    "serve": "^14.0.0",
    "webpack": "^5.101.3",
    "webpack-cli": "^5.1.4",
    "webpack-dev-server": "^5.2.2",
}


def build_scripts(config: Config) -> dict[str, str]:
    """Script aliases: ``build``, ``watch``, ``start`` and ``dev`` (watch + start)."""
    return {
        "build": f"webpack --config {WEBPACK_CONFIG_FILE}",
        "watch": f"webpack --watch --config {WEBPACK_CONFIG_FILE}",
        "start": f"live-server . --port={config.dev_server_port} --watch=dist,src",
        "dev": "npm-run-all --parallel watch start",
    }


def build_manifest(project_name: str, config: Config | None = None) -> ManifestDescriptor:
    """Describe the manifest for *project_name*.

    The library is the only runtime dependency and tracks ``latest``.
    """
    config = config or Config()
    return ManifestDescriptor(
        name=project_name,
        version=MANIFEST_VERSION,
        type="module",
        scripts=build_scripts(config),
        dependencies={config.library_name: "latest"},
        dev_dependencies=dict(DEV_DEPENDENCIES),
    )
