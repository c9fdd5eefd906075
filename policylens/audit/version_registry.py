import os

from policylens.rules.catalog import CATALOG_VERSION

ENGINE_VERSIONS = {
    "PolicyLens-1.0.0": "git:policylens@1.0.0",
}

DEFAULT_ENGINE_VERSION = "PolicyLens-1.0.0"

CATALOG_VERSIONS = {
    CATALOG_VERSION: "policylens/rules/catalog.py",
}


def current_engine_version() -> str:
    """ENGINE_VERSION overrides the default; it must be a registered version."""
    version = os.getenv("ENGINE_VERSION", DEFAULT_ENGINE_VERSION)
    if version not in ENGINE_VERSIONS:
        raise ValueError(f"Unregistered engine version: {version}")
    return version
