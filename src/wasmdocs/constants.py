# topmark:header:start
#
#   project      : WasmDocs
#   file         : constants.py
#   file_relpath : src/wasmdocs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""WasmDocs Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    WASMDOCS_VERSION: str = get_version("wasmdocs")
except PackageNotFoundError:  # running from a source checkout
    WASMDOCS_VERSION = "0.0.0"

# Environment variable holding the internal log level (e.g. "DEBUG", "10").
LOG_LEVEL_ENV_VAR: str = "WASMDOCS_LOG_LEVEL"

# Configuration discovery (in order of preference, relative to the working dir):
CONFIG_FILE_NAME: str = "wasmdocs.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: tuple[str, str] = ("tool", "wasmdocs")

# Upstream build step and documentation generator defaults.
DEFAULT_BUILD_SCRIPT: str = "./build-web"
DEFAULT_GENERATOR: str = "typedoc"
DEFAULT_README: str = "README.md"
DEFAULT_OPTIONS_DIR: str = "build/docs/"

# Shared prefix of every documentation project name.
PROJECT_NAME: str = "Kaspa WASM32 SDK"

# Step name used for the upstream build step in plans and reports.
BUILD_STEP_NAME: str = "build"
