"""Pydantic v2 models for the project-creation pipeline.

Defines the user-facing option record, the resolved context that is threaded
through every pipeline step, and the generated Kadena configuration values.
All models are frozen: once constructed they are read-only.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Platform(str, Enum):
    """Supported front-end platforms. Each maps to one template directory."""
    VANILLA = "vanilla"
    REACT = "react"
    VUE = "vue"


class Network(str, Enum):
    """Target Chainweb network tier."""
    MAINNET = "mainnet"
    TESTNET = "testnet"


class ContractMode(str, Enum):
    """Whether to use the shared deployed contract or deploy a fresh one."""
    DEPLOYED = "deployed"
    DEPLOY_OWN = "deploy-own"


class SigningMode(str, Enum):
    """Client-side signing strategy (React template only)."""
    WALLET = "wallet"
    GAS_STATION = "gas-station"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class CreationOptions(BaseModel):
    """Options collected by the front end for a single generation run."""

    model_config = ConfigDict(frozen=True)

    platform: Platform = Field(default=Platform.VANILLA, description="Template platform")
    project_dir: str = Field(..., min_length=1, description="Target directory name, relative to cwd")
    project_name: str = Field(default="", description="Human-readable project name")
    network: Network = Field(default=Network.TESTNET)
    contract: ContractMode = Field(default=ContractMode.DEPLOYED)
    signing: Optional[SigningMode] = Field(
        default=None, description="Ignored on platforms without a signing concept"
    )
    chain: str = Field(default="0", description="Chainweb chain id written into the config file")
    git: bool = Field(default=False, description="Run `git init` in the new project")
    install: bool = Field(default=False, description="Install npm dependencies")

    @field_validator("project_dir")
    @classmethod
    def validate_project_dir(cls, v: str) -> str:
        """Keep the project directory inside the working directory."""
        path = PurePath(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"project_dir must stay inside the working directory: {v!r}")
        return v


class ResolvedOptions(BaseModel):
    """``CreationOptions`` plus the paths and host facts computed at start-up.

    Built once by the orchestrator and passed to every downstream step.
    """

    model_config = ConfigDict(frozen=True)

    options: CreationOptions
    template_directory: Path
    target_directory: Path
    has_npm: bool = False
    has_yarn: bool = False

    @property
    def platform(self) -> Platform:
        return self.options.platform

    @property
    def package_manager(self) -> Optional[str]:
        """``yarn`` if available, else ``npm``, else ``None``."""
        if self.has_yarn:
            return "yarn"
        if self.has_npm:
            return "npm"
        return None

    @property
    def run_command(self) -> str:
        """Prefix used to run package scripts in the success report."""
        return "yarn" if self.has_yarn else "npm run"


# ---------------------------------------------------------------------------
# Generated configuration
# ---------------------------------------------------------------------------

class KadenaConfig(BaseModel):
    """Values substituted into the generated ``kadena-config.js``."""

    model_config = ConfigDict(frozen=True)

    network_id: str
    node: str
    contract_name: str
    gas_station_name: str
