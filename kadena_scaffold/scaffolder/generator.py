"""Project materialization.

Copies a platform template into the target directory, applies the
platform-specific tweaks, writes the generated ``kadena-config.js`` and, for
self-deployed contracts, adds the Pact sources. Every copy is non-clobbering
so scaffolding into a partially populated directory keeps the user's files.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, TypeVar

from kadena_scaffold.config import Settings
from kadena_scaffold.errors import ErrorKind, ScaffoldError
from kadena_scaffold.models import KadenaConfig, Platform, ResolvedOptions, SigningMode
from kadena_scaffold.utils import (
    copy_file,
    copy_tree_no_clobber,
    print_done,
    print_step,
    replace_in_file,
    substitute_placeholders,
)

CONFIG_FILE_NAME = "kadena-config.js"
ENTRY_POINT = Path("src") / "App.js"
PACKAGE_MANIFEST = "package.json"
MANIFEST_NAME_TOKEN = "pact-blank-app"
CONFIG_EXPORT = "module.exports = { kadenaAPI: kadenaAPI, }"

T = TypeVar("T")

SIGNING_ENTRY_FILES: dict[SigningMode, str] = {
    SigningMode.WALLET: "WalletApp.js",
    SigningMode.GAS_STATION: "GasStationApp.js",
}


class ProjectMaterializer:
    """Writes the project tree for one ``ResolvedOptions`` context."""

    def __init__(self, resolved: ResolvedOptions, settings: Settings) -> None:
        self.resolved = resolved
        self.settings = settings

    @property
    def target(self) -> Path:
        return self.resolved.target_directory

    # -- Template files ----------------------------------------------------

    async def copy_template_files(self) -> list[Path]:
        """Copy the template tree and apply platform-specific changes.

        Returns:
            Paths written by the template copy.
        """
        print_step("Install project files")
        entry_existed = (self.target / ENTRY_POINT).exists()

        written = await _fs_call(
            copy_tree_no_clobber,
            self.resolved.template_directory,
            self.target,
            action="copy template files",
        )

        if self.resolved.platform == Platform.REACT:
            if not entry_existed:
                await self._install_signing_entry()
            await _fs_call(
                replace_in_file,
                self.target / PACKAGE_MANIFEST,
                {MANIFEST_NAME_TOKEN: self.resolved.options.project_dir},
                action=f"update {PACKAGE_MANIFEST}",
            )

        print_done("Project files installed successfully")
        return written

    async def _install_signing_entry(self) -> None:
        """Replace the template's ``src/App.js`` with the signing variant."""
        signing = self.resolved.options.signing
        file_name = SIGNING_ENTRY_FILES[
            SigningMode.WALLET if signing == SigningMode.WALLET else SigningMode.GAS_STATION
        ]
        source = self.resolved.template_directory.parent / "files" / file_name
        await _fs_call(
            copy_file,
            source,
            self.target / ENTRY_POINT,
            clobber=True,
            action=f"install {ENTRY_POINT.as_posix()}",
        )

    # -- Generated config --------------------------------------------------

    def config_destination(self) -> Path:
        """Where ``kadena-config.js`` goes for this platform."""
        if self.resolved.platform == Platform.REACT:
            return self.target / "src" / CONFIG_FILE_NAME
        return self.target / CONFIG_FILE_NAME

    def render_config(self, config: KadenaConfig) -> str:
        """Fill the shared config template with *config* values."""
        template = self.settings.config_template_path.read_text(encoding="utf-8")
        content = substitute_placeholders(
            template,
            {
                "chainId": self.resolved.options.chain,
                "networkId": config.network_id,
                "node": config.node,
                "contractName": config.contract_name,
                "gasStationName": config.gas_station_name,
            },
        )
        if self.resolved.platform == Platform.REACT:
            content += CONFIG_EXPORT
        return content

    async def write_config_file(self, config: KadenaConfig) -> Path:
        """Render and write the Kadena config file. Returns its path."""
        print_step("Install Kadena config file")
        content = await _fs_call(
            self.render_config, config, action=f"read {self.settings.config_template_path}"
        )
        destination = self.config_destination()
        await _fs_call(_write_file, destination, content, action=f"write {destination}")
        print_done("Kadena config file installed successfully")
        return destination

    # -- Pact contracts ----------------------------------------------------

    async def copy_pact_files(self) -> list[Path]:
        """Copy the shared Pact sources into ``<target>/pact``."""
        print_step("Install Pact files")
        written = await _fs_call(
            copy_tree_no_clobber,
            self.settings.pact_dir,
            self.target / "pact",
            action="copy Pact files",
        )
        print_done("Pact files installed successfully")
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

async def _fs_call(func: Callable[..., T], *args: Any, action: str, **kwargs: Any) -> T:
    """Run a blocking file-system call in a worker thread.

    ``OSError`` is re-raised as a ``FILE_SYSTEM`` ``ScaffoldError``.
    """
    try:
        return await asyncio.to_thread(func, *args, **kwargs)
    except OSError as exc:
        raise ScaffoldError(ErrorKind.FILE_SYSTEM, f"Failed to {action}: {exc}") from exc


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
