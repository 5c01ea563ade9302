"""Command-line front end.

Collects ``CreationOptions`` from flags, asks for anything missing with Rich
prompts (unless ``--yes`` is given) and runs the pipeline.

Usage::

    kda-create my-dapp --platform react --contract deploy-own --signing wallet
    python -m kadena_scaffold my-dapp --yes --git
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Optional, Sequence

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from kadena_scaffold.config import Settings
from kadena_scaffold.errors import ScaffoldError
from kadena_scaffold.models import ContractMode, CreationOptions, Network, Platform, SigningMode
from kadena_scaffold.pipeline import create_project
from kadena_scaffold.utils import print_error

DEFAULTS: dict[str, Any] = {
    "platform": Platform.VANILLA.value,
    "network": Network.TESTNET.value,
    "contract": ContractMode.DEPLOYED.value,
    "signing": SigningMode.WALLET.value,
    "chain": "0",
    "git": False,
    "install": False,
}


class UsageError(Exception):
    """Raised when the command line is missing a required value."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kda-create",
        description="Create a new Kadena dApp from a starter template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  kda-create my-dapp\n"
            "  kda-create my-dapp --platform react --signing gas-station --yes\n"
            "  kda-create my-dapp --contract deploy-own --git --install\n"
        ),
    )
    parser.add_argument("project_dir", nargs="?", help="Directory to create the project in")
    parser.add_argument("--platform", choices=[p.value for p in Platform])
    parser.add_argument("--project-name", help="Project name (default: the directory name)")
    parser.add_argument("--network", choices=[n.value for n in Network])
    parser.add_argument("--contract", choices=[c.value for c in ContractMode])
    parser.add_argument(
        "--signing",
        choices=[s.value for s in SigningMode],
        help="Client-side signing mode (react only)",
    )
    parser.add_argument("--chain", help="Chainweb chain id (default: 0)")
    parser.add_argument("--git", action=argparse.BooleanOptionalAction, default=None,
                        help="Initialise a git repository")
    parser.add_argument("--install", action=argparse.BooleanOptionalAction, default=None,
                        help="Install dependencies with yarn or npm")
    parser.add_argument("--yes", "-y", action="store_true", help="Use defaults instead of prompting")
    return parser


def collect_options(args: argparse.Namespace) -> CreationOptions:
    """Merge parsed flags, prompts and defaults into ``CreationOptions``."""
    interactive = not args.yes

    def choose(name: str, question: str, choices: Optional[list[str]] = None) -> str:
        value = getattr(args, name)
        if value is not None:
            return value
        if interactive:
            return Prompt.ask(question, choices=choices, default=DEFAULTS[name])
        return DEFAULTS[name]

    def confirm(name: str, question: str) -> bool:
        value = getattr(args, name)
        if value is not None:
            return value
        if interactive:
            return Confirm.ask(question, default=DEFAULTS[name])
        return DEFAULTS[name]

    project_dir = args.project_dir
    if not project_dir:
        if not interactive:
            raise UsageError("a project directory is required with --yes")
        project_dir = Prompt.ask("Project directory")

    project_name = args.project_name
    if project_name is None:
        project_name = Prompt.ask("Project name", default=project_dir) if interactive else project_dir

    platform = choose("platform", "Which platform?", [p.value for p in Platform])
    signing = None
    if platform == Platform.REACT.value:
        signing = choose("signing", "Which signing mode?", [s.value for s in SigningMode])
    elif args.signing is not None:
        signing = args.signing

    return CreationOptions(
        platform=platform,
        project_dir=project_dir,
        project_name=project_name,
        network=choose("network", "Which network?", [n.value for n in Network]),
        contract=choose("contract", "Use the deployed contract or deploy your own?",
                        [c.value for c in ContractMode]),
        signing=signing,
        chain=choose("chain", "Chain id"),
        git=confirm("git", "Initialize a git repository?"),
        install=confirm("install", "Install dependencies?"),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``kda-create`` and ``python -m kadena_scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = collect_options(args)
    except UsageError as exc:
        parser.error(str(exc))
    except ValidationError as exc:
        print_error(f"Invalid options: {exc}")
        sys.exit(1)

    try:
        asyncio.run(create_project(options, Settings.from_env()))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
