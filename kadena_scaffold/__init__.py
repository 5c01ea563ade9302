"""kadena-app-scaffold -- create a starter Kadena dApp from a template.

Quick usage::

    import asyncio
    from kadena_scaffold import CreationOptions, create_project

    options = CreationOptions(
        platform="react",
        project_dir="my-dapp",
        project_name="My dApp",
        network="testnet",
        contract="deploy-own",
        signing="wallet",
    )
    asyncio.run(create_project(options))
"""

from kadena_scaffold.errors import ErrorKind, ScaffoldError
from kadena_scaffold.models import CreationOptions, KadenaConfig, ResolvedOptions
from kadena_scaffold.pipeline import create_project

__version__ = "0.1.0"

__all__ = [
    "CreationOptions",
    "ErrorKind",
    "KadenaConfig",
    "ResolvedOptions",
    "ScaffoldError",
    "create_project",
]
