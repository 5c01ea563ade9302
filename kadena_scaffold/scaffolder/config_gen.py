"""Derive the Kadena network and contract settings for a new project."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import Optional

from kadena_scaffold.models import ContractMode, CreationOptions, KadenaConfig, Network

CONTRACT_NAME = "memory-wall"
GAS_STATION_NAME = "memory-wall-gas-station"

# (network_id, node) pairs; the two never vary independently.
NETWORK_PRESETS: dict[Network, tuple[str, str]] = {
    Network.MAINNET: ("mainnet01", "us-e1"),
    Network.TESTNET: ("testnet04", "us1.testnet"),
}


def iso_timestamp(now: datetime) -> str:
    """Format *now* as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    utc = now.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def content_hash(project_name: str, now: datetime) -> str:
    """Hex SHA-256 of the timestamp followed by the project name."""
    payload = iso_timestamp(now) + project_name
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def generate_config_object(
    options: CreationOptions, now: Optional[datetime] = None
) -> KadenaConfig:
    """Build the ``KadenaConfig`` for *options*.

    Deterministic apart from the clock: pass *now* to pin the hash used for
    self-deployed contract names.
    """
    preset = Network.MAINNET if options.network == Network.MAINNET else Network.TESTNET
    network_id, node = NETWORK_PRESETS[preset]

    if options.contract == ContractMode.DEPLOYED:
        contract_name = CONTRACT_NAME
        gas_station_name = GAS_STATION_NAME
    else:
        digest = content_hash(options.project_name, now or datetime.now(timezone.utc))
        contract_name = f"{CONTRACT_NAME}-{digest}"
        gas_station_name = f"{GAS_STATION_NAME}-{digest}"

    return KadenaConfig(
        network_id=network_id,
        node=node,
        contract_name=contract_name,
        gas_station_name=gas_station_name,
    )
