import json

from .common import pull, mask_text
from .constants import EXPECTED_CHAIN_IDS, LOCAL_NETWORK, MISSING_ENV_VALUE
from .custom_exceptions import NodeError
from .custom_types import HardhatUserConfig, ProbeResult
from .logger import logger

PROBE_HEADER = ["Network", "RPC URL", "Expected chain ID", "Chain ID", "Match"]


def get_chain_id(rpc_url: str) -> int:
    """
    Get the chain ID from an RPC node.

    Args:
        rpc_url: The RPC URL

    Returns:
        The chain ID as an integer

    Raises:
        NodeError: If the chain ID cannot be retrieved
    """
    logger.info(f'Receiving the chain ID from "{mask_text(rpc_url)}" ...')

    payload = json.dumps(
        {"id": 1, "jsonrpc": "2.0", "method": "eth_chainId", "params": []}
    )

    headers = {"Content-Type": "application/json"}
    try:
        chain_id_response = pull(rpc_url, payload, headers).json()
    except ValueError:
        raise NodeError("Response is not valid JSON")

    if "result" not in chain_id_response:
        raise NodeError(f"Failed to retrieve chain ID: {chain_id_response}")

    result = chain_id_response["result"]
    try:
        # hex string to decimal integer
        chain_id = int(result, 16)
    except (TypeError, ValueError):
        raise NodeError(f"Bad chain ID: {result}")

    logger.okay("Chain ID was successfully received")
    return chain_id


def network_rpc_url(network: str, network_config: dict) -> str | None:
    if network == LOCAL_NETWORK:
        return network_config.get("forking", {}).get("url")
    return network_config.get("url")


def has_api_key(rpc_url: str) -> bool:
    """Whether the provider key segment at the end of a remote URL is filled in."""
    return rpc_url.rstrip("/").rsplit("/", 1)[-1] not in ("v3", MISSING_ENV_VALUE)


def expected_chain_id(network: str, network_config: dict) -> int | None:
    if "chainId" in network_config:
        return network_config["chainId"]
    return EXPECTED_CHAIN_IDS.get(network)


def probe_networks(config: HardhatUserConfig) -> list[ProbeResult]:
    """
    Ask every configured RPC endpoint for its chain ID and compare it with the
    chain the network is expected to be. Networks without a URL, or remote
    ones without a provider key in it, are skipped.
    """
    results = []
    rows = []
    for network, network_config in config["networks"].items():
        rpc_url = network_rpc_url(network, network_config)
        if not rpc_url:
            logger.warn(f"No RPC URL for {network}, skipping")
            continue
        if network != LOCAL_NETWORK and not has_api_key(rpc_url):
            logger.warn(f"No provider API key in the {network} RPC URL, skipping")
            continue

        expected = expected_chain_id(network, network_config)
        try:
            result = ProbeResult(network, expected, get_chain_id(rpc_url))
        except NodeError as e:
            logger.error(str(e))
            result = ProbeResult(network, expected, None, error=e.message)

        if result.error is None and not result.matched:
            logger.warn(
                f"{network} reports chain ID {result.chain_id}, expected {expected}"
            )

        results.append(result)
        rows.append(
            [network, mask_text(rpc_url), expected, result.chain_id, result.matched]
        )

    if rows:
        logger.report_table(rows, PROBE_HEADER, ok_column=4)
    return results
