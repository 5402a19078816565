import os
from typing import Any, Mapping

from .constants import (
    COMPILERS,
    ETHERSCAN_API_KEY,
    INFURA_API_KEY,
    INFURA_URL_TEMPLATE,
    LOCAL_CHAIN_ID,
    LOCAL_NETWORK,
    MAINNET_RPC_URL,
    MISSING_ENV_VALUE,
    REMOTE_NETWORKS,
)
from .custom_types import (
    CompilerProfile,
    EnvRef,
    EnvTemplate,
    HardhatUserConfig,
    LocalNetworkConfig,
    RemoteNetworkConfig,
)


def infura_url(network: str, api_key: str) -> str:
    return INFURA_URL_TEMPLATE.format(network=network, api_key=api_key)


def build_compilers() -> list[CompilerProfile]:
    return [
        {
            "version": version,
            "settings": {"optimizer": {"enabled": True, "runs": runs}},
        }
        for version, runs in COMPILERS
    ]


def build_local_network() -> LocalNetworkConfig:
    return {
        "forking": {"url": EnvRef(MAINNET_RPC_URL)},
        "chainId": LOCAL_CHAIN_ID,
    }


def build_remote_network(network: str, private_key_var: str) -> RemoteNetworkConfig:
    return {
        "url": EnvTemplate(infura_url(network, "{" + INFURA_API_KEY + "}")),
        "accounts": [EnvRef(private_key_var)],
    }


def build_template() -> HardhatUserConfig:
    """
    Build the config with every environment-dependent value left unresolved.

    Plain values are `EnvRef`s and interpolated URLs are `EnvTemplate`s, so the
    result can be rendered either as a file that reads `process.env` itself or,
    after `resolve`, as concrete values.
    """
    networks = {LOCAL_NETWORK: build_local_network()}
    for network, private_key_var in REMOTE_NETWORKS.items():
        networks[network] = build_remote_network(network, private_key_var)

    return {
        "solidity": {"compilers": build_compilers()},
        "allowUnlimitedContractSize": True,
        "networks": networks,
        "etherscan": {"apiKey": EnvRef(ETHERSCAN_API_KEY)},
    }


def resolve(value: Any, env: Mapping[str, str]) -> Any:
    """
    Replace environment references in `value` with their values from `env`.

    Unset variables resolve to None, except inside an interpolated string
    where they read "undefined", as the same template does once Hardhat
    evaluates it. No other validation happens here.
    """
    if isinstance(value, EnvRef):
        return env.get(value.name)
    if isinstance(value, EnvTemplate):
        return value.template.format(
            **{
                name: MISSING_ENV_VALUE if env.get(name) is None else env[name]
                for name in value.names
            }
        )
    if isinstance(value, dict):
        return {key: resolve(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve(item, env) for item in value]
    return value


def build_config(env: Mapping[str, str] | None = None) -> HardhatUserConfig:
    env = os.environ if env is None else env
    return resolve(build_template(), env)


def referenced_env_vars(value: Any) -> list[str]:
    """Variable names referenced anywhere in `value`, in first-use order."""
    names = []

    def visit(item):
        if isinstance(item, EnvRef):
            found = [item.name]
        elif isinstance(item, EnvTemplate):
            found = item.names
        else:
            nested = item.values() if isinstance(item, dict) else item
            if isinstance(item, (dict, list)):
                for child in nested:
                    visit(child)
            return
        for name in found:
            if name not in names:
                names.append(name)

    visit(value)
    return names


def env_consumers(template: HardhatUserConfig) -> dict[str, list[str]]:
    """Map each referenced variable to the top-level sections or networks using it."""
    consumers: dict[str, list[str]] = {}
    sections = [(name, network) for name, network in template["networks"].items()]
    sections += [
        (key, value) for key, value in template.items() if key != "networks"
    ]
    for section, value in sections:
        for name in referenced_env_vars(value):
            consumers.setdefault(name, []).append(section)
    return consumers
