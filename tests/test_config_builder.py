from hhconfig.utils.config_builder import (
    build_compilers,
    build_config,
    build_template,
    env_consumers,
    infura_url,
    referenced_env_vars,
    resolve,
)
from hhconfig.utils.custom_types import EnvRef, EnvTemplate

ENV = {
    "INFURA_API_KEY": "infura-key",
    "GOERLI_PRIVATE_KEY": "0xgoerli",
    "SEPOLIA_PRIVATE_KEY": "0xsepolia",
    "MAINNET_PRIVATE_KEY": "0xmainnet",
    "MAINNET_RPC_URL": "https://rpc.example.org/mainnet",
    "ETHERSCAN_API_KEY": "etherscan-key",
}


def optimizer_by_version(config):
    return {
        profile["version"]: profile["settings"]["optimizer"]
        for profile in config["solidity"]["compilers"]
    }


def test_compiler_profiles_match_literals():
    optimizers = optimizer_by_version(build_config(ENV))

    assert optimizers["0.8.20"] == {"enabled": True, "runs": 10000}
    assert optimizers["0.8.10"] == {"enabled": True, "runs": 1000}
    assert optimizers["0.8.0"] == {"enabled": True, "runs": 1000}
    assert optimizers["0.5.0"] == {"enabled": True, "runs": 1000}


def test_compiler_profiles_keep_declared_order():
    versions = [profile["version"] for profile in build_compilers()]
    assert versions == ["0.8.10", "0.8.0", "0.5.0", "0.8.20"]


def test_network_keys():
    config = build_config(ENV)
    assert set(config["networks"]) == {"hardhat", "goerli", "sepolia", "mainnet"}


def test_remote_network_urls_and_accounts():
    config = build_config(ENV)

    for network in ("goerli", "sepolia", "mainnet"):
        url = config["networks"][network]["url"]
        assert network in url
        assert url == f"https://{network}.infura.io/v3/infura-key"
        assert url.endswith("/v3/" + ENV["INFURA_API_KEY"])

    assert config["networks"]["goerli"]["accounts"] == ["0xgoerli"]
    assert config["networks"]["sepolia"]["accounts"] == ["0xsepolia"]
    assert config["networks"]["mainnet"]["accounts"] == ["0xmainnet"]


def test_local_network_forks_mainnet_rpc_url():
    hardhat_network = build_config(ENV)["networks"]["hardhat"]

    assert hardhat_network["forking"]["url"] == ENV["MAINNET_RPC_URL"]
    assert hardhat_network["chainId"] == 1


def test_top_level_flags():
    config = build_config(ENV)

    assert list(config) == [
        "solidity",
        "allowUnlimitedContractSize",
        "networks",
        "etherscan",
    ]
    assert config["allowUnlimitedContractSize"] is True
    assert config["etherscan"]["apiKey"] == "etherscan-key"


def test_missing_env_propagates_without_validation():
    config = build_config({})

    assert config["networks"]["hardhat"]["forking"]["url"] is None
    assert config["networks"]["goerli"]["accounts"] == [None]
    assert config["networks"]["mainnet"]["url"] == "https://mainnet.infura.io/v3/undefined"
    assert config["etherscan"]["apiKey"] is None


def test_empty_value_is_kept_as_is():
    config = build_config({"ETHERSCAN_API_KEY": ""})
    assert config["etherscan"]["apiKey"] == ""


def test_build_config_reads_process_env(full_env):
    config = build_config()
    assert config["etherscan"]["apiKey"] == full_env["ETHERSCAN_API_KEY"]


def test_template_keeps_references():
    template = build_template()

    assert template["networks"]["hardhat"]["forking"]["url"] == EnvRef("MAINNET_RPC_URL")
    assert template["networks"]["sepolia"]["url"] == EnvTemplate(
        "https://sepolia.infura.io/v3/{INFURA_API_KEY}"
    )
    assert template["etherscan"]["apiKey"] == EnvRef("ETHERSCAN_API_KEY")


def test_resolve_leaves_plain_values_untouched():
    value = {"a": [1, "x", True, None], "b": EnvRef("B")}
    assert resolve(value, {"B": "b"}) == {"a": [1, "x", True, None], "b": "b"}


def test_env_template_names():
    assert EnvTemplate("{A}/{B}/{A}").names == ["A", "B", "A"]
    assert EnvTemplate("https://example.org").names == []


def test_referenced_env_vars_in_first_use_order():
    assert referenced_env_vars(build_template()) == [
        "MAINNET_RPC_URL",
        "INFURA_API_KEY",
        "GOERLI_PRIVATE_KEY",
        "SEPOLIA_PRIVATE_KEY",
        "MAINNET_PRIVATE_KEY",
        "ETHERSCAN_API_KEY",
    ]
    assert referenced_env_vars(build_config(ENV)) == []


def test_env_consumers():
    consumers = env_consumers(build_template())

    assert consumers["INFURA_API_KEY"] == ["goerli", "sepolia", "mainnet"]
    assert consumers["MAINNET_RPC_URL"] == ["hardhat"]
    assert consumers["MAINNET_PRIVATE_KEY"] == ["mainnet"]
    assert consumers["ETHERSCAN_API_KEY"] == ["etherscan"]


def test_infura_url():
    assert infura_url("goerli", "abc") == "https://goerli.infura.io/v3/abc"


def test_missing_key_reads_like_the_javascript_template():
    # `https://goerli.infura.io/v3/${process.env.INFURA_API_KEY}` with the var unset
    assert build_config({})["networks"]["goerli"]["url"] == (
        "https://goerli.infura.io/v3/undefined"
    )
    # an empty but set variable interpolates as empty, like in JavaScript
    assert build_config({"INFURA_API_KEY": ""})["networks"]["goerli"]["url"] == (
        "https://goerli.infura.io/v3/"
    )
