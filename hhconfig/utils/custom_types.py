import string
from typing import NamedTuple, TypedDict, NotRequired


class EnvRef(NamedTuple):
    """A value read verbatim from the environment variable `name`."""

    name: str


class EnvTemplate(NamedTuple):
    """
    A string with environment variables interpolated into it.

    `template` uses str.format fields named after the variables, e.g.
    "https://goerli.infura.io/v3/{INFURA_API_KEY}".
    """

    template: str

    @property
    def names(self) -> list[str]:
        return [
            field
            for _, field, _, _ in string.Formatter().parse(self.template)
            if field
        ]


class OptimizerSettings(TypedDict):
    enabled: bool
    runs: int


class CompilerSettings(TypedDict):
    optimizer: OptimizerSettings


class CompilerProfile(TypedDict):
    version: str
    settings: CompilerSettings


class SolidityConfig(TypedDict):
    compilers: list[CompilerProfile]


class ForkingConfig(TypedDict):
    url: str | None


class LocalNetworkConfig(TypedDict):
    forking: NotRequired[ForkingConfig]
    chainId: int


class RemoteNetworkConfig(TypedDict):
    url: str
    accounts: list[str | None]


class EtherscanConfig(TypedDict):
    apiKey: str | None


class HardhatUserConfig(TypedDict):
    solidity: SolidityConfig
    allowUnlimitedContractSize: bool
    networks: dict[str, LocalNetworkConfig | RemoteNetworkConfig]
    etherscan: EtherscanConfig


class EnvStatus(NamedTuple):
    name: str
    is_set: bool
    printable_value: str
    used_by: list[str]


class ProbeResult(NamedTuple):
    network: str
    expected_chain_id: int | None
    chain_id: int | None
    error: str | None = None

    @property
    def matched(self) -> bool:
        return self.error is None and self.chain_id == self.expected_chain_id
