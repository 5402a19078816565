import pytest

from hhconfig.utils.constants import ENV_VAR_NAMES
from hhconfig.utils.custom_exceptions import ExceptionHandler
from hhconfig.utils.logger import logger

FULL_ENV = {
    "INFURA_API_KEY": "infura0123456789",
    "GOERLI_PRIVATE_KEY": "0x" + "1" * 64,
    "SEPOLIA_PRIVATE_KEY": "0x" + "2" * 64,
    "MAINNET_PRIVATE_KEY": "0x" + "3" * 64,
    "MAINNET_RPC_URL": "https://eth-mainnet.example.org/v2/alchemy-key",
    "ETHERSCAN_API_KEY": "ETHERSCANKEY123",
}


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "log_file", str(tmp_path / "logs" / "logs.txt"))
    monkeypatch.setattr(logger, "quiet", False)
    monkeypatch.setattr(ExceptionHandler, "raise_exception", True)
    return logger


@pytest.fixture
def full_env(monkeypatch):
    for name, value in FULL_ENV.items():
        monkeypatch.setenv(name, value)
    return dict(FULL_ENV)


@pytest.fixture
def empty_env(monkeypatch):
    for name in ENV_VAR_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return {}
