import time

HHCONFIG_DIR = ".hhconfig"
START_TIME = time.time()
START_TIME_INT = int(START_TIME)
LOGS_PATH = f"{HHCONFIG_DIR}/{START_TIME_INT}/logs.txt"
DEFAULT_ENV_FILE = ".env"
DEFAULT_LOCAL_RPC_URL = "http://127.0.0.1:8545"
RUN_CONFIG_FILENAME = f"hardhat.config.hhconfig-{START_TIME_INT}.js"

INFURA_API_KEY = "INFURA_API_KEY"
GOERLI_PRIVATE_KEY = "GOERLI_PRIVATE_KEY"
SEPOLIA_PRIVATE_KEY = "SEPOLIA_PRIVATE_KEY"
MAINNET_PRIVATE_KEY = "MAINNET_PRIVATE_KEY"
MAINNET_RPC_URL = "MAINNET_RPC_URL"
ETHERSCAN_API_KEY = "ETHERSCAN_API_KEY"

# every value here is a credential or carries one, so all are masked in logs
ENV_VAR_NAMES = [
    INFURA_API_KEY,
    GOERLI_PRIVATE_KEY,
    SEPOLIA_PRIVATE_KEY,
    MAINNET_PRIVATE_KEY,
    MAINNET_RPC_URL,
    ETHERSCAN_API_KEY,
]

INFURA_URL_TEMPLATE = "https://{network}.infura.io/v3/{api_key}"
# how JavaScript prints an unset variable inside a template literal
MISSING_ENV_VALUE = "undefined"

# (version, optimizer runs), in the order the toolchain tries them
COMPILERS = [
    ("0.8.10", 1000),
    ("0.8.0", 1000),
    ("0.5.0", 1000),
    ("0.8.20", 10000),
]

LOCAL_NETWORK = "hardhat"
LOCAL_CHAIN_ID = 1

# remote network -> signing key variable
REMOTE_NETWORKS = {
    "goerli": GOERLI_PRIVATE_KEY,
    "sepolia": SEPOLIA_PRIVATE_KEY,
    "mainnet": MAINNET_PRIVATE_KEY,
}

EXPECTED_CHAIN_IDS = {
    "goerli": 5,
    "sepolia": 11155111,
    "mainnet": 1,
}

JS_PRELUDE = [
    'require("@nomicfoundation/hardhat-toolbox");',
    'require("dotenv").config();',
]
JS_TYPE_ANNOTATION = "/** @type import('hardhat/config').HardhatUserConfig */"
