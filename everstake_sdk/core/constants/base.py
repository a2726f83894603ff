DECIMALS = 18
UINT16_MAX = 2**16 - 1

# Multicall3 is deployed at the same address on every supported network.
MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"

# RPC transport retry policy used when a plain URL is given.
RPC_RETRY_COUNT = 1
RPC_RETRY_DELAY_S = 0.3

DEFAULT_HTTP_TIMEOUT = 30.0  # HTTP client timeout (seconds)
