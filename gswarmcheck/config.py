"""Endpoints, contract address, and HTTP settings."""

APP_NAME = "gswarm-check"

# Gensyn testnet RPC and the contract mapping EOAs to peer IDs
RPC_URL = "https://gensyn-testnet.g.alchemy.com/public"
CONTRACT_ADDRESS = "0xFaD7C5e93f28257429569B854151A1B8DCD404c2"

# Only the read-only view we call: getPeerId(address[]) -> string[][]
PEER_ID_ABI = [
    {
        "name": "getPeerId",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "eoaAddresses", "type": "address[]"}],
        "outputs": [{"name": "", "type": "string[][]"}],
    },
]

# gswarm ranking API
STATS_API_URL = "https://gswarm.dev/api/user/data"
CLIENT_TAG = "gensyn-web-ui"

# HTTP
USER_AGENT = "gswarm-check/0.1.0"

# Last-seen timestamps are shown in this zone
DISPLAY_TIMEZONE = "Asia/Kolkata"
