import hashlib
import json
import os
from bitcoinutils.setup import setup
from bitcoinutils.keys import PrivateKey
from bitcoinutils.utils import tagged_hash
from src.modules.curves import Secp256k1

CHALLENGE_TAG = "BIP0340/challenge"


def int_to_bytes(value: int, size: int = Secp256k1.byte_size):
    return value.to_bytes(size, 'big')

def bytes_to_int(buf: bytes):
    return int.from_bytes(buf, 'big')

def challenge(r_x: bytes, p_x: bytes, message: bytes):
    # e = int(hash_BIP0340/challenge(R.x || P.x || m)) mod n
    digest = tagged_hash(r_x + p_x + message, CHALLENGE_TAG)
    return bytes_to_int(digest) % Secp256k1.n

def wif_to_int(wif, network="testnet"):
    # always remember to setup the network
    setup(network)
    priv = PrivateKey(wif)
    return bytes_to_int(priv.to_bytes())

def message_digest(entry: dict):
    # an announcement either carries the 32 byte digest or the outcome it hashes
    if "message" in entry:
        return bytes.fromhex(entry["message"])
    if "outcome" in entry:
        return hashlib.sha256(entry["outcome"].encode()).digest()
    raise ValueError(f"Entry has neither a message nor an outcome: {entry}")

def load_setup(setup_dir):
    # Load setup data from JSON file
    if not os.path.exists(setup_dir):
        print(f"Setup file not found: {setup_dir}")
        return None
    with open(setup_dir, "r") as setup_file:
        setup_data = json.load(setup_file)

    return setup_data

def load_json(path):
    with open(path, "r") as f:
        return json.load(f)

def save_json(path, data):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        f.write(json.dumps(data, indent=2))
