import hashlib
import pytest
from coincurve import PrivateKey
from bitcoinutils.utils import tagged_hash
from src.modules.curves import Secp256k1
from src.modules.tools import int_to_bytes, bytes_to_int

PRIVATE_KEYS = [
    3,
    0xB7E151628AED2A6ABF7158809CF4F3C762E7160F38B4DA56A784D9045190CFEF,
    0xC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B14E5C9,
    # -G, odd y
    Secp256k1.n - 1,
]
OUTCOMES = ["rain", "sunny", "btc above 100k", "team a wins"]


def bip340_nonce(priv_key, message, aux):
    # k' exactly as BIP340 signing derives it
    P = priv_key * Secp256k1.generator()
    d = Secp256k1.even_y_scalar(P, priv_key)
    t = int_to_bytes(d ^ bytes_to_int(tagged_hash(aux, "BIP0340/aux")))
    rand = tagged_hash(t + Secp256k1.x_bytes(P) + message, "BIP0340/nonce")
    return bytes_to_int(rand) % Secp256k1.n

def make_oracle(priv_key, outcome, index):
    message = hashlib.sha256(outcome.encode()).digest()
    aux = hashlib.sha256(b"aux" + bytes([index])).digest()
    signer = PrivateKey(int_to_bytes(priv_key))
    sig = signer.sign_schnorr(message, aux)
    return {
        "priv_key": priv_key,
        "pub_key": signer.public_key.format()[1:],
        "outcome": outcome,
        "message": message,
        "k_value": bip340_nonce(priv_key, message, aux),
        "r": sig[:32],
        "s": sig[32:],
    }


@pytest.fixture(scope="session")
def oracles():
    return [make_oracle(d, outcome, i) for i, (d, outcome) in enumerate(zip(PRIVATE_KEYS, OUTCOMES))]

@pytest.fixture(scope="session")
def params(oracles):
    return {
        "priv_keys": [o["priv_key"] for o in oracles],
        "pub_keys": [o["pub_key"] for o in oracles],
        "messages": [o["message"] for o in oracles],
        "r_values": [o["r"] for o in oracles],
        "k_values": [o["k_value"] for o in oracles],
        "secrets": [o["s"] for o in oracles],
    }

@pytest.fixture(scope="session")
def nonce_of():
    return bip340_nonce
