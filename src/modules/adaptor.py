# Adaptor points and secrets for multi-oracle BIP340 attestations:
# s * G = (s1 + ... + sm) * G = (R1 + ... + Rm) + e1 * P1 + ... + em * Pm
from src.modules.curves import Secp256k1
from src.modules.tools import bytes_to_int, int_to_bytes, challenge
from src.modules import check


def _lift(name, x_bytes, idx):
    point = Secp256k1.lift_x(bytes(x_bytes))
    if point is None:
        raise check.CurveLiftFailure(f"{name}[{idx}] is not the x coordinate of a curve point", name, idx)
    return point

def create_adaptor_point(pub_keys, messages, r_values):
    check.check_create_adaptor_point_params(pub_keys, messages, r_values)

    sG = None
    for i in range(len(pub_keys)):
        P = _lift("pubKey", pub_keys[i], i)
        Px = Secp256k1.x_bytes(P)
        R = _lift("nonce", r_values[i], i)
        e = challenge(bytes(r_values[i]), Px, bytes(messages[i]))

        # the first nonce seeds the sum so we never start from infinity
        if i == 0:
            sG = R
        else:
            sG = sG + R
        sG = sG + e * P

    return Secp256k1.x_bytes(sG)

def create_adaptor_secret(priv_keys, messages, k_values):
    check.check_create_adaptor_secret_params(priv_keys, messages, k_values)

    G = Secp256k1.generator()
    s = None
    for i in range(len(k_values)):
        P = priv_keys[i] * G
        Px = Secp256k1.x_bytes(P)
        d = Secp256k1.even_y_scalar(P, priv_keys[i])

        R = k_values[i] * G
        k = Secp256k1.even_y_scalar(R, k_values[i])
        e = challenge(Secp256k1.x_bytes(R), Px, bytes(messages[i]))

        if s is None:
            s = k
        else:
            s = s + k
        s = s + e * d

    return int_to_bytes(s % Secp256k1.n)

def combine_secrets(secrets):
    check.check_secret_arr(secrets)

    s = bytes_to_int(secrets[0]) % Secp256k1.n
    for secret in secrets[1:]:
        s = (s + bytes_to_int(secret)) % Secp256k1.n
    return int_to_bytes(s)

def adaptor_point_from_secret(secret):
    """x coordinate of ``secret * G``, comparable with ``create_adaptor_point``."""
    check.check_buffer("secret", secret)
    return Secp256k1.x_bytes(bytes_to_int(secret) * Secp256k1.generator())
