# Argument validation: each array element by element, in order, lengths last
from src.modules.curves import Secp256k1

BUFFER_SIZE = 32


class AdaptorParamError(ValueError):
    kind = None

    def __init__(self, message, name=None, index=None):
        super().__init__(message)
        self.name = name
        self.index = index

class TypeMismatch(AdaptorParamError):
    kind = "type"

class LengthMismatch(AdaptorParamError):
    kind = "length"

class RangeError(AdaptorParamError):
    kind = "range"

class ArityMismatch(AdaptorParamError):
    kind = "arity"

class CurveLiftFailure(AdaptorParamError):
    kind = "curve"


def _label(name, idx):
    return name + (f"[{idx}]" if idx is not None else "")

def check_array(name, arr):
    if not isinstance(arr, (list, tuple)) or len(arr) == 0:
        raise TypeMismatch(f"{name} must be a list with one or more elements", name)

def check_buffer(name, buf, length=BUFFER_SIZE, idx=None):
    if not isinstance(buf, (bytes, bytearray)):
        raise TypeMismatch(f"{_label(name, idx)} must be a bytes object", name, idx)
    if len(buf) != length:
        raise LengthMismatch(f"{_label(name, idx)} must be {length} bytes long", name, idx)

def check_scalar(name, value, idx=None):
    # bool is an int subclass but never a key
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatch(f"{_label(name, idx)} must be an integer", name, idx)
    if not 1 <= value <= Secp256k1.n - 1:
        raise RangeError(f"{_label(name, idx)} must be an integer in the range 1..n-1", name, idx)

def check_buffer_arr(arr_name, name, arr):
    check_array(arr_name, arr)
    for i, buf in enumerate(arr):
        check_buffer(name, buf, idx=i)

def check_scalar_arr(arr_name, name, arr):
    check_array(arr_name, arr)
    for i, value in enumerate(arr):
        check_scalar(name, value, idx=i)

def check_same_length(*arrays):
    if len(set(len(arr) for arr in arrays)) != 1:
        raise ArityMismatch("all parameters must be lists with the same length")

def check_secret_arr(secrets):
    check_buffer_arr("secrets", "secrets", secrets)

def check_create_adaptor_point_params(pub_keys, messages, r_values):
    check_buffer_arr("pubKeys", "pubKey", pub_keys)
    check_buffer_arr("messages", "message", messages)
    check_buffer_arr("nonces", "nonce", r_values)
    check_same_length(pub_keys, messages, r_values)

def check_create_adaptor_secret_params(priv_keys, messages, k_values):
    check_scalar_arr("privateKeys", "privateKey", priv_keys)
    check_buffer_arr("messages", "message", messages)
    check_scalar_arr("kValues", "kValue", k_values)
    check_same_length(priv_keys, messages, k_values)
