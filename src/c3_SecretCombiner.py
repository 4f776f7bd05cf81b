import os
from src.modules.adaptor import combine_secrets, adaptor_point_from_secret
from src.modules.tools import load_setup, load_json, save_json
from src.p1_AdaptorPointGenerator import ADAPTOR_POINT_FILE

SETUP_DIR = "setup.json"
COMBINED_SECRET_FILE = "combined_secret.json"


def load_attestations(attestations_path):
    # BIP340 signatures are R.x || s, only s is needed
    secrets = []
    for attestation in load_json(attestations_path):
        raw = bytes.fromhex(attestation)
        secrets.append(raw[32:] if len(raw) == 64 else raw)
    return secrets

def load_adaptor_point(outputs_dir):
    path = os.path.join(outputs_dir, ADAPTOR_POINT_FILE)
    if not os.path.exists(path):
        return None
    return bytes.fromhex(load_json(path)["adaptor_point"])

def combine_attestations(attestations_path, outputs_dir):
    secret = combine_secrets(load_attestations(attestations_path))
    adaptor_point = load_adaptor_point(outputs_dir)
    matches = None
    if adaptor_point is not None:
        matches = adaptor_point_from_secret(secret) == adaptor_point
    output_path = os.path.join(outputs_dir, COMBINED_SECRET_FILE)
    save_json(output_path, {
        "adaptor_secret": secret.hex(),
        "matches_adaptor_point": matches
    })
    return secret, matches, output_path

def main():
    setup_data = load_setup(SETUP_DIR)
    if setup_data is None:
        return
    print("Combining oracle attestations...\n")
    secret, matches, output_path = combine_attestations(setup_data["attestations"], setup_data["outputs_dir"])
    if matches is None:
        print("No adaptor point found, skipping the consistency check.")
    elif matches:
        print("Combined secret matches the adaptor point.")
    else:
        print("Combined secret does NOT match the adaptor point!")
    print("Combined secret saved successfully into ", output_path)

if __name__ == "__main__":
    main()
