import os
from src.modules.adaptor import create_adaptor_secret
from src.modules.tools import load_setup, load_json, save_json, message_digest, wif_to_int, bytes_to_int

SETUP_DIR = "setup.json"
ADAPTOR_SECRET_FILE = "adaptor_secret.json"


def load_oracle_secrets(secrets_path, network):
    # private keys are stored as WIF, nonces as 32 byte hex scalars
    entries = load_json(secrets_path)
    priv_keys, messages, k_values = [], [], []
    for entry in entries:
        priv_keys.append(wif_to_int(entry["private_key"], network))
        k_values.append(bytes_to_int(bytes.fromhex(entry["k_value"])))
        messages.append(message_digest(entry))
    return priv_keys, messages, k_values

def generate_adaptor_secret(secrets_path, outputs_dir, network):
    priv_keys, messages, k_values = load_oracle_secrets(secrets_path, network)
    adaptor_secret = create_adaptor_secret(priv_keys, messages, k_values)
    output_path = os.path.join(outputs_dir, ADAPTOR_SECRET_FILE)
    save_json(output_path, {"adaptor_secret": adaptor_secret.hex()})
    return adaptor_secret, output_path

def main():
    setup_data = load_setup(SETUP_DIR)
    if setup_data is None:
        return
    print("Computing adaptor secret from oracle private material...\n")
    _, output_path = generate_adaptor_secret(setup_data["oracle_secrets"], setup_data["outputs_dir"], setup_data["network"])
    print("Adaptor secret saved successfully into ", output_path)

if __name__ == "__main__":
    main()
