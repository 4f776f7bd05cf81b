import os
from src.modules.adaptor import create_adaptor_point
from src.modules.tools import load_setup, load_json, save_json, message_digest

SETUP_DIR = "setup.json"
ADAPTOR_POINT_FILE = "adaptor_point.json"


def load_announcements(announcements_path):
    # Each announcement is one oracle's (public key, nonce, message) for the outcome
    announcements = load_json(announcements_path)
    pub_keys, messages, r_values = [], [], []
    for announcement in announcements:
        pub_keys.append(bytes.fromhex(announcement["pub_key"]))
        r_values.append(bytes.fromhex(announcement["nonce"]))
        messages.append(message_digest(announcement))
    return pub_keys, messages, r_values

def generate_adaptor_point(announcements_path, outputs_dir):
    pub_keys, messages, r_values = load_announcements(announcements_path)
    adaptor_point = create_adaptor_point(pub_keys, messages, r_values)
    output_path = os.path.join(outputs_dir, ADAPTOR_POINT_FILE)
    save_json(output_path, {
        "adaptor_point": adaptor_point.hex(),
        "number_of_oracles": len(pub_keys)
    })
    return adaptor_point, output_path

def main():
    setup_data = load_setup(SETUP_DIR)
    if setup_data is None:
        return
    print("Computing adaptor point from oracle announcements...\n")
    adaptor_point, output_path = generate_adaptor_point(setup_data["announcements"], setup_data["outputs_dir"])
    print("Adaptor point:", adaptor_point.hex())
    print("Adaptor point saved successfully into ", output_path)

if __name__ == "__main__":
    main()
