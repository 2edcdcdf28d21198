from .payload_loader import load_payload, load_payload_from_string, validate_payload_file
