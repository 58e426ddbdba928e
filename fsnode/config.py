"""Configuration settings for the codec, read from the environment at import."""

import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


# 0 disables the guard
MAX_NAME_BYTES = int(os.environ.get("FSNODE_MAX_NAME_BYTES", "0"))

MAX_MESSAGE_BYTES = int(os.environ.get("FSNODE_MAX_MESSAGE_BYTES", "0"))

STRICT_UTF8 = _env_flag("FSNODE_STRICT_UTF8", "true")
