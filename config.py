import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Password hashing (bcrypt work factor)
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Invoice lifecycle: opt in to rejecting status changes outside the transition table
    STRICT_STATUS_TRANSITIONS = bool(data.get("STRICT_STATUS_TRANSITIONS", False))
