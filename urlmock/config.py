import os
import json
import logging
from dotenv import load_dotenv


class AppConfig:
    def __init__(self, env_file=".env"):
        load_dotenv(env_file)

        self.LOG_LEVEL = self._parse_log_level()
        self.USE_MOCK_API = os.environ.get("USE_MOCK_API", "false").lower() == "true"
        self.MOCK_LOOKUP_PATH = os.environ.get("MOCK_LOOKUP_PATH", "config/mock_lookup.json")
        self.MOCK_SERVER_PORT = int(os.environ.get("MOCK_SERVER_PORT", 9090))


    @staticmethod
    def _load_strict_json(path, context_name):
        if not os.path.exists(path):
            raise FileNotFoundError(f"❌ CONFIG_ERROR: '{context_name}' file not found at: {path}")
        try:
            with open(path, 'r') as f:
                data = json.load(f)
                if not data:
                    raise ValueError(f"❌ CONFIG_ERROR: file '{path}' is empty.")
                return data
        except json.JSONDecodeError as e:
            raise ValueError(f"❌ CONFIG_ERROR: invalid JSON in '{path}': {e}")


    @staticmethod
    def _validate_lookup(data, source_name):
        if not isinstance(data, dict):
            raise ValueError(f"❌ CONFIG_ERROR: '{source_name}' must hold a JSON object of URL -> URL")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"❌ CONFIG_ERROR: mock URL for '{key}' in '{source_name}' must be a string"
                )


    def _parse_log_level(self):
        raw_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL
        }
        if raw_level not in level_map:
            raise ValueError(f"❌ CONFIG_ERROR: LOG_LEVEL '{raw_level}' is invalid in .env. "
                             f"Use: DEBUG, INFO, WARNING, ERROR or CRITICAL.")
        return level_map[raw_level]


    def load_lookup(self) -> dict[str, str]:
        data = self._load_strict_json(self.MOCK_LOOKUP_PATH, "Mock Lookup")
        self._validate_lookup(data, self.MOCK_LOOKUP_PATH)
        return dict(data)

config = AppConfig()
