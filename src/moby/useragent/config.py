import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from moby.useragent import DEFAULT_PRODUCT_NAME, GIT_COMMIT, __version__


def _docker_config_dir() -> Path:
    # An empty DOCKER_CONFIG counts as unset
    return Path(os.environ.get("DOCKER_CONFIG") or Path.home() / ".docker")


DEFAULT_CONFIG_DIR = _docker_config_dir()
DEFAULT_CONFIG_FILE_PATH = str(DEFAULT_CONFIG_DIR / "config.json")

CUSTOM_USER_AGENT_ENV = "DOCKER_CUSTOM_USER_AGENT"


@dataclass
class BuildInfo:
    product: str = DEFAULT_PRODUCT_NAME
    version: str = __version__
    git_commit: str = GIT_COMMIT


@dataclass
class UserAgentConfig:
    build: BuildInfo = field(default_factory=BuildInfo)
    custom_user_agent: Optional[str] = None


def _custom_user_agent_from_headers(headers: dict) -> Optional[str]:
    for name, value in headers.items():
        if name.lower() == "user-agent":
            return value or None
    return None


def load_user_agent_config(path: str = DEFAULT_CONFIG_FILE_PATH) -> UserAgentConfig:
    """Load the custom User-Agent from a docker CLI config file and the environment.

    Resolution order for the custom User-Agent:
    1. DOCKER_CUSTOM_USER_AGENT environment variable
    2. HttpHeaders["User-Agent"] in the config file
    3. None, meaning the User-Agent is built from the host
    """
    config = UserAgentConfig()

    expanded = Path(path).expanduser()
    if expanded.exists():
        data = json.loads(expanded.read_text())
        if not isinstance(data, dict):
            raise ValueError(f"Could not read a JSON object from {path}")
        headers = data.get("HttpHeaders") or {}
        if not isinstance(headers, dict):
            raise ValueError(f"HttpHeaders must be a JSON object in {path}")
        if not all(isinstance(value, str) for value in headers.values()):
            raise ValueError(f"HttpHeaders values must be strings in {path}")
        config.custom_user_agent = _custom_user_agent_from_headers(headers)

    env_value = os.getenv(CUSTOM_USER_AGENT_ENV)
    if env_value:
        config.custom_user_agent = env_value

    return config
