"""Client credentials and the files they live in."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import yaml

from .banner import BANNER

DEFAULT_PORT = 8888
FILE_NAME = "client.yml"
CONFIG_DIR = ".config"
APP_CONFIG_DIR = "spotify-tui"
TOKEN_CACHE_FILE = ".spotify_token_cache.json"
MAX_RETRIES = 5
EXPECTED_KEY_LENGTH = 32

_HEX_DIGITS = frozenset(string.hexdigits)
_PORT_PATTERN = re.compile(r"\+?[0-9]+")
_KEY_LABELS = ("Client ID", "Client Secret")

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


class ConfigError(Exception):
    """Raised when the client configuration is missing or invalid."""


@dataclass
class ConfigPaths:
    config_file_path: Path
    token_cache_path: Path


def validate_client_key(key: str) -> None:
    """Check that a client key is 32 hex digits; raise ConfigError if not."""
    length = len(key.encode("utf-8"))
    if length != EXPECTED_KEY_LENGTH:
        raise ConfigError(f"invalid length: {length} (must be {EXPECTED_KEY_LENGTH})")
    if not all(c in _HEX_DIGITS for c in key):
        raise ConfigError("invalid character found (must be hex digits)")


def _read_line(input_fn: InputFn) -> str:
    try:
        return input_fn()
    except EOFError:
        return ""


def prompt_client_key(
    type_label: str, input_fn: InputFn = input, output_fn: OutputFn = print
) -> str:
    """Ask for a client key until a valid one is given or retries run out."""
    for _ in range(MAX_RETRIES):
        output_fn(f"\nEnter your {type_label}: ")
        key = _read_line(input_fn).strip()
        try:
            validate_client_key(key)
        except ConfigError as error:
            output_fn(str(error))
        else:
            return key
    raise ConfigError(f"Maximum retries ({MAX_RETRIES}) exceeded.")


def _parse_port(text: str) -> int:
    text = text.strip()
    if _PORT_PATTERN.fullmatch(text):
        port = int(text)
        if port <= 0xFFFF:
            return port
    return DEFAULT_PORT


def _resolve_home(home: Optional[Path | str]) -> Path:
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        raise ConfigError("No $HOME directory found for client config") from None


@dataclass
class ClientConfig:
    """Credentials of the registered client and the preferred device."""

    client_id: str = field(default_factory=str)
    client_secret: str = field(default_factory=str)
    device_id: Optional[str] = None
    port: Optional[int] = None

    @property
    def effective_port(self) -> int:
        return DEFAULT_PORT if self.port is None else self.port

    @property
    def redirect_uri(self) -> str:
        return f"http://127.0.0.1:{self.effective_port}/callback"

    @classmethod
    def from_yaml(cls, text: str) -> "ClientConfig":
        data = yaml.safe_load(text)
        if not isinstance(data, dict):
            raise ConfigError("invalid client config: expected a mapping")
        for name in ("client_id", "client_secret"):
            if name not in data:
                raise ConfigError(f"missing field `{name}`")
            if not isinstance(data[name], str):
                raise ConfigError(f"invalid type for `{name}`: expected a string")
        device_id = data.get("device_id")
        if device_id is not None and not isinstance(device_id, str):
            raise ConfigError("invalid type for `device_id`: expected a string")
        port = data.get("port")
        if port is not None and (
            isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 0xFFFF
        ):
            raise ConfigError("invalid value for `port`: expected a number from 0 to 65535")
        return cls(data["client_id"], data["client_secret"], device_id, port)

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "device_id": self.device_id,
                "port": self.port,
            },
            sort_keys=False,
        )

    def _update_from(self, other: "ClientConfig") -> None:
        self.client_id = other.client_id
        self.client_secret = other.client_secret
        self.device_id = other.device_id
        self.port = other.port

    def build_paths(self, home: Optional[Path | str] = None) -> ConfigPaths:
        """Return the config file paths, creating their directories if needed."""
        home_config_dir = _resolve_home(home) / CONFIG_DIR
        app_config_dir = home_config_dir / APP_CONFIG_DIR
        home_config_dir.mkdir(exist_ok=True)
        app_config_dir.mkdir(exist_ok=True)
        return ConfigPaths(
            config_file_path=app_config_dir / FILE_NAME,
            token_cache_path=app_config_dir / TOKEN_CACHE_FILE,
        )

    def set_device_id(self, device_id: str, home: Optional[Path | str] = None) -> None:
        """Remember a device id here and in the stored config file."""
        paths = self.build_paths(home)
        stored = ClientConfig.from_yaml(paths.config_file_path.read_text(encoding="utf-8"))
        self.device_id = device_id
        stored.device_id = device_id
        paths.config_file_path.write_text(stored.to_yaml(), encoding="utf-8")

    def load_config(
        self,
        home: Optional[Path | str] = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        """Load the stored config, or ask for one and store it."""
        paths = self.build_paths(home)
        if paths.config_file_path.exists():
            loaded = ClientConfig.from_yaml(paths.config_file_path.read_text(encoding="utf-8"))
            self._update_from(loaded)
            return

        output_fn(BANNER)
        output_fn(f"Config will be saved to {paths.config_file_path}")
        output_fn("\nHow to get setup:\n")
        instructions = [
            "Go to the Spotify developer dashboard",
            "Click `Create a Client ID` and create an app",
            "Now click `Edit Settings`",
            f"Add `http://127.0.0.1:{DEFAULT_PORT}/callback` to the Redirect URIs",
            "You are now ready to authenticate with Spotify!",
        ]
        for number, item in enumerate(instructions, start=1):
            output_fn(f"  {number}. {item}")

        keys = [prompt_client_key(label, input_fn, output_fn) for label in _KEY_LABELS]

        output_fn(f"\nEnter port of redirect uri (default {DEFAULT_PORT}): ")
        port = _parse_port(_read_line(input_fn))

        created = ClientConfig(keys[0], keys[1], None, port)
        paths.config_file_path.write_text(created.to_yaml(), encoding="utf-8")
        self._update_from(created)