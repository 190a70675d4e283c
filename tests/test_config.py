import pytest

from sptui.config import (
    APP_CONFIG_DIR,
    CONFIG_DIR,
    DEFAULT_PORT,
    FILE_NAME,
    TOKEN_CACHE_FILE,
    ClientConfig,
    ConfigError,
    prompt_client_key,
    validate_client_key,
)

GOOD_ID = "0123456789abcdef0123456789ABCDEF"
GOOD_OTHER = "fedcba9876543210fedcba9876543210"


def _feeder(lines):
    answers = list(lines)

    def read():
        if not answers:
            raise EOFError
        return answers.pop(0)

    return read


def test_validate_accepts_hex_key():
    validate_client_key(GOOD_ID)
    assert len(GOOD_ID) == 32


def test_validate_rejects_wrong_length():
    with pytest.raises(ConfigError, match=r"invalid length: 3 \(must be 32\)"):
        validate_client_key("abc")


def test_validate_rejects_non_hex():
    with pytest.raises(ConfigError, match="must be hex digits"):
        validate_client_key("g" * 32)


def test_prompt_retries_until_valid():
    out = []
    key = prompt_client_key("Client ID", _feeder(["bad", "  " + GOOD_ID + "  "]), out.append)
    assert key == GOOD_ID
    assert any("invalid length" in line for line in out)


def test_prompt_gives_up_after_max_retries():
    with pytest.raises(ConfigError, match=r"Maximum retries \(5\) exceeded\."):
        prompt_client_key("Client ID", _feeder(["x"] * 10), lambda _: None)


def test_redirect_uri_default_and_custom():
    assert ClientConfig().redirect_uri == "http://127.0.0.1:8888/callback"
    assert ClientConfig(port=9000).effective_port == 9000
    assert ClientConfig().effective_port == DEFAULT_PORT


def test_build_paths_creates_directories(tmp_path):
    paths = ClientConfig().build_paths(tmp_path)
    app_dir = tmp_path / CONFIG_DIR / APP_CONFIG_DIR
    assert app_dir.is_dir()
    assert paths.config_file_path == app_dir / FILE_NAME
    assert paths.token_cache_path == app_dir / TOKEN_CACHE_FILE


def test_yaml_roundtrip():
    cfg = ClientConfig(GOOD_ID, GOOD_OTHER, "dev", 1234)
    assert ClientConfig.from_yaml(cfg.to_yaml()) == cfg


def test_from_yaml_missing_secret():
    with pytest.raises(ConfigError, match="client_secret"):
        ClientConfig.from_yaml("client_id: abc\n")


def test_load_existing_config(tmp_path):
    stored = ClientConfig(GOOD_ID, GOOD_OTHER, None, 4321)
    paths = ClientConfig().build_paths(tmp_path)
    paths.config_file_path.write_text(stored.to_yaml(), encoding="utf-8")
    cfg = ClientConfig()
    cfg.load_config(tmp_path, _feeder([]), lambda _: None)
    assert cfg == stored


def test_load_interactive_writes_file(tmp_path):
    cfg = ClientConfig()
    out = []
    cfg.load_config(tmp_path, _feeder([GOOD_ID, GOOD_OTHER, ""]), out.append)
    assert cfg == ClientConfig(GOOD_ID, GOOD_OTHER, None, DEFAULT_PORT)
    reloaded = ClientConfig()
    reloaded.load_config(tmp_path, _feeder([]), lambda _: None)
    assert reloaded == cfg
    assert any("Config will be saved to" in line for line in out)


@pytest.mark.parametrize("answer", ["abc", "70000", "-5"])
def test_load_interactive_bad_port_falls_back(tmp_path, answer):
    cfg = ClientConfig()
    cfg.load_config(tmp_path, _feeder([GOOD_ID, GOOD_OTHER, answer]), lambda _: None)
    assert cfg.port == DEFAULT_PORT


def test_load_interactive_custom_port(tmp_path):
    cfg = ClientConfig()
    cfg.load_config(tmp_path, _feeder([GOOD_ID, GOOD_OTHER, " 9000 "]), lambda _: None)
    assert cfg.port == 9000


def test_set_device_id_persists(tmp_path):
    cfg = ClientConfig()
    cfg.load_config(tmp_path, _feeder([GOOD_ID, GOOD_OTHER, ""]), lambda _: None)
    cfg.set_device_id("device-1", tmp_path)
    assert cfg.device_id == "device-1"
    reloaded = ClientConfig()
    reloaded.load_config(tmp_path, _feeder([]), lambda _: None)
    assert reloaded.device_id == "device-1"
    assert reloaded.client_id == GOOD_ID


def test_set_device_id_without_file_fails(tmp_path):
    cfg = ClientConfig()
    with pytest.raises(FileNotFoundError):
        cfg.set_device_id("device-1", tmp_path)
    assert cfg.device_id is None