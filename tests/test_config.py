from main import parse_args
from tictactoe import config


# ------------------------------------------------------------
# Environment overrides
# ------------------------------------------------------------
def test_env_int(monkeypatch):
    monkeypatch.setenv("TTT_TEST_MS", "1500")
    assert config._env_int("TTT_TEST_MS", 3000) == 1500


def test_env_int_falls_back_on_bad_values(monkeypatch):
    for raw in ("", "abc", "0", "-5"):
        monkeypatch.setenv("TTT_TEST_MS", raw)
        assert config._env_int("TTT_TEST_MS", 3000) == 3000
    monkeypatch.delenv("TTT_TEST_MS")
    assert config._env_int("TTT_TEST_MS", 3000) == 3000


def test_env_flag(monkeypatch):
    monkeypatch.setenv("TTT_TEST_FLAG", "yes")
    assert config._env_flag("TTT_TEST_FLAG") is True
    monkeypatch.setenv("TTT_TEST_FLAG", "off")
    assert config._env_flag("TTT_TEST_FLAG") is False
    monkeypatch.delenv("TTT_TEST_FLAG")
    assert config._env_flag("TTT_TEST_FLAG", default=True) is True


def test_default_toast_duration():
    assert config.TOAST_DURATION_MS == 3000


# ------------------------------------------------------------
# Command line
# ------------------------------------------------------------
def test_parse_args_defaults():
    args = parse_args([])
    assert args.toast_ms == config.TOAST_DURATION_MS
    assert args.muted == config.START_MUTED


def test_parse_args_overrides():
    args = parse_args(["--muted", "--toast-ms", "500", "--log-level", "debug"])
    assert args.muted is True
    assert args.toast_ms == 500
    assert args.log_level == "DEBUG"
