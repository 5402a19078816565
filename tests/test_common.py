import os

from hhconfig.utils.common import load_env, load_env_file, mask_text


def test_mask_text():
    assert mask_text("0123456789") == "012****789"


def test_mask_text_short_values_fully_masked():
    assert mask_text("abc") == "***"
    assert mask_text("") == ""


def test_mask_text_none():
    assert mask_text(None) == "None"


def test_load_env_masks_value_in_logs(isolated_logger, capsys):
    value = load_env("SECRET", masked=True, env={"SECRET": "supersecretvalue"})

    assert value == "supersecretvalue"
    with open(isolated_logger.log_file) as logs:
        log_text = logs.read()
    assert "supersecretvalue" not in log_text
    assert "sup**********lue" in log_text
    assert "supersecretvalue" not in capsys.readouterr().out


def test_load_env_missing_returns_none():
    assert load_env("NOT_THERE", env={}) is None


def test_load_env_empty_value_is_returned_as_is(capsys):
    assert load_env("EMPTY", env={"EMPTY": ""}) == ""
    assert "EMPTY var is not set" in capsys.readouterr().out


def test_load_env_defaults_to_process_env(monkeypatch):
    monkeypatch.setenv("HHCONFIG_TEST_VAR", "value")
    assert load_env("HHCONFIG_TEST_VAR") == "value"


def test_load_env_file_does_not_override(tmp_path, monkeypatch):
    monkeypatch.setenv("ETHERSCAN_API_KEY", "from-shell")
    # recorded first so teardown undoes what load_dotenv writes
    monkeypatch.setenv("INFURA_API_KEY", "placeholder")
    monkeypatch.delenv("INFURA_API_KEY")
    env_file = tmp_path / ".env"
    env_file.write_text("ETHERSCAN_API_KEY=from-file\nINFURA_API_KEY=infura-from-file\n")

    assert load_env_file(str(env_file)) is True

    assert os.environ["ETHERSCAN_API_KEY"] == "from-shell"
    assert os.environ["INFURA_API_KEY"] == "infura-from-file"


def test_load_env_file_missing_is_a_warning(tmp_path):
    assert load_env_file(str(tmp_path / "missing.env")) is False
