import pytest
from pydantic import ValidationError

from suitetree.models.config import HarnessConfig, load_env
from suitetree.models.run_params import RunParams


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for var in ("SUITETREE_COLUMN_WIDTH", "SUITETREE_RUN_CHILD_SUITES",
	            "SUITETREE_FORCE_COLOR", "SUITETREE_NO_COLOR",
	            "SUITETREE_LOG_LEVEL"):
		monkeypatch.delenv(var, raising=False)


def test_defaults():
	cfg = HarnessConfig()
	assert cfg.column_width == 50
	assert cfg.run_child_suites is True
	assert cfg.force_color is False
	assert cfg.no_color is False
	assert cfg.log_level == "warning"


def test_reads_environment(monkeypatch):
	monkeypatch.setenv("SUITETREE_COLUMN_WIDTH", "72")
	monkeypatch.setenv("SUITETREE_RUN_CHILD_SUITES", "false")
	cfg = HarnessConfig()
	assert cfg.column_width == 72
	assert cfg.run_child_suites is False


def test_alias_and_field_name_accepted():
	assert HarnessConfig(SUITETREE_COLUMN_WIDTH=30).column_width == 30
	assert HarnessConfig(column_width=31).column_width == 31


def test_column_width_must_be_positive():
	with pytest.raises(ValidationError):
		HarnessConfig(SUITETREE_COLUMN_WIDTH=0)


def test_load_env_file(tmp_path, monkeypatch):
	env = tmp_path / "custom.env"
	env.write_text("SUITETREE_COLUMN_WIDTH=64\n", encoding="utf-8")
	# restore "unset" after the test, load_dotenv writes os.environ
	monkeypatch.setenv("SUITETREE_COLUMN_WIDTH", "1")
	monkeypatch.delenv("SUITETREE_COLUMN_WIDTH")
	load_env(env)
	assert HarnessConfig().column_width == 64


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "missing.env")


def test_apply_overrides_only_non_none():
	cfg = HarnessConfig(SUITETREE_COLUMN_WIDTH=60)
	cfg.apply_overrides(RunParams(target="pkg.mod:runner"))
	assert cfg.column_width == 60
	assert cfg.run_child_suites is True

	cfg.apply_overrides(
	    RunParams(target="pkg.mod:runner", column_width=30,
	              run_child_suites=False))
	assert cfg.column_width == 30
	assert cfg.run_child_suites is False


def test_color_overrides():
	cfg = HarnessConfig()
	cfg.apply_overrides(RunParams(target="m:r", color=True))
	assert cfg.force_color is True
	assert cfg.make_console().is_terminal

	cfg.apply_overrides(RunParams(target="m:r", color=False))
	assert cfg.force_color is False
	assert cfg.no_color is True
	assert cfg.make_console().no_color
