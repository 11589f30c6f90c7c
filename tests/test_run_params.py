import pytest

from suitetree.models.run_params import RunParams


def test_run_params_valid():
	rp = RunParams(target="tests.trees:build_runner")
	assert rp.module_name == "tests.trees"
	assert rp.attribute == "build_runner"
	assert rp.strict is False
	assert rp.column_width is None


def test_run_params_dotted_attribute():
	rp = RunParams(target=" pkg:factory.runner ")
	assert rp.target == "pkg:factory.runner"
	assert rp.attribute == "factory.runner"


@pytest.mark.parametrize(
    "target", ["pkg.mod", "pkg.mod:", ":runner", "../evil:x", "a:b:c"])
def test_run_params_invalid_target(target):
	with pytest.raises(ValueError):
		RunParams(target=target)


def test_run_params_positive_width():
	with pytest.raises(ValueError):
		RunParams(target="m:r", column_width=0)
