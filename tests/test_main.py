import importlib.util


def test_package_runs_as_module():
    assert importlib.util.find_spec("doc_analysis.__main__") is not None
