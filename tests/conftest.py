pytest_plugins = ["gitconverge.testing.conftest"]
