"""Global pytest fixtures for groupjoin."""

pytest_plugins = [
    "tests.fixtures.engines",
    "tests.fixtures.datagen",
]
