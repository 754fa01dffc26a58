from concurrent.futures import ThreadPoolExecutor
import asyncio

import pulumi
import pytest

from tests.mocks import ImmediateExecutor, PROJECT, StaticWebsiteMocks


def _event_loop():
    try:
        return asyncio.get_event_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        return loop


@pytest.fixture
def mocks():
    loop = _event_loop()
    loop.set_default_executor(ImmediateExecutor())

    old_settings = pulumi.runtime.settings.SETTINGS
    mocks = StaticWebsiteMocks()
    try:
        pulumi.runtime.set_mocks(mocks, project=PROJECT, stack="test")
        yield mocks
    finally:
        pulumi.runtime.settings.configure(old_settings)
        loop.set_default_executor(ThreadPoolExecutor())


@pytest.fixture
def site_dir(tmp_path):
    app = tmp_path / "app"
    app.mkdir()
    (app / "index.html").write_text("<html>hi</html>")
    return app


@pytest.fixture
def stack_config():
    """Sets stack configuration for the duration of a test."""
    def set_config(**values):
        pulumi.runtime.set_all_config({f"{PROJECT}:{k}": v for k, v in values.items()})

    yield set_config
    pulumi.runtime.set_all_config({})
