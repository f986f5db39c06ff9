import pytest

from native_build_runner import output
from native_build_runner.environment import HostEnvironment, OSFamily
from native_build_runner.identity import UserIdentity


CONTAINER_RUNTIME_ENVS = (
    'DOCKER_HOST',
    'NATIVE_BUILD_CONTAINER_RUNTIME',
)


class FakeIdentityResolver:
    """Stands in for ``id -ur`` / ``id -gr`` and counts the lookups"""

    def __init__(self, uid=None, gid=None):
        self.uid = uid
        self.gid = gid
        self.calls = 0

    def current_user_id(self):
        self.calls += 1
        return self.uid

    def current_group_id(self):
        self.calls += 1
        return self.gid

    def resolve(self):
        return UserIdentity(uid=self.current_user_id(), gid=self.current_group_id())


@pytest.fixture(autouse=True)
def clean_container_env(monkeypatch):
    for name in CONTAINER_RUNTIME_ENVS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    output.set_debug('disable')


@pytest.fixture
def identity():
    def factory(uid='1000', gid='1000'):
        return FakeIdentityResolver(uid=uid, gid=gid)
    return factory


@pytest.fixture
def linux_env():
    return HostEnvironment(os_family=OSFamily.LINUX)


@pytest.fixture
def rootless_docker_env():
    return HostEnvironment(os_family=OSFamily.LINUX, docker_host='unix:///run/user/1000/docker.sock')


@pytest.fixture
def windows_env():
    return HostEnvironment(os_family=OSFamily.WINDOWS)
