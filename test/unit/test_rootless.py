import os

import pytest

from typing import NamedTuple, Optional

from native_build_runner.environment import HostEnvironment, OSFamily
from native_build_runner.exceptions import SocketOwnershipLookupFailure
from native_build_runner.rootless import is_rootless, socket_owner_uid
from native_build_runner.runtime import ContainerRuntimeKind


class Case(NamedTuple):
    """one rootless detection scenario"""

    comment: str
    docker_host: Optional[str]
    uid: Optional[str]
    owner: int
    expected: bool


cases = (
    Case(comment="socket owned by user", docker_host="unix:///var/run/docker.sock", uid="1000", owner=1000, expected=True),
    Case(comment="socket owned by root", docker_host="unix:///var/run/docker.sock", uid="1000", owner=0, expected=False),
    Case(comment="socket owned by other user", docker_host="unix:///var/run/docker.sock", uid="1000", owner=1001, expected=False),
    Case(comment="no DOCKER_HOST", docker_host=None, uid="1000", owner=1000, expected=False),
    Case(comment="empty DOCKER_HOST", docker_host="", uid="1000", owner=1000, expected=False),
    Case(comment="tcp DOCKER_HOST", docker_host="tcp://127.0.0.1:2375", uid="1000", owner=1000, expected=False),
    Case(comment="ssh DOCKER_HOST", docker_host="ssh://user@host", uid="1000", owner=1000, expected=False),
    Case(comment="current user is root", docker_host="unix:///var/run/docker.sock", uid="0", owner=0, expected=False),
    Case(comment="uid unresolved", docker_host="unix:///var/run/docker.sock", uid=None, owner=1000, expected=False),
    Case(comment="uid empty", docker_host="unix:///var/run/docker.sock", uid="", owner=1000, expected=False),
)


def id_for_case(value):
    return value.comment


@pytest.fixture
def mock_owner(mocker):
    def factory(owner):
        return mocker.patch('native_build_runner.rootless.socket_owner_uid', return_value=owner)
    return factory


@pytest.mark.parametrize('case', cases, ids=id_for_case)
def test_is_rootless_docker(case, identity, mock_owner):
    mock_owner(case.owner)
    env = HostEnvironment(os_family=OSFamily.LINUX, docker_host=case.docker_host)

    assert is_rootless(ContainerRuntimeKind.DOCKER, env, identity_resolver=identity(uid=case.uid)) is case.expected


@pytest.mark.parametrize('runtime', (ContainerRuntimeKind.PODMAN, ContainerRuntimeKind.OTHER))
def test_is_rootless_only_for_docker(runtime, rootless_docker_env, identity, mock_owner):
    owner = mock_owner(1000)
    resolver = identity(uid='1000')

    assert is_rootless(runtime, rootless_docker_env, identity_resolver=resolver) is False
    assert resolver.calls == 0
    owner.assert_not_called()


def test_is_rootless_socket_path(rootless_docker_env, identity, mock_owner):
    owner = mock_owner(1000)

    is_rootless(ContainerRuntimeKind.DOCKER, rootless_docker_env, identity_resolver=identity(uid='1000'))

    owner.assert_called_once_with('/run/user/1000/docker.sock')


def test_is_rootless_lookup_failure(rootless_docker_env, identity, mocker, caplog):
    mocker.patch('native_build_runner.rootless.socket_owner_uid',
                 side_effect=SocketOwnershipLookupFailure('Permission denied'))

    with caplog.at_level('INFO', logger='native-build-runner.build'):
        result = is_rootless(ContainerRuntimeKind.DOCKER, rootless_docker_env, identity_resolver=identity(uid='1000'))

    assert result is False
    assert [record.name for record in caplog.records] == ['native-build-runner.build']
    assert "Owner UID lookup on '/run/user/1000/docker.sock' failed with 'Permission denied'" in caplog.text


def test_is_rootless_missing_socket(tmp_path, identity):
    env = HostEnvironment(os_family=OSFamily.LINUX, docker_host='unix://{0}'.format(tmp_path / 'missing.sock'))

    assert is_rootless(ContainerRuntimeKind.DOCKER, env, identity_resolver=identity(uid='1000')) is False


def test_socket_owner_uid(tmp_path):
    sock = tmp_path / 'docker.sock'
    sock.touch()

    assert socket_owner_uid(str(sock)) == os.lstat(str(sock)).st_uid


def test_socket_owner_uid_does_not_follow_symlinks(tmp_path, mocker):
    link = tmp_path / 'docker.sock'
    link.symlink_to(tmp_path / 'target.sock')
    mock_stat = mocker.patch('native_build_runner.rootless.os.stat')

    # a dangling link still has an owner of its own
    assert socket_owner_uid(str(link)) == os.lstat(str(link)).st_uid
    mock_stat.assert_not_called()


def test_socket_owner_uid_missing(tmp_path):
    with pytest.raises(SocketOwnershipLookupFailure, match='No such file or directory'):
        socket_owner_uid(str(tmp_path / 'nope.sock'))
