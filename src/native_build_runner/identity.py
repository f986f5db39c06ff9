import logging
import subprocess

from typing import NamedTuple, Optional

from native_build_runner.exceptions import UnresolvableIdentity

logger = logging.getLogger('native-build-runner.build')


class UserIdentity(NamedTuple):
    """uid/gid as text; None means the value could not be resolved, not zero"""

    uid: Optional[str] = None
    gid: Optional[str] = None

    @property
    def complete(self):
        return bool(self.uid) and bool(self.gid)


def _query_id(option):
    cmd = ['id', option]
    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, universal_newlines=True, check=False)
    except OSError as e:
        raise UnresolvableIdentity("'{0}' could not be run: {1}".format(' '.join(cmd), e))
    if proc.returncode != 0:
        raise UnresolvableIdentity("'{0}' exited with {1}: {2}".format(' '.join(cmd), proc.returncode, proc.stderr.strip()))
    return proc.stdout.strip()


class IdentityResolver:
    """
    Looks up the real uid and gid of the invoking user with ``id``.

    Lookups never raise, a failed lookup returns None.
    """

    def _lookup(self, option):
        try:
            return _query_id(option)
        except UnresolvableIdentity as e:
            logger.info("Identity lookup failed: %s", e)
            return None

    def current_user_id(self):
        return self._lookup('-ur')

    def current_group_id(self):
        return self._lookup('-gr')

    def resolve(self):
        return UserIdentity(uid=self.current_user_id(), gid=self.current_group_id())
