import re

_DRIVE_LETTER = re.compile(r'^([A-Za-z]):[\\/]?(.*)$', re.DOTALL)


def translate_to_volume_path(path, is_podman=False):
    '''
    Turn a Windows host path into the form a container runtime accepts as
    the host side of a volume mount.

    ``C:\\dev\\app`` becomes ``//c/dev/app`` for docker and ``/mnt/c/dev/app``
    for podman, whose machine VM sees the Windows drives under ``/mnt``.
    Paths without a drive letter only get their separators converted.
    '''
    if not path:
        return path

    match = _DRIVE_LETTER.match(path)
    if match is None:
        return path.replace('\\', '/')

    drive = match.group(1).lower()
    rest = match.group(2).replace('\\', '/')
    prefix = '/mnt/' if is_podman else '//'
    translated = prefix + drive
    if rest:
        translated += '/' + rest
    return translated
