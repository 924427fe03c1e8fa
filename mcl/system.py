# coding= utf-8
"""
The bits of the outside world that LIST reports on: the current directory,
the mount table, and what machine we're running on. The machine treats what
comes back from here as plain text to print.
"""
import os
import platform
import time
from collections import namedtuple

from mcl.errors import ResourceError

MOUNTS_PATH = '/proc/mounts'

SystemInfo = namedtuple('SystemInfo', 'system release machine node time')
Mount = namedtuple('Mount', 'device mount_point fs_type')


def _entries(directory):
    try:
        return sorted(os.listdir(directory))
    except OSError:
        raise ResourceError('Cannot access current directory')


def program_files(directory='.', extensions=('.mcl', '.txt')):
    return [name for name in _entries(directory)
            if name.endswith(tuple(extensions))]


def directories(directory='.'):
    return [name for name in _entries(directory)
            if not name.startswith('.')
            and os.path.isdir(os.path.join(directory, name))]


def mounts(path=MOUNTS_PATH):
    """ Mount points under '/' with short paths, in mount-table order. """
    found = []
    try:
        with open(path, encoding='utf-8', errors='replace') as table:
            for line in table:
                fields = line.split()
                if len(fields) < 3:
                    continue
                mount = Mount(*fields[:3])
                if mount.mount_point.startswith('/') and len(mount.mount_point) < 20:
                    found.append(mount)
    except OSError:
        raise ResourceError('Cannot access mount information')
    return found


def system_info():
    uname = platform.uname()
    return SystemInfo(uname.system, uname.release, uname.machine, uname.node,
                      time.ctime())
