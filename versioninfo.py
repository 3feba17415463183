import os
import re

__XEDIT_VERSION = None


def version():
    global __XEDIT_VERSION
    if __XEDIT_VERSION is None:
        with open(os.path.join(get_base_dir(), 'src', 'xedit', '__init__.py')) as f:
            __XEDIT_VERSION = re.search(r'__version__\s*=\s*"([^"]+)"', f.read(500)).group(1)
        assert __XEDIT_VERSION
    return __XEDIT_VERSION


def dev_status():
    _version = version()
    if 'a' in _version:
        return 'Development Status :: 3 - Alpha'
    elif 'b' in _version or 'c' in _version:
        return 'Development Status :: 4 - Beta'
    else:
        return 'Development Status :: 5 - Production/Stable'


def changes():
    """Extract part of changelog pertaining to version.
    """
    _version = version()
    with open(os.path.join(get_base_dir(), "CHANGES.txt"), 'r', encoding='utf8') as f:
        lines = []
        for line in f:
            if line.startswith('====='):
                if len(lines) > 1:
                    break
            if lines:
                lines.append(line)
            elif line.startswith(_version):
                lines.append(line)
    return ''.join(lines[:-1])


def requirements(filename='requirements.txt'):
    with open(os.path.join(get_base_dir(), filename)) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


def get_base_dir():
    return os.path.abspath(os.path.dirname(__file__))
