# -*- coding: utf-8 -*-
#
# Copyright 2026 The cnconv authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files(the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Copy bundled dictionaries to disk so OpenCC can load them.

OpenCC only reads configurations and dictionaries from the file system. The
functions here write the files a preset needs into a directory, after which
``OpenCC(os.path.join(directory, preset))`` works without a system install.

Files that already exist are kept as they are, so running the same
materialization again is cheap. Writes are not atomic: a file truncated by a
crash is treated as present on the next run. A symbolic link in the
target directory counts as present when it resolves to a regular file. A
dangling link, or one to anything else, is reported as a corrupt slot.
"""

import logging
import os

from .assets import get_asset_store
from .errors import (
    CorruptAssetError,
    CreateError,
    TargetNotADirectoryError,
    WriteError,
)
from .presets import Preset

__all__ = ['ensure_directory', 'materialize_preset', 'materialize_presets']

log = logging.getLogger('main.cnconv')


def ensure_directory(path):
    if os.path.exists(path):
        if not os.path.isdir(path):
            raise TargetNotADirectoryError(path=path)
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as err:
        raise CreateError(path=path) from err
    log.debug('cnconv: created dictionary directory %s', path)


def _write_asset(filepath, data):
    try:
        f = open(filepath, 'xb')
    except OSError as err:
        raise CreateError('Cannot create a new file.', path=filepath) from err
    with f:
        try:
            f.write(data)
        except OSError as err:
            raise WriteError(path=filepath) from err
        try:
            f.flush()
        except OSError as err:
            raise WriteError('Cannot flush file.', path=filepath) from err


def _materialize(path, preset, store, done):
    written = []
    for name in Preset.from_name(preset).files:
        if name in done:
            continue
        filepath = os.path.join(path, name)
        if os.path.lexists(filepath):
            if not os.path.isfile(filepath):
                raise CorruptAssetError(path=filepath)
            log.debug('cnconv: %s already exists, skipped', filepath)
        else:
            _write_asset(filepath, store[name])
            log.debug('cnconv: wrote %s', filepath)
            written.append(filepath)
        done.add(name)
    return written


def materialize_preset(path, preset, store=None):
    """Write the files required by ``preset`` into the directory ``path``.

    ``path`` is created if needed. Returns the paths of the files that were
    written; files already present are not touched and not returned.

    Without ``store`` the bundled dictionaries are used. A source checkout
    ships none until tools/bundle_dictionaries.py has been run, so this
    raises :class:`AssetNotFoundError` there.
    """
    if store is None:
        store = get_asset_store()
    ensure_directory(path)
    return _materialize(path, preset, store, set())


def materialize_presets(path, presets, store=None):
    """Materialize several presets into one directory.

    Presets are processed in order and the first failure is raised. Files
    written before the failure stay on disk.
    """
    if store is None:
        store = get_asset_store()
    ensure_directory(path)
    done = set()
    written = []
    for preset in presets:
        written.extend(_materialize(path, preset, store, done))
    return written
