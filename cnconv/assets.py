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

import logging
import os
import zipfile
from collections.abc import Mapping
from functools import lru_cache

from .errors import AssetNotFoundError
from .presets import CATALOG_FILES

__all__ = ['AssetStore', 'get_asset_store', 'bundled_asset_dir']

log = logging.getLogger('main.cnconv')

ASSET_DIR_ENV = 'CNCONV_ASSET_DIR'
PACKAGE_NAME = os.path.basename(os.path.dirname(os.path.abspath(__file__)))
BUNDLE_DIR_NAME = 'dictionaries'


class AssetStore(Mapping):
    """Read-only table of dictionary and config files, keyed by file name.

    The content is fixed once the store is built. Looking up a name that is
    not in the store raises :class:`AssetNotFoundError`.
    """

    def __init__(self, blobs=None):
        self._blobs = {name: bytes(data) for name, data in (blobs or {}).items()}

    def __getitem__(self, name):
        try:
            return self._blobs[name]
        except KeyError:
            raise AssetNotFoundError(name) from None

    def __iter__(self):
        return iter(self._blobs)

    def __len__(self):
        return len(self._blobs)

    def __repr__(self):
        return '<%s: %d files>' % (self.__class__.__name__, len(self))

    def missing(self, names=CATALOG_FILES):
        return [name for name in names if name not in self._blobs]

    def is_complete(self, names=CATALOG_FILES):
        return not self.missing(names)

    @classmethod
    def from_directory(cls, path, names=CATALOG_FILES):
        blobs = {}
        for name in names:
            filepath = os.path.join(path, name)
            if os.path.isfile(filepath):
                with open(filepath, 'rb') as f:
                    blobs[name] = f.read()
        log.debug('cnconv: loaded %d of %d dictionary files from %s',
                  len(blobs), len(names), path)
        return cls(blobs)

    @classmethod
    def from_zip(cls, archive_path, prefix, names=CATALOG_FILES):
        blobs = {}
        with zipfile.ZipFile(archive_path) as archive:
            members = set(archive.namelist())
            for name in names:
                member = '%s/%s' % (prefix.rstrip('/'), name)
                if member in members:
                    with archive.open(member) as f:
                        blobs[name] = f.read()
        log.debug('cnconv: loaded %d of %d dictionary files from %s:%s',
                  len(blobs), len(names), archive_path, prefix)
        return cls(blobs)


def bundled_asset_dir():
    """Directory the bundled dictionaries are read from."""
    override = os.getenv(ASSET_DIR_ENV)
    if override:
        return override
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), BUNDLE_DIR_NAME)


@lru_cache(maxsize=None)
def get_asset_store():
    """The process-wide store of bundled dictionaries, built on first use."""
    path = bundled_asset_dir()
    moddir = os.path.dirname(os.path.abspath(__file__))
    parentdir = os.path.dirname(moddir)
    # Imported from a zip archive, read the files from the archive
    if not os.getenv(ASSET_DIR_ENV) and parentdir.endswith('.zip'):
        return AssetStore.from_zip(parentdir, '%s/%s' % (PACKAGE_NAME, BUNDLE_DIR_NAME))
    return AssetStore.from_directory(path)
