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

"""Copy the OpenCC preset dictionaries into cnconv/dictionaries.

Run this before building a distribution that should work without a system
wide OpenCC install. The source is the ``share/opencc`` directory of an
OpenCC installation, found from ``--source``, ``OPENCC_DIR`` or pkg-config.
"""

import argparse
import os
import shutil
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from cnconv.presets import CATALOG_FILES  # noqa: E402

MIN_VERSION = '1.1.2'
MAX_VERSION = '1.2.0'
TARGET_DIR = os.path.join(ROOT, 'cnconv', 'dictionaries')


class BundleError(Exception):
    pass


def pkg_config(*args):
    pkgconfig = shutil.which('pkg-config')
    if not pkgconfig:
        return None
    return subprocess.run([pkgconfig, *args, 'opencc'],
                          stdout=subprocess.PIPE, stderr=subprocess.DEVNULL,
                          universal_newlines=True)


def check_version():
    result = pkg_config('--atleast-version=%s' % MIN_VERSION)
    if result.returncode != 0:
        raise BundleError('OpenCC version must be at least %s' % MIN_VERSION)
    result = pkg_config('--max-version=%s' % MAX_VERSION)
    if result.returncode != 0:
        raise BundleError('OpenCC version must be no higher than %s' % MAX_VERSION)


def find_source_dir(source=None):
    if source:
        return source
    opencc_dir = os.getenv('OPENCC_DIR')
    if opencc_dir:
        return os.path.join(opencc_dir, 'share', 'opencc')
    result = pkg_config('--variable=prefix')
    if result is not None and result.returncode == 0 and result.stdout.strip():
        check_version()
        return os.path.join(result.stdout.strip(), 'share', 'opencc')
    raise BundleError("Couldn't find the OpenCC data directory, "
                      "use --source or set OPENCC_DIR")


def bundle(source, target=TARGET_DIR):
    if not os.path.isdir(source):
        raise BundleError('OpenCC data directory does not exist: %s' % source)
    missing = [name for name in CATALOG_FILES
               if not os.path.isfile(os.path.join(source, name))]
    if missing:
        raise BundleError('%s is missing %s' % (source, ', '.join(missing)))
    os.makedirs(target, exist_ok=True)
    for name in CATALOG_FILES:
        shutil.copyfile(os.path.join(source, name), os.path.join(target, name))
    return len(CATALOG_FILES)


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--source', help='OpenCC data directory (share/opencc)')
    parser.add_argument('--target', default=TARGET_DIR,
                        help='output directory (default: %(default)s)')
    args = parser.parse_args(argv)

    try:
        source = find_source_dir(args.source)
        count = bundle(source, args.target)
    except BundleError as err:
        print('error: %s' % err, file=sys.stderr)
        return 1
    print('Copied %d files from %s to %s' % (count, source, args.target))
    return 0


if __name__ == '__main__':
    sys.exit(main())
