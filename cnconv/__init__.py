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

"""Open Chinese Convert (OpenCC) binding with bundled dictionaries.

Convert between Traditional and Simplified Chinese with libopencc::

    from cnconv import OpenCC, Preset

    cc = OpenCC(Preset.TW2SP)
    cc.convert('涼風有訊')  # '凉风有讯'

To run without a system wide OpenCC data directory, write the bundled
dictionaries of a preset to disk first and open the materialized config::

    materialize_preset(path, Preset.TW2SP)
    cc = OpenCC(os.path.join(path, Preset.TW2SP))

The bundled dictionaries are copied into cnconv/dictionaries by
tools/bundle_dictionaries.py. Until then the bundled store is empty and
materialize_preset() needs an explicit ``store``.
"""

from .assets import AssetStore, get_asset_store
from .engine import OpenCC, convert, load_library, native_error
from .errors import (
    AssetNotFoundError,
    ConfigLoadError,
    ConversionError,
    CorruptAssetError,
    CreateError,
    HandleClosedError,
    LibraryNotFoundError,
    MaterializeError,
    OpenCCError,
    TargetNotADirectoryError,
    WriteError,
)
from .materialize import ensure_directory, materialize_preset, materialize_presets
from .presets import CATALOG_FILES, PRESET_FILES, Preset, required_files

__version__ = '1.0.0'

CONFIGS = [preset.file_name for preset in Preset]

__all__ = [
    'CONFIGS', 'CATALOG_FILES', 'PRESET_FILES', 'Preset', 'required_files',
    'OpenCC', 'convert', 'load_library', 'native_error',
    'AssetStore', 'get_asset_store',
    'ensure_directory', 'materialize_preset', 'materialize_presets',
    'OpenCCError', 'LibraryNotFoundError', 'ConfigLoadError',
    'ConversionError', 'HandleClosedError', 'AssetNotFoundError',
    'MaterializeError', 'TargetNotADirectoryError', 'CreateError',
    'CorruptAssetError', 'WriteError',
]
