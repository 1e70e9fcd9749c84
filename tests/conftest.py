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

import os
import sys
from ctypes import addressof, c_char, c_void_p, create_string_buffer, memmove
from pathlib import Path

import pytest

# Make the top level package importable without an install
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from cnconv.assets import AssetStore  # noqa: E402
from cnconv.presets import CATALOG_FILES  # noqa: E402

TW2S_TABLE = {
    '涼': '凉', '風': '风', '訊': '讯', '無': '无', '邊': '边',
    '虧': '亏', '嬌': '娇', '緒': '绪', '雖': '虽', '樹': '树',
}


class FakeLibOpenCC:
    """Stands in for libopencc, with the same calling conventions.

    Converted strings live in real ctypes buffers and are handed out by
    address, so the wrapper's pointer handling runs as it does against the
    C library. Every call is recorded for inspection.
    """

    INVALID_HANDLE = c_void_p(-1).value

    def __init__(self, table=TW2S_TABLE, configs=('tw2sp.json', 'tw2s.json', 't2s.json')):
        self.table = dict(table)
        self.configs = set(configs)
        self.handles = {}
        self.closed = []
        self.allocations = {}
        self.freed = []
        self.lengths = []
        self.error = b''
        self.open_result = None
        self.buffer_result = None
        self.target = None
        self.windows = []
        self._next_handle = 0x1000

    def translate(self, data):
        text = data.decode('utf-8')
        return ''.join(self.table.get(c, c) for c in text).encode('utf-8')

    def opencc_open(self, path):
        if self.open_result is not None:
            return self.open_result
        path = os.fsdecode(path)
        name = os.path.basename(path)
        if name not in self.configs or (os.path.dirname(path) and not os.path.isfile(path)):
            self.error = ('%s not found or not accessible.' % path).encode('utf-8')
            return self.INVALID_HANDLE
        self._next_handle += 16
        self.handles[self._next_handle] = path
        return self._next_handle

    def opencc_close(self, od):
        del self.handles[od]
        self.closed.append(od)
        return 0

    def opencc_convert_utf8(self, od, data, length):
        assert od in self.handles
        self.lengths.append(length)
        buf = create_string_buffer(self.translate(data[:length]))
        self.allocations[addressof(buf)] = buf
        return addressof(buf)

    def opencc_convert_utf8_free(self, ptr):
        del self.allocations[ptr]
        self.freed.append(ptr)

    def opencc_convert_utf8_to_buffer(self, od, data, length, output):
        assert od in self.handles
        self.lengths.append(length)
        if self.buffer_result is not None:
            return self.buffer_result
        result = self.translate(data[:length]) + b'\0'
        if self.target is not None:
            # bytes left in the watched bytearray from the write address on
            start = addressof(c_char.from_buffer(self.target))
            room = len(self.target) - (output - start)
            self.windows.append(room)
            assert room >= len(result)
        memmove(output, result, len(result))
        return len(result) - 1

    def opencc_error(self):
        return self.error


@pytest.fixture
def fake_lib():
    return FakeLibOpenCC()


def make_store(names=CATALOG_FILES):
    return AssetStore({name: ('blob:%s' % name).encode('utf-8') for name in names})


@pytest.fixture
def store():
    return make_store()
