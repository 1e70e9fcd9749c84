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
import sys
from ctypes import (
    CDLL,
    addressof,
    c_char,
    c_char_p,
    c_int,
    c_size_t,
    c_void_p,
    cast,
)
from ctypes.util import find_library
from functools import lru_cache

from .errors import (
    ConfigLoadError,
    ConversionError,
    HandleClosedError,
    LibraryNotFoundError,
)
from .presets import Preset

__all__ = ['OpenCC', 'convert', 'load_library', 'native_error']

log = logging.getLogger('main.cnconv')

# opencc_open() returns (opencc_t) -1 on failure and
# opencc_convert_utf8_to_buffer() returns (size_t) -1.
INVALID_HANDLE = c_void_p(-1).value
INVALID_SIZE = c_size_t(-1).value


def _library_path():
    if sys.platform == 'win32':
        moddir = os.path.dirname(os.path.abspath(__file__))
        parentdir = os.path.dirname(moddir)
        # Extract DLL from ZIP file
        if parentdir.endswith('.zip'):
            import tempfile
            import zipfile
            archive = zipfile.ZipFile(parentdir)
            member = '%s/opencc.dll' % os.path.basename(moddir)
            with archive.open(member) as openccdll:
                (fd, libpath) = tempfile.mkstemp(suffix='.dll')
                with os.fdopen(fd, 'wb') as tempdll:
                    tempdll.write(openccdll.read())
            return libpath
        return os.getenv('LIBOPENCC') or os.path.join(moddir, 'opencc')
    return os.getenv('LIBOPENCC') or find_library('opencc') or 'libopencc.so.1'


@lru_cache(maxsize=None)
def load_library():
    """Load libopencc and declare the prototypes of its C API."""
    libpath = _library_path()
    try:
        libopencc = CDLL(libpath, use_errno=True)
    except OSError as err:
        raise LibraryNotFoundError() from err
    log.debug('cnconv: loaded %s', libpath)

    libopencc.opencc_open.argtypes = [c_char_p]
    libopencc.opencc_open.restype = c_void_p
    libopencc.opencc_close.argtypes = [c_void_p]
    libopencc.opencc_close.restype = c_int
    libopencc.opencc_convert_utf8.argtypes = [c_void_p, c_char_p, c_size_t]
    libopencc.opencc_convert_utf8.restype = c_void_p
    libopencc.opencc_convert_utf8_to_buffer.argtypes = [c_void_p, c_char_p, c_size_t, c_void_p]
    libopencc.opencc_convert_utf8_to_buffer.restype = c_size_t
    libopencc.opencc_convert_utf8_free.argtypes = [c_void_p]
    libopencc.opencc_convert_utf8_free.restype = None
    libopencc.opencc_error.argtypes = []
    libopencc.opencc_error.restype = c_char_p
    return libopencc


def native_error(lib=None):
    """The last error message reported by libopencc, or an empty string."""
    if lib is None:
        lib = load_library()
    message = lib.opencc_error()
    if not message:
        return ''
    return message.decode('utf-8', 'replace')


def _encode_path(config):
    path = os.fspath(config)
    if isinstance(path, str):
        try:
            if sys.platform == 'win32':
                path = path.encode('utf-8')
            else:
                path = os.fsencode(path)
        except UnicodeEncodeError as err:
            raise ConfigLoadError(native_message=str(err)) from err
    if not path or b'\0' in path:
        raise ConfigLoadError(native_message='invalid path %r' % config)
    return path


def _encode_text(text):
    if isinstance(text, str):
        return text.encode('utf-8')
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError('expected str or bytes, got %s' % type(text).__name__)


class OpenCC(object):
    """One OpenCC converter loaded from a configuration file.

    ``config`` is the path of a configuration file or a :class:`Preset`. A
    bare file name such as ``'t2s.json'`` is looked up in the system OpenCC
    data directory by libopencc itself.

    The native instance is released exactly once: by :meth:`close`, at the
    end of a ``with`` block, or when the object is garbage collected.
    Conversions may run from several threads at once, but the instance must
    not be closed while another thread is converting with it.
    """

    def __init__(self, config=Preset.T2S, lib=None):
        self._od = None
        self._lib = lib if lib is not None else load_library()
        self.config = config
        path = _encode_path(config)
        od = self._lib.opencc_open(path)
        if not od or od == INVALID_HANDLE:
            message = native_error(self._lib)
            log.warning('cnconv: cannot open %r: %s', config, message)
            raise ConfigLoadError(native_message=message)
        self._od = od
        log.debug('cnconv: opened %r', config)

    def __repr__(self):
        state = 'closed' if self.closed else 'open'
        return '<%s %r (%s)>' % (self.__class__.__name__, os.fspath(self.config), state)

    @property
    def closed(self):
        return self._od is None

    def _handle(self):
        od = self._od
        if od is None:
            raise HandleClosedError()
        return od

    def convert(self, text):
        """Return ``text`` converted with the loaded dictionaries.

        ``text`` may be ``str`` or UTF-8 encoded bytes. Invalid UTF-8 in the
        result is replaced with U+FFFD.
        """
        od = self._handle()
        data = _encode_text(text)
        retv_i = self._lib.opencc_convert_utf8(od, data, len(data))
        if not retv_i:
            raise ConversionError(native_message=native_error(self._lib))
        try:
            value = cast(retv_i, c_char_p).value
        finally:
            self._lib.opencc_convert_utf8_free(retv_i)
        return value.decode('utf-8', 'replace')

    def convert_to_buffer(self, text, output=None):
        """Append the conversion of ``text`` to ``output``.

        A ``bytearray`` is extended in place and returned, which avoids a
        new allocation per call when many pieces go into one buffer. A
        ``str`` is also accepted, in which case a new ``str`` is returned.
        """
        if output is None:
            output = bytearray()
        elif isinstance(output, str):
            buffer = bytearray(output.encode('utf-8'))
            return self.convert_to_buffer(text, buffer).decode('utf-8', 'replace')

        od = self._handle()
        data = _encode_text(text)
        offset = len(output)
        # Room for the converted text and its NUL terminator
        reserve = len(data) * 2 + 1
        output.extend(bytes(reserve))
        size = 0
        try:
            size = self._convert_into(od, data, output, offset, reserve)
        finally:
            del output[offset + size:]
        return output

    def _convert_into(self, od, data, output, offset, reserve):
        window = (c_char * reserve).from_buffer(output, offset)
        try:
            size = self._lib.opencc_convert_utf8_to_buffer(
                od, data, len(data), addressof(window))
        finally:
            # output cannot be resized while the window is alive
            del window
        if size == INVALID_SIZE:
            raise ConversionError(native_message=native_error(self._lib))
        if size >= reserve:
            raise ConversionError(
                native_message='%d bytes written into %d' % (size, reserve))
        return size

    def close(self):
        od, self._od = self._od, None
        if od and od != INVALID_HANDLE:
            self._lib.opencc_close(od)
            log.debug('cnconv: closed %r', self.config)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        if getattr(self, '_od', None) is not None:
            self.close()


def convert(text, config=Preset.T2S):
    with OpenCC(config) as cc:
        return cc.convert(text)
