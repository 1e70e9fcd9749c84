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

__all__ = [
    'OpenCCError', 'LibraryNotFoundError', 'ConfigLoadError',
    'ConversionError', 'HandleClosedError', 'AssetNotFoundError',
    'MaterializeError', 'TargetNotADirectoryError', 'CreateError',
    'CorruptAssetError', 'WriteError',
]


class OpenCCError(Exception):
    """Base class of every error raised by cnconv.

    ``message`` is the short, stable description of the error kind. Extra
    detail (a native error text, an offending path) is kept in separate
    attributes so callers can match on the message.
    """

    message = 'OpenCC error.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class LibraryNotFoundError(OpenCCError):
    message = 'Cannot load the OpenCC library.'


class NativeError(OpenCCError):

    def __init__(self, message=None, native_message=''):
        super().__init__(message)
        self.native_message = native_message or ''

    def __str__(self):
        if self.native_message:
            return '%s (%s)' % (self.message, self.native_message)
        return self.message


class ConfigLoadError(NativeError):
    message = 'Cannot use this config file path.'


class ConversionError(NativeError):
    message = 'Cannot convert the text.'


class HandleClosedError(OpenCCError):
    message = 'The OpenCC instance is closed.'


class AssetNotFoundError(OpenCCError, KeyError):
    message = 'The dictionary is not bundled.'

    def __init__(self, name):
        super().__init__()
        self.name = name

    def __str__(self):
        return '%s (%s)' % (self.message, self.name)


class MaterializeError(OpenCCError):

    def __init__(self, message=None, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self):
        if self.path is not None:
            return '%s (%s)' % (self.message, self.path)
        return self.message


class TargetNotADirectoryError(MaterializeError):
    message = 'The path of static dictionaries needs to be a directory.'


class CreateError(MaterializeError):
    message = 'Cannot create new directories.'


class CorruptAssetError(MaterializeError):
    message = 'The dictionary is not correct.'


class WriteError(MaterializeError):
    message = 'Cannot write data to a file.'
