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

PLUGIN_NAME = 'Chinese script conversion'
PLUGIN_AUTHOR = 'The cnconv authors'
PLUGIN_DESCRIPTION = ('Convert track listings between Traditional Chinese and '
                      'Simplified Chinese script, including Taiwan and Hong Kong '
                      'regional variants.<br><br>'
                      'The conversion can be done manually or with scripting. '
                      'For manual use right click on album, tracks, clusters '
                      'or files and choose the "Convert to Simplified Chinese" '
                      'or "Convert to Traditional Chinese" action.<br><br>'
                      'For scripting you can use the following tagger functions:'
                      '<ul><li><code>$convert_to_simplified_chinese(text)</code></li>'
                      '<li><code>$convert_to_traditional_chinese(text)</code></li>'
                      '<li><code>$convert_chinese(preset,text)</code>, where preset '
                      'is one of hk2s, hk2t, jp2t, s2hk, s2t, s2tw, s2twp, t2hk, '
                      't2jp, t2s, t2tw, tw2s, tw2sp or tw2t</li></ul>'
                      'Requires the cnconv package and libopencc.'
                      )
PLUGIN_VERSION = "2.0"
PLUGIN_API_VERSIONS = ["2.2", "2.3", "2.4", "2.5", "2.6"]
PLUGIN_LICENSE = "MIT"
PLUGIN_LICENSE_URL = "https://opensource.org/licenses/MIT"


import os

from cnconv import (
    OpenCC,
    OpenCCError,
    Preset,
    get_asset_store,
    materialize_presets,
)

from picard import log
from picard.album import Album
from picard.cluster import Cluster
from picard.const import USER_DIR
from picard.script import register_script_function
from picard.track import Track
from picard.ui.itemviews import (
    BaseAction,
    register_album_action,
    register_cluster_action,
    register_file_action,
    register_track_action,
)


DICTIONARY_DIR = os.path.join(USER_DIR, 'cnconv')


def prepare_dictionaries():
    """Write the bundled dictionaries to the Picard user directory.

    Returns the directory, or None if the system OpenCC data has to be
    used instead.
    """
    store = get_asset_store()
    missing = store.missing()
    if missing:
        log.debug('cnconv: %d bundled dictionaries missing, using system OpenCC data',
                  len(missing))
        return None
    try:
        written = materialize_presets(DICTIONARY_DIR, list(Preset), store=store)
    except OpenCCError as e:
        log.error('cnconv: writing dictionaries to %s failed: %s', DICTIONARY_DIR, e)
        return None
    log.debug('cnconv: %d dictionary files written to %s', len(written), DICTIONARY_DIR)
    return DICTIONARY_DIR


dictionary_dir = prepare_dictionaries()
converters = {}


def get_converter(preset):
    preset = Preset.from_name(preset)
    if preset not in converters:
        if dictionary_dir:
            config = os.path.join(dictionary_dir, preset)
        else:
            config = preset
        converters[preset] = OpenCC(config)
    return converters[preset]


class ConvertChineseAction(BaseAction):
    def __init__(self, preset):
        super().__init__()
        self.converter = get_converter(preset)

    def callback(self, objs):
        for obj in objs:
            self.convert_object_metadata(obj)

    def convert(self, text):
        try:
            return self.converter.convert(text)
        except OpenCCError as e:
            log.exception('cnconv: %r', e)
            return text

    def convert_metadata(self, m):
        for key, value in list(m.items()):
            m[key] = self.convert(value)

    def convert_object_metadata(self, obj):
        if hasattr(obj, 'metadata'):
            self.convert_metadata(obj.metadata)
            obj.update()

        if isinstance(obj, Album):
            for track in obj.tracks:
                self.convert_object_metadata(track)
        elif isinstance(obj, Cluster):
            for file in obj.files:
                self.convert_object_metadata(file)
        elif isinstance(obj, Track):
            for file in obj.linked_files:
                self.convert_object_metadata(file)


class SimplifiedChineseConverter(ConvertChineseAction):
    NAME = "Convert to Simplified Chinese"

    def __init__(self):
        super().__init__(Preset.T2S)


class TraditionalChineseConverter(ConvertChineseAction):
    NAME = "Convert to Traditional Chinese"

    def __init__(self):
        super().__init__(Preset.S2T)


simplified_converter = SimplifiedChineseConverter()
traditional_converter = TraditionalChineseConverter()


def convert_to_simplified_chinese(parser, text):
    if not text:
        return ""
    return simplified_converter.convert(text)


def convert_to_traditional_chinese(parser, text):
    if not text:
        return ""
    return traditional_converter.convert(text)


def convert_chinese(parser, preset, text):
    if not text:
        return ""
    try:
        converter = get_converter(preset)
        return converter.convert(text)
    except ValueError:
        log.warning('cnconv: unknown preset %r', preset)
    except OpenCCError as e:
        log.exception('cnconv: %s: %r', preset, e)
    return text


register_album_action(simplified_converter)
register_cluster_action(simplified_converter)
register_file_action(simplified_converter)
register_track_action(simplified_converter)

register_album_action(traditional_converter)
register_cluster_action(traditional_converter)
register_file_action(traditional_converter)
register_track_action(traditional_converter)

register_script_function(convert_to_simplified_chinese)
register_script_function(convert_to_traditional_chinese)
register_script_function(convert_chinese)
