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

from enum import Enum

__all__ = ['Preset', 'PRESET_FILES', 'CATALOG_FILES', 'required_files']


class Preset(Enum):
    """The conversion presets packaged with OpenCC.

    The value of each member is the file name of its configuration. Members
    are path-like, so ``OpenCC(Preset.T2S)`` opens the system configuration
    and ``os.path.join(directory, Preset.T2S)`` points at a materialized one.
    """

    HK2S = 'hk2s.json'
    HK2T = 'hk2t.json'
    JP2T = 'jp2t.json'
    S2HK = 's2hk.json'
    S2T = 's2t.json'
    S2TW = 's2tw.json'
    S2TWP = 's2twp.json'
    T2HK = 't2hk.json'
    T2JP = 't2jp.json'
    T2S = 't2s.json'
    T2TW = 't2tw.json'
    TW2S = 'tw2s.json'
    TW2SP = 'tw2sp.json'
    TW2T = 'tw2t.json'

    @property
    def file_name(self):
        return self.value

    @property
    def description(self):
        return DESCRIPTIONS[self]

    @property
    def files(self):
        """Configuration file followed by the dictionaries it chains."""
        return PRESET_FILES[self]

    def __fspath__(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """Look up a preset by member name or config file name.

        ``'tw2sp'``, ``'TW2SP'`` and ``'tw2sp.json'`` all give
        ``Preset.TW2SP``. Raises ``ValueError`` for anything else.
        """
        if isinstance(name, cls):
            return name
        key = name.strip().lower()
        if key.endswith('.json'):
            key = key[:-len('.json')]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError('Unknown OpenCC preset: %r' % name) from None


DESCRIPTIONS = {
    Preset.HK2S: 'Traditional Chinese (Hong Kong Standard) to Simplified Chinese',
    Preset.HK2T: 'Traditional Chinese (Hong Kong Standard) to Traditional Chinese',
    Preset.JP2T: 'New Japanese Kanji (Shinjitai) to Traditional Chinese Characters (Kyūjitai)',
    Preset.S2HK: 'Simplified Chinese to Traditional Chinese (Hong Kong Standard)',
    Preset.S2T: 'Simplified Chinese to Traditional Chinese',
    Preset.S2TW: 'Simplified Chinese to Traditional Chinese (Taiwan Standard)',
    Preset.S2TWP: 'Simplified Chinese to Traditional Chinese (Taiwan Standard) with Taiwanese idiom',
    Preset.T2HK: 'Traditional Chinese (OpenCC Standard) to Hong Kong Standard',
    Preset.T2JP: 'Traditional Chinese Characters (Kyūjitai) to New Japanese Kanji (Shinjitai)',
    Preset.T2S: 'Traditional Chinese to Simplified Chinese',
    Preset.T2TW: 'Traditional Chinese (OpenCC Standard) to Taiwan Standard',
    Preset.TW2S: 'Traditional Chinese (Taiwan Standard) to Simplified Chinese',
    Preset.TW2SP: 'Traditional Chinese (Taiwan Standard) to Simplified Chinese with Mainland Chinese idiom',
    Preset.TW2T: 'Traditional Chinese (Taiwan Standard) to Traditional Chinese',
}

# Taken from the preset configurations shipped with OpenCC 1.1.x. Each list
# must match what the config file actually chains, otherwise the engine
# loads fine but converts with a different profile.
PRESET_FILES = {
    Preset.HK2S: (
        'hk2s.json',
        'TSPhrases.ocd2',
        'HKVariantsRevPhrases.ocd2',
        'HKVariantsRev.ocd2',
        'TSCharacters.ocd2',
    ),
    Preset.HK2T: (
        'hk2t.json',
        'HKVariantsRevPhrases.ocd2',
        'HKVariantsRev.ocd2',
    ),
    Preset.JP2T: (
        'jp2t.json',
        'JPShinjitaiPhrases.ocd2',
        'JPShinjitaiCharacters.ocd2',
        'JPVariantsRev.ocd2',
    ),
    Preset.S2HK: (
        's2hk.json',
        'STPhrases.ocd2',
        'STCharacters.ocd2',
        'HKVariants.ocd2',
    ),
    Preset.S2T: (
        's2t.json',
        'STPhrases.ocd2',
        'STCharacters.ocd2',
    ),
    Preset.S2TW: (
        's2tw.json',
        'STPhrases.ocd2',
        'STCharacters.ocd2',
        'TWVariants.ocd2',
    ),
    Preset.S2TWP: (
        's2twp.json',
        'STPhrases.ocd2',
        'STCharacters.ocd2',
        'TWPhrases.ocd2',
        'TWVariants.ocd2',
    ),
    Preset.T2HK: (
        't2hk.json',
        'HKVariants.ocd2',
    ),
    Preset.T2JP: (
        't2jp.json',
        'JPVariants.ocd2',
    ),
    Preset.T2S: (
        't2s.json',
        'TSPhrases.ocd2',
        'TSCharacters.ocd2',
    ),
    Preset.T2TW: (
        't2tw.json',
        'TWVariants.ocd2',
    ),
    Preset.TW2S: (
        'tw2s.json',
        'TSPhrases.ocd2',
        'TWVariantsRevPhrases.ocd2',
        'TWVariantsRev.ocd2',
        'TSCharacters.ocd2',
    ),
    Preset.TW2SP: (
        'tw2sp.json',
        'TSPhrases.ocd2',
        'TWPhrasesRev.ocd2',
        'TWVariantsRevPhrases.ocd2',
        'TWVariantsRev.ocd2',
        'TSCharacters.ocd2',
    ),
    Preset.TW2T: (
        'tw2t.json',
        'TWVariantsRevPhrases.ocd2',
        'TWVariantsRev.ocd2',
    ),
}


def required_files(presets):
    """Files needed by all of ``presets``, in catalog order, without repeats."""
    seen = set()
    files = []
    for preset in presets:
        for name in PRESET_FILES[Preset.from_name(preset)]:
            if name not in seen:
                seen.add(name)
                files.append(name)
    return files


# Every file referenced by any preset.
CATALOG_FILES = tuple(sorted(required_files(Preset)))
