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

import pytest

from cnconv.presets import CATALOG_FILES, PRESET_FILES, Preset, required_files


def test_every_preset_has_files():
    assert set(PRESET_FILES) == set(Preset)
    for preset in Preset:
        assert preset.files
        assert preset.files[0] == preset.file_name
        assert len(set(preset.files)) == len(preset.files)


def test_catalog_covers_all_presets():
    assert len(CATALOG_FILES) == 30
    assert sum(1 for name in CATALOG_FILES if name.endswith('.json')) == 14
    for preset in Preset:
        assert set(preset.files) <= set(CATALOG_FILES)


def test_simplified_to_traditional_presets_share_dictionaries():
    for preset in (Preset.S2T, Preset.S2TW, Preset.S2TWP, Preset.S2HK):
        assert preset.files[1:3] == ('STPhrases.ocd2', 'STCharacters.ocd2')


def test_tw2sp_files():
    assert Preset.TW2SP.files == (
        'tw2sp.json',
        'TSPhrases.ocd2',
        'TWPhrasesRev.ocd2',
        'TWVariantsRevPhrases.ocd2',
        'TWVariantsRev.ocd2',
        'TSCharacters.ocd2',
    )


def test_preset_is_path_like():
    assert os.fspath(Preset.S2TWP) == 's2twp.json'
    assert os.path.join('dicts', Preset.T2S) == os.path.join('dicts', 't2s.json')


@pytest.mark.parametrize('name', ['tw2sp', 'TW2SP', 'tw2sp.json', ' Tw2Sp '])
def test_from_name(name):
    assert Preset.from_name(name) is Preset.TW2SP


def test_from_name_unknown():
    with pytest.raises(ValueError):
        Preset.from_name('t2x')


def test_required_files_deduplicates_in_order():
    assert required_files([Preset.S2T, 's2tw']) == [
        's2t.json',
        'STPhrases.ocd2',
        'STCharacters.ocd2',
        's2tw.json',
        'TWVariants.ocd2',
    ]


def test_descriptions():
    assert Preset.TW2SP.description == (
        'Traditional Chinese (Taiwan Standard) to Simplified Chinese with '
        'Mainland Chinese idiom')
