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

import zipfile

import pytest

from cnconv import assets
from cnconv.assets import AssetStore, get_asset_store
from cnconv.errors import AssetNotFoundError
from cnconv.presets import CATALOG_FILES


def test_store_lookup():
    store = AssetStore({'t2s.json': b'{}'})
    assert store['t2s.json'] == b'{}'
    assert 't2s.json' in store
    assert 's2t.json' not in store
    assert len(store) == 1


def test_missing_asset():
    store = AssetStore({})
    with pytest.raises(AssetNotFoundError) as excinfo:
        store['TSPhrases.ocd2']
    assert isinstance(excinfo.value, KeyError)
    assert 'TSPhrases.ocd2' in str(excinfo.value)
    assert store.missing(['t2s.json', 'TSPhrases.ocd2']) == ['t2s.json', 'TSPhrases.ocd2']
    assert not store.is_complete()


def test_from_directory(tmp_path):
    (tmp_path / 't2s.json').write_bytes(b'config')
    (tmp_path / 'TSPhrases.ocd2').write_bytes(b'\x00\x01phrases')
    (tmp_path / 'unrelated.txt').write_bytes(b'ignored')
    (tmp_path / 'TSCharacters.ocd2').mkdir()
    store = AssetStore.from_directory(str(tmp_path))
    assert dict(store) == {
        't2s.json': b'config',
        'TSPhrases.ocd2': b'\x00\x01phrases',
    }
    assert 'TSCharacters.ocd2' in store.missing()


def test_from_zip(tmp_path):
    archive_path = tmp_path / 'bundle.zip'
    with zipfile.ZipFile(str(archive_path), 'w') as archive:
        archive.writestr('cnconv/dictionaries/t2s.json', b'config')
        archive.writestr('cnconv/dictionaries/TSCharacters.ocd2', b'chars')
        archive.writestr('cnconv/other/s2t.json', b'elsewhere')
    store = AssetStore.from_zip(str(archive_path), 'cnconv/dictionaries')
    assert dict(store) == {'t2s.json': b'config', 'TSCharacters.ocd2': b'chars'}


def test_complete_store(store):
    assert store.is_complete()
    assert sorted(store) == list(CATALOG_FILES)


def test_bundled_store_location_override(tmp_path, monkeypatch):
    (tmp_path / 'hk2s.json').write_bytes(b'hk')
    monkeypatch.setenv(assets.ASSET_DIR_ENV, str(tmp_path))
    get_asset_store.cache_clear()
    try:
        store = get_asset_store()
        assert store['hk2s.json'] == b'hk'
        assert get_asset_store() is store
    finally:
        get_asset_store.cache_clear()
