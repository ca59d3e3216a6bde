import pytest

from gitcfg_core.config import (
    ConfigItem,
    ConfigStore,
    ConfigStoreSource,
)
from gitcfg_core.config.source import (
    _compose_key,
    _normalize_key,
    _split_key,
)


def test_store_source(cfgstore):
    src = ConfigStoreSource(cfgstore)
    src.load()
    assert 'core.bare' in src
    assert 'CORE.Bare' in src
    assert 'core.nothere' not in src
    assert 'nodots' not in src
    assert src['core.bare'].value is True
    assert src['core.repositoryformatversion'].value == 0
    assert src['core.filemode'].value == 'false'
    assert src['core.filemode'].pristine_value == 'false'
    assert src['remote.origin.url'].value == 'https://example.com/repo.git'
    # subsections are case-sensitive
    assert src['wiki.Main.page-file-dir'].value == 'pages'
    assert src['wiki.main.page-file-dir'].value == 'other'
    assert src['WIKI.Main.Allow-Uploads'].value is True
    with pytest.raises(KeyError):
        src['wiki.MAIN.page-file-dir']
    assert str(src) == 'ConfigStoreSource[standard.cfg]'


def test_store_source_multivalue():
    store = ConfigStore('mv', '[x]\n a=1\n a=2\n[x ""]\n\ta = 3\n')
    src = ConfigStoreSource(store)
    # loads the store as needed
    src.load()
    assert store.is_loaded
    assert src['x.a'].value == 2
    assert src.getall('x.a') == (ConfigItem('1'), ConfigItem('2'))
    # empty-named subsection
    assert src['x..a'].value == 3


def test_store_source_set(cfgstore):
    src = ConfigStoreSource(cfgstore)
    src.load()
    src['Remote.origin.URL'] = ConfigItem('https://mirror.example.com/repo.git')
    src['site.Title'] = ConfigItem('Wiki')
    src['remote.upstream.prune'] = ConfigItem(True)
    # immediate availability
    assert src['remote.origin.url'].value == 'https://mirror.example.com/repo.git'
    # written through to the store, replacing the value
    assert cfgstore.raw_values('remote', 'origin', 'url') == [
        'https://mirror.example.com/repo.git'
    ]
    assert cfgstore['site'] == {'Title': 'Wiki'}
    assert cfgstore['remote upstream'] == {'prune': True}
    # a fresh source sees the same
    src2 = ConfigStoreSource(cfgstore)
    src2.load()
    assert src2['site.title'].value == 'Wiki'


def test_store_source_unsupported(cfgstore):
    src = ConfigStoreSource(cfgstore)
    src.load()
    with pytest.raises(NotImplementedError):
        src.add('core.bare', ConfigItem('false'))
    with pytest.raises(NotImplementedError):
        del src['core.bare']
    assert cfgstore.raw_values('core', None, 'bare') == ['true']


def test_keys():
    assert _compose_key('core', None, 'Bare') == 'core.bare'
    assert _compose_key('remote', 'Origin', 'url') == 'remote.Origin.url'
    assert _compose_key('x', '', 'a') == 'x..a'
    assert _normalize_key('Remote.Origin.URL') == 'remote.Origin.url'
    assert _normalize_key('Sec.Name') == 'sec.name'
    assert _normalize_key('Sec.with.Dots.Name') == 'sec.with.Dots.name'
    assert _normalize_key('nodots') == 'nodots'
    assert _split_key('core.bare') == ('core', None, 'bare')
    assert _split_key('x..a') == ('x', '', 'a')
    assert _split_key('s.with.dots.n') == ('s', 'with.dots', 'n')
    with pytest.raises(ValueError, match='not a valid configuration key'):
        _split_key('nodots')
