import pytest

from gitcfg_core.config.model import ConfigDocument
from gitcfg_core.config.parser import parse
from gitcfg_core.config.serializer import (
    format_section_header,
    format_value,
    render,
)


def test_render_canonical():
    doc = parse(
        '[Core]\nbare\n  Name=some value\n[remote "origin"]\nurl=https://x.org/r.git\n'
    )
    assert render(doc) == (
        '[core]\n'
        '\tbare = true\n'
        '\tName = "some value"\n'
        '[remote "origin"]\n'
        '\turl = https://x.org/r.git\n'
    )


def test_render_merged_headers():
    doc = parse('[a]\n\tx = 1\n[b]\n\ty = 2\n[A]\n\tz = 3\n\tx = 4\n')
    assert render(doc) == (
        '[a]\n\tx = 1\n\tx = 4\n\tz = 3\n[b]\n\ty = 2\n'
    )


def test_render_empty_groups():
    doc = parse('[empty]\n[subonly "s"]\n\tv = 1\n[emptysub "e"]\n')
    assert render(doc) == (
        '[empty]\n[subonly "s"]\n\tv = 1\n[emptysub "e"]\n'
    )
    assert render(ConfigDocument()) == ''


@pytest.mark.parametrize(
    ('value', 'formatted'),
    [
        ('plain', 'plain'),
        ('', '""'),
        (' lead', '" lead"'),
        ('trail ', '"trail "'),
        ('in side', '"in side"'),
        ('hash#', '"hash#"'),
        ('semi;', '"semi;"'),
        ('q"uote', '"q\\"uote"'),
        ('back\\slash', 'back\\\\slash'),
        ('new\nline', '"new\\nline"'),
        ('tab\there', '"tab\\there"'),
    ],
)
def test_format_value(value, formatted):
    assert format_value(value) == formatted


def test_format_section_header():
    assert format_section_header('core', None) == '[core]'
    assert format_section_header('x', '') == '[x ""]'
    assert format_section_header('x', 'a"b\\c') == '[x "a\\"b\\\\c"]'


@pytest.mark.parametrize(
    'text',
    [
        '',
        '[core]\n\tbare = true\n',
        '[x]\n a=1\n b = two words \n a=2\n',
        '[x ""]\n\tv = 1\n[x]\n\tv = 2\n[x "Y"]\n[x "y"]\n\tv = 3\n',
        '[s "a \\"b\\" \\\\c"]\n\tv = "  # ; \\" \\\\ \\t \\n "\n',
        '[s]\n\tv = C:\\path\\to\\file\n\tw = line \\\ncontinued\n',
        '[branch.main]\n\tremote = origin\n\tempty =\n',
    ],
)
def test_roundtrip(text, cfgtext):
    for t in (text, cfgtext):
        doc = parse(t)
        assert parse(render(doc)) == doc


def test_render_default_subsection_first():
    doc = parse('[http "a"]\n\tx = 1\n[http]\n\ty = 2\n')
    # the default subsection always leads its section
    assert render(doc) == '[http]\n\ty = 2\n[http "a"]\n\tx = 1\n'
    assert parse(render(doc)) == doc
