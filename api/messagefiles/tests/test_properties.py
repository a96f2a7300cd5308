import pytest

from messagefiles.filesystem import LocalFileSystem
from messagefiles.properties import PropertiesSyntaxError, load_properties, parse_properties, read_properties_text


def test_separators_and_whitespace():
    props = parse_properties('a=1\nb: 2\nc 3\nd\t=\t4\n  e = five  \n')
    assert props == {'a': '1', 'b': '2', 'c': '3', 'd': '4', 'e': 'five  '}


def test_comments_and_blank_lines_are_skipped():
    text = '# comment\n! another\n\n   \n  # indented comment\nkey=value\n'
    assert parse_properties(text) == {'key': 'value'}


def test_hash_inside_value_is_kept():
    assert parse_properties('color=#ff0000\n') == {'color': '#ff0000'}


def test_line_continuation():
    text = 'long=first, \\\n     second, \\\n     third\nnext=1\n'
    assert parse_properties(text) == {'long': 'first, second, third', 'next': '1'}


def test_even_backslashes_do_not_continue():
    props = parse_properties('path=C:\\\\\nother=x\n')
    assert props == {'path': 'C:\\', 'other': 'x'}


def test_comment_line_ending_in_backslash_does_not_continue():
    assert parse_properties('# note \\\nkey=value\n') == {'key': 'value'}


def test_escapes():
    props = parse_properties('tab=a\\tb\nnl=a\\nb\nuni=caf\\u00e9\nemoji=\\uD83D\\uDE00\nother=\\q\n')
    assert props['tab'] == 'a\tb'
    assert props['nl'] == 'a\nb'
    assert props['uni'] == 'café'
    assert props['emoji'] == '\U0001F600'
    assert props['other'] == 'q'


def test_escaped_separator_in_key():
    props = parse_properties('a\\=b=c\nkey\\ with\\ spaces=v\n')
    assert props == {'a=b': 'c', 'key with spaces': 'v'}


def test_double_equals_leaves_equals_in_value():
    assert parse_properties('key==value\n') == {'key': '=value'}


def test_key_without_value():
    assert parse_properties('empty\nempty2=\n') == {'empty': '', 'empty2': ''}


def test_crlf_and_cr_line_endings():
    assert parse_properties('a=1\r\nb=2\rc=3') == {'a': '1', 'b': '2', 'c': '3'}


def test_last_duplicate_wins():
    assert parse_properties('k=1\nk=2\n') == {'k': '2'}


def test_malformed_unicode_escape():
    with pytest.raises(PropertiesSyntaxError) as excinfo:
        parse_properties('ok=1\nbad=\\u00zz\n')
    assert excinfo.value.lineno == 2
    assert isinstance(excinfo.value, ValueError)


def test_load_properties_reads_utf8(tmp_path):
    path = tmp_path / 'nav.properties'
    path.write_bytes('\ufeffhome=Startseite\ngreeting=Grüß Gott\n'.encode('utf-8'))
    assert load_properties(path) == {'home': 'Startseite', 'greeting': 'Grüß Gott'}


def test_filesystem_reads_through_the_same_decoder(tmp_path):
    path = tmp_path / 'nav.properties'
    path.write_bytes('\ufeffhome=Accueil\n'.encode('utf-8'))
    assert LocalFileSystem(tmp_path).read_text(path) == read_properties_text(path) == 'home=Accueil\n'
