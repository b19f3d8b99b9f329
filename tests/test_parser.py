"""
Tests for reading INI lines into a document, and writing them back.
"""

import logging

from pyinifile import DEFAULT_SECTION, ORDINAL, BoolOptions, IniClass, IniParser


def test_duplicate_setting_overwrites(load):
    ini = load('[A]\nk=1\nk=2\n')
    assert ini.get_sections() == ['A']
    settings = ini.get_section_settings('A')
    assert len(settings) == 1
    assert (settings[0].name, settings[0].value) == ('k', '2')


def test_default_section(load):
    ini = load('x=1\n[B]\ny=2\n')
    assert ini.get_sections() == [DEFAULT_SECTION, 'B']
    assert ini[DEFAULT_SECTION].to_dict() == {'x': '1'}
    assert ini['B'].to_dict() == {'y': '2'}


def test_comments_and_blank_lines(load):
    ini = load('; comment\n\n[S]\n   ; c2\n\t\nn=v\n')
    assert ini.to_dict() == {'S': {'n': 'v'}}


def test_value_is_not_trimmed(load):
    ini = load('k= value \n')
    assert ini.get_setting(DEFAULT_SECTION, 'k') == ' value '
    ini = load('  spaced name   =x')
    assert ini.get_setting(DEFAULT_SECTION, 'spaced name') == 'x'


def test_value_keeps_inline_semicolon(load):
    ini = load('[S]\nk=a ; not a comment\n')
    assert ini.get_setting('S', 'k') == 'a ; not a comment'


def test_only_first_equals_splits(load):
    ini = load('[S]\nurl=http://x/?a=b\n')
    assert ini.get_setting('S', 'url') == 'http://x/?a=b'


def test_name_without_equals(load):
    ini = load('[S]\n  flag  \n')
    assert ini['S'].to_dict() == {'flag': ''}


def test_nameless_setting_ignored(load, caplog):
    with caplog.at_level(logging.DEBUG, logger='pyinifile.ini.parser'):
        ini = load('[S]\n=orphan\n   = x\n')
    assert len(ini) == 1
    assert len(ini['S']) == 0
    assert 'setting without name ignored' in caplog.text


def test_section_headers(load):
    ini = load('  [ First ]  \na=1\n[Second\nb=2\n[Third] ; note\nc=3\n')
    assert ini.get_sections() == ['First', 'Second', 'Third']
    assert ini['Second'].to_dict() == {'b': '2'}


def test_unclosed_header_takes_rest_of_line(load):
    ini = load('[S ; note\nk=v\n')
    assert ini.get_sections() == ['S ; note']


def test_empty_header_keeps_current_section(load):
    ini = load('[S]\na=1\n[]\nb=2\n[\nc=3\n')
    assert ini.get_sections() == ['S']
    assert ini['S'].to_dict() == {'a': '1', 'b': '2', 'c': '3'}


def test_empty_header_first_uses_default_section(load):
    ini = load('[ ]\nk=v\n')
    assert ini.get_sections() == [DEFAULT_SECTION]


def test_repeated_section_merges(load):
    ini = load('[S]\na=1\n[T]\nx=0\n[s]\nb=2\na=3\n')
    assert ini.get_sections() == ['S', 'T']
    assert ini['S'].to_dict() == {'a': '3', 'b': '2'}


def test_default_section_is_ordinary(load):
    ini = load('x=1\n[general]\ny=2\n')
    assert ini.get_sections() == [DEFAULT_SECTION]
    assert ini[DEFAULT_SECTION].to_dict() == {'x': '1', 'y': '2'}


def test_comparer_applies_while_parsing(load):
    ini = load('[S]\nk=1\nK=2\n[s]\nk=3\n', comparer=ORDINAL)
    assert ini.get_sections() == ['S', 's']
    assert ini['S'].to_dict() == {'k': '1', 'K': '2'}


def test_readlines_strips_line_breaks():
    ini = IniParser.readlines(['[S]\r\n', 'k=v\n', 'j=w\r'])
    assert ini['S'].to_dict() == {'k': 'v', 'j': 'w'}


def test_readlines_clears_target():
    ini = IniClass()
    ini.set_setting('Old', 'k', 'v')
    ret = IniParser.readlines(['[New]', 'a=b'], ini)
    assert ret is ini
    assert ini.get_sections() == ['New']


def test_writelines_format():
    ini = IniClass()
    ini.set_setting('A', 'k', ' spaced ')
    ini.setdefault('Empty')
    ini.set_setting('B', 'x', '1')
    ini.set_setting('B', 'y', '')
    assert IniParser.writelines(ini) == [
        '[A]', 'k= spaced ', '', '[B]', 'x=1', 'y=']


def test_writelines_skips_empty_sections():
    ini = IniClass()
    ini.setdefault('Empty')
    assert IniParser.writelines(ini) == []

    ini.set_setting('S', 'k', 'v')
    back = IniParser.readlines(IniParser.writelines(ini))
    assert 'Empty' not in back
    assert back.get_sections() == ['S']


def test_round_trip():
    opts = BoolOptions(['y'], ['n'], true_string='Y', false_string='N')
    ini = IniClass(bool_options=opts)
    ini.set_setting('Display', 'Width', 1024)
    ini.set_setting('Display', 'Scale', 1.25)
    ini.set_setting('Display', 'Fullscreen', True)
    ini.set_setting('Paths', 'Home', '  C:\\Users\\me ')
    ini.set_setting('Paths', 'Flag', '')
    ini.set_setting('display', 'Title', 'a=b ; c')

    back = IniParser.readlines(
        IniParser.writelines(ini), IniClass(bool_options=opts))
    assert back.to_dict() == ini.to_dict()
    assert back.get_sections() == ['Display', 'Paths']
    assert back.get_setting('DISPLAY', 'fullscreen', False) is True
    assert back.get_setting('Display', 'Scale', 0.0) == 1.25


def test_readlines_never_raises_on_odd_lines():
    ini = IniParser.readlines(['[A\rB]', 'k\rj=v\rw', ';x', 'k2=  '])
    assert ini.get_sections() == ['A\rB']
    assert ini['A\rB'].to_dict() == {'k\rj': 'v\rw', 'k2': '  '}
