from io import StringIO

import pytest

from pyflatini import (
    ErrorKind,
    IniError,
    IniStore,
    KeyNotFound,
    SectionNotFound,
    UnsupportedType,
    ValueFormatError,
    ValueKind,
    load,
)


@pytest.fixture
def store() -> IniStore:
    return load(StringIO(
        '[Numbers]\n'
        'answer = 42\n'
        'negative = -17\n'
        'plus = +8\n'
        'padded = 007\n'
        'word = abc\n'
        'mixed = 42abc\n'
        'empty =\n'
        'big = 2147483647\n'
        'small = -2147483648\n'
        'too_big = 2147483648\n'
        'float = 1.5\n'
        'underscored = 1_000\n'
    ))


def test_get_defaults_to_string(store) -> None:
    assert store.get('Numbers', 'answer') == '42'
    assert store.get('Numbers', 'word', str) == 'abc'


def test_get_accepts_python_types_and_kinds(store) -> None:
    assert store.get('Numbers', 'answer', int) == 42
    assert store.get('Numbers', 'answer', ValueKind.INTEGER) == 42
    assert store.get('Numbers', 'answer', ValueKind.STRING) == '42'


@pytest.mark.parametrize('key, expected', [
    ('answer', 42),
    ('negative', -17),
    ('plus', 8),
    ('padded', 7),
    ('big', 2147483647),
    ('small', -2147483648),
])
def test_getint(store, key, expected) -> None:
    assert store.getint('Numbers', key) == expected


@pytest.mark.parametrize(
    'key', ['word', 'mixed', 'empty', 'too_big', 'float', 'underscored'])
def test_getint_rejects_bad_literals(store, key) -> None:
    with pytest.raises(ValueFormatError) as excinfo:
        store.getint('Numbers', key)
    assert excinfo.value.key == key
    assert excinfo.value.kind is ErrorKind.VALUE_FORMAT_ERROR


def test_string_read_of_non_numeric_is_fine(store) -> None:
    assert store.getstr('Numbers', 'mixed') == '42abc'


def test_missing_section(store) -> None:
    with pytest.raises(SectionNotFound) as excinfo:
        store.getstr('Nope', 'answer')
    assert excinfo.value.section == 'Nope'
    assert excinfo.value.kind is ErrorKind.SECTION_NOT_FOUND


def test_missing_key(store) -> None:
    with pytest.raises(KeyNotFound) as excinfo:
        store.getint('Numbers', 'nope')
    assert (excinfo.value.section, excinfo.value.key) == ('Numbers', 'nope')
    assert excinfo.value.kind is ErrorKind.KEY_NOT_FOUND


def test_missing_section_and_key_are_distinct(store) -> None:
    with pytest.raises(SectionNotFound):
        store.getstr('Nope', 'answer')
    with pytest.raises(KeyNotFound):
        store.getstr('Numbers', 'nope')
    assert not issubclass(SectionNotFound, KeyNotFound)
    assert not issubclass(KeyNotFound, SectionNotFound)


@pytest.mark.parametrize('as_type', [float, bool, bytes, list, 'int', None])
def test_unsupported_types(store, as_type) -> None:
    with pytest.raises(UnsupportedType) as excinfo:
        store.get('Numbers', 'answer', as_type)
    assert excinfo.value.kind is ErrorKind.UNSUPPORTED_TYPE


def test_lookup_errors_come_before_type_check(store) -> None:
    with pytest.raises(SectionNotFound):
        store.get('Nope', 'answer', float)
    with pytest.raises(KeyNotFound):
        store.get('Numbers', 'nope', float)


def test_store_is_read_only_mapping(store) -> None:
    section = store['Numbers']
    assert section.name == 'Numbers'
    assert str(section) == '[Numbers]'
    assert section['answer'] == '42'
    assert len(store) == 1
    assert list(store) == ['Numbers']
    with pytest.raises(TypeError):
        store['New'] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        section['answer'] = '1'  # type: ignore[index]


def test_subscript_missing_section_raises_section_not_found(store) -> None:
    with pytest.raises(SectionNotFound):
        store['Nope']


def test_store_copies_input_dicts() -> None:
    raw = {'S': {'k': 'v'}}
    store = IniStore(raw)
    raw['S']['k'] = 'changed'
    raw['T'] = {}
    assert store.getstr('S', 'k') == 'v'
    assert 'T' not in store


def test_empty_store() -> None:
    store = IniStore()
    assert len(store) == 0
    assert store.sections() == []
    with pytest.raises(IniError):
        store.getstr('S', 'k')


def test_get_without_key_behaves_like_mapping_get(store) -> None:
    section = store.get('Numbers')
    assert section is not None
    assert section.name == 'Numbers'
    assert section['answer'] == '42'
    assert store.get('Nope') is None
