import pydantic
import pytest

from borsh_codec import DEFAULT_SETTINGS, CodecSettings, load_settings
from borsh_codec.utils.yaml import dict_from_extended_yaml


def test_defaults():
    assert DEFAULT_SETTINGS.alloc_ceiling_bytes == 4096
    assert DEFAULT_SETTINGS.max_enum_variants == 256
    assert DEFAULT_SETTINGS.default_encode_max_bytes is None
    assert DEFAULT_SETTINGS.max_depth == 64


def test_settings_are_frozen():
    with pytest.raises(pydantic.ValidationError):
        DEFAULT_SETTINGS.alloc_ceiling_bytes = 1  # type: ignore[misc]


@pytest.mark.parametrize('kwargs', [
    dict(alloc_ceiling_bytes=0),
    dict(max_enum_variants=257),
    dict(max_enum_variants=0),
    dict(default_encode_max_bytes=-1),
    dict(max_depth=0),
    dict(unknown_option=True),
])
def test_invalid_settings(kwargs):
    with pytest.raises(pydantic.ValidationError):
        CodecSettings(**kwargs)


def test_load_settings(tmp_path):
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('alloc_ceiling_bytes: 1024\nmax_enum_variants: 16\n')
    settings = load_settings(filepath)
    assert settings == CodecSettings(alloc_ceiling_bytes=1024, max_enum_variants=16)


def test_load_empty_settings(tmp_path):
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('')
    assert load_settings(filepath) == DEFAULT_SETTINGS


def test_load_extended_settings(tmp_path):
    (tmp_path / 'base.yml').write_text('alloc_ceiling_bytes: 1024\nmax_enum_variants: 16\n')
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('extends: base.yml\nmax_enum_variants: 8\n')
    settings = load_settings(filepath)
    assert settings.alloc_ceiling_bytes == 1024
    assert settings.max_enum_variants == 8


def test_recursive_extension(tmp_path):
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('extends: codec.yml\n')
    with pytest.raises(ValueError, match='recursive'):
        dict_from_extended_yaml(filepath=filepath)


def test_missing_file(tmp_path):
    with pytest.raises(ValueError):
        load_settings(tmp_path / 'missing.yml')


def test_not_a_dict(tmp_path):
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        load_settings(filepath)


def test_invalid_value_in_file(tmp_path):
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('max_enum_variants: 1000\n')
    with pytest.raises(pydantic.ValidationError):
        load_settings(filepath)
