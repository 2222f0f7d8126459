import string

import pytest

from safepass import generate_secure_random_password
from safepass.core.errors import CryptographicUnavailableError, InvalidConfigurationError
from safepass.core.models import GeneratorOptions
from safepass.generators.password import (
    AMBIGUOUS_CHARACTERS,
    SIMILAR_CHARACTERS,
    SYMBOLS,
    PasswordGenerator,
)


def counting_bytes(count: int) -> bytes:
    return bytes(range(count))


def test_default_length_and_alphabet():
    password = generate_secure_random_password()
    assert len(password) == 16
    allowed = set(string.ascii_letters + string.digits + SYMBOLS)
    assert set(password) <= allowed


def test_length_override():
    assert len(generate_secure_random_password(length=64)) == 64


def test_options_and_overrides_merge():
    options = GeneratorOptions(length=30, include_symbols=False)
    password = generate_secure_random_password(options, include_uppercase=False)
    assert len(password) == 30
    assert set(password) <= set(string.ascii_lowercase + string.digits)


def test_numbers_only():
    password = generate_secure_random_password(
        length=50,
        include_uppercase=False,
        include_lowercase=False,
        include_symbols=False,
    )
    assert password.isdigit()


def test_exclusions():
    password = generate_secure_random_password(
        length=200,
        exclude_similar_characters=True,
        exclude_ambiguous_characters=True,
    )
    assert not set(password) & set(SIMILAR_CHARACTERS)
    assert not set(password) & set(AMBIGUOUS_CHARACTERS)


def test_build_pool():
    pool = PasswordGenerator.build_pool(GeneratorOptions(
        include_uppercase=False,
        include_symbols=False,
        exclude_similar_characters=True,
    ))
    assert pool == "abcdefghjkmnpqrstuvwxyz23456789"


def test_injected_random_source_is_deterministic():
    generator = PasswordGenerator(counting_bytes)
    options = GeneratorOptions(
        length=5, include_uppercase=False, include_numbers=False, include_symbols=False
    )
    assert generator.generate(options) == "abcde"


def test_biased_bytes_are_rejected():
    calls = []

    def source(count: int) -> bytes:
        calls.append(count)
        # pool of 10 accepts bytes < 250 only
        return bytes([255] * count) if len(calls) == 1 else counting_bytes(count)

    generator = PasswordGenerator(source)
    options = GeneratorOptions(
        length=4, include_uppercase=False, include_lowercase=False, include_symbols=False
    )
    assert generator.generate(options) == "0123"
    assert len(calls) == 2


def test_empty_pool_raises():
    with pytest.raises(InvalidConfigurationError):
        generate_secure_random_password(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )


@pytest.mark.parametrize("length", [0, -5])
def test_non_positive_length_raises(length):
    with pytest.raises(InvalidConfigurationError):
        generate_secure_random_password(length=length)


def test_unknown_option_raises():
    with pytest.raises(InvalidConfigurationError):
        generate_secure_random_password(include_emoji=True)


def test_failing_random_source():
    def broken(count: int) -> bytes:
        raise OSError("no entropy")

    with pytest.raises(CryptographicUnavailableError):
        PasswordGenerator(broken).generate()


def test_short_random_source():
    with pytest.raises(CryptographicUnavailableError):
        PasswordGenerator(lambda count: b"").generate()


def test_passwords_differ():
    assert generate_secure_random_password(length=32) != generate_secure_random_password(length=32)
