import pytest

from bb84lab import ConfigError, EmptyKeyError, RunConfig, Session


def test_cipher_requires_a_run():
    session = Session()
    with pytest.raises(EmptyKeyError):
        session.encrypt_text("hello")


def test_run_then_encrypt_and_decrypt():
    session = Session()
    result = session.run(RunConfig(num_photons=64, seed=10))

    assert session.result is result
    ciphertext = session.encrypt_text("meet at noon")
    assert session.decrypt_hex(ciphertext) == "meet at noon"


def test_new_run_replaces_previous_result():
    session = Session()
    first = session.run(RunConfig(num_photons=32, seed=1))
    second = session.run(RunConfig(num_photons=32, seed=2))

    assert session.result is second
    assert session.result is not first


def test_clear_drops_the_key():
    session = Session()
    session.run(RunConfig(num_photons=32, seed=1))
    session.clear()

    assert session.result is None
    with pytest.raises(EmptyKeyError):
        session.decrypt_hex("ff")


def test_invalid_config_keeps_previous_result():
    session = Session()
    result = session.run(RunConfig(num_photons=32, seed=1))

    with pytest.raises(ConfigError):
        session.run(RunConfig(num_photons=32, noise=3.0))
    assert session.result is result


def test_key_from_aborted_run_is_still_usable():
    session = Session()
    result = session.run(RunConfig(num_photons=64, seed=4, noise=1.0, qber_threshold=11.0))

    assert not result.accepted
    assert result.final_key
    assert session.decrypt_hex(session.encrypt_text("still works")) == "still works"


def test_empty_key_is_refused():
    session = Session()
    result = session.run(RunConfig(num_photons=1, seed=0, reveal_fraction=1.0))

    assert result.final_key == ()
    with pytest.raises(EmptyKeyError):
        session.encrypt_text("x")
