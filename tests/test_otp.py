import pytest

from bb84lab import EmptyKeyError, decrypt, decrypt_hex, encrypt, encrypt_text, xor_mask


def test_each_key_bit_masks_a_whole_byte():
    assert xor_mask(b"\x00\x0f\xf0", [1, 0]) == b"\xff\x0f\x0f"


def test_short_key_repeats_cyclically():
    message = bytes(range(10))
    out = encrypt(message, [1, 0, 0])
    for j, (original, masked) in enumerate(zip(message, out)):
        assert masked == (original ^ 0xFF if j % 3 == 0 else original)


@pytest.mark.parametrize("key", [[1], [0], [1, 0, 1, 1, 0], [0] * 40])
@pytest.mark.parametrize("message", [b"", b"attack at dawn", bytes(range(256))])
def test_decrypt_inverts_encrypt(message, key):
    assert decrypt(encrypt(message, key), key) == message


def test_empty_key_is_refused():
    with pytest.raises(EmptyKeyError):
        encrypt(b"hello", [])
    with pytest.raises(EmptyKeyError):
        decrypt_hex("ff", ())


def test_text_boundary_uses_spaced_hex():
    assert encrypt_text("Hi", [1]) == "b7 96"
    assert decrypt_hex("b7 96", [1]) == "Hi"


def test_text_round_trip_with_non_ascii():
    key = [1, 1, 0, 1]
    text = "héllo ✓ quantum"
    assert decrypt_hex(encrypt_text(text, key), key) == text


def test_invalid_hex_is_rejected():
    with pytest.raises(ValueError):
        decrypt_hex("zz 01", [1])
