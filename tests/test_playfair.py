import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicciphers.playfair import playfair_decrypt, playfair_encrypt

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVXYZ"
KEYS = st.text(alphabet=LETTERS + LETTERS.lower() + " ", max_size=30)
DISTINCT_PAIRS = st.tuples(st.sampled_from(LETTERS), st.sampled_from(LETTERS)).filter(
    lambda pair: pair[0] != pair[1]
)


def test_program_example_round_trip():
    encrypted = playfair_encrypt("Ahoj", "Balloon")
    assert playfair_decrypt("Ahoj", encrypted) == "BALXLOON"


def test_doubled_letter_is_split_and_padded():
    assert playfair_decrypt("Ahoj", playfair_encrypt("Ahoj", "AA")) == "AXAX"


def test_double_x_is_kept_as_a_pair():
    assert playfair_decrypt("key", playfair_encrypt("key", "XX")) == "XX"


def test_empty_text():
    assert playfair_encrypt("key", "") == ""
    assert playfair_decrypt("key", "") == ""


@given(key=KEYS, pairs=st.lists(DISTINCT_PAIRS, max_size=20))
def test_round_trip_of_distinct_pairs(key, pairs):
    text = "".join(a + b for a, b in pairs)
    assert playfair_decrypt(key, playfair_encrypt(key, text)) == text


@given(key=KEYS, pairs=st.lists(DISTINCT_PAIRS, min_size=1, max_size=20))
def test_output_is_space_separated_digraphs(key, pairs):
    text = "".join(a + b for a, b in pairs)
    groups = playfair_encrypt(key, text).split(" ")
    assert len(groups) == len(pairs)
    assert all(len(group) == 2 and "W" not in group for group in groups)


@given(key=KEYS, pairs=st.lists(DISTINCT_PAIRS, max_size=20))
def test_decrypt_ignores_spaces(key, pairs):
    text = "".join(a + b for a, b in pairs)
    encrypted = playfair_encrypt(key, text)
    assert playfair_decrypt(key, encrypted.replace(" ", "")) == playfair_decrypt(key, encrypted)


def test_case_and_spaces_in_text_do_not_matter():
    assert playfair_encrypt("Ahoj", "b a l l o o n") == playfair_encrypt("Ahoj", "BALLOON")


def test_w_is_folded_into_v():
    assert playfair_encrypt("key", "WORD") == playfair_encrypt("key", "VORD")
    assert playfair_encrypt("wave", "text") == playfair_encrypt("vave", "text")


def test_spaces_in_key_are_ignored():
    assert playfair_encrypt("A h o j", "Balloon") == playfair_encrypt("Ahoj", "Balloon")


def test_key_characters_after_full_square_are_not_checked():
    assert playfair_encrypt(LETTERS + "1", "hello") == playfair_encrypt(LETTERS, "hello")


@pytest.mark.parametrize("key", ["key1", "k-y", "ключ"])
def test_invalid_key_rejected(key):
    with pytest.raises(ValueError):
        playfair_encrypt(key, "hello")


@pytest.mark.parametrize("text", ["hello!", "abc1", "a\tb"])
def test_invalid_plaintext_rejected(text):
    with pytest.raises(ValueError):
        playfair_encrypt("key", text)


@pytest.mark.parametrize("text", ["ABW", "ABC", "AB1C"])
def test_invalid_ciphertext_rejected(text):
    with pytest.raises(ValueError):
        playfair_decrypt("key", text)