# classicciphers

A small collection of classical, pen-and-paper style ciphers. They are meant for
learning and experimentation. They are **not** secure, so do not use them to protect
real data.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playfair (`classicciphers.playfair`)

The cipher uses a 5×5 square built from the key, followed by the rest of the alphabet.
`W` is folded into `V`. Only the first 25 distinct letters of the key are used.

```python
from classicciphers.playfair import playfair_encrypt, playfair_decrypt

ciphertext = playfair_encrypt("secret", "Balloon")
print(ciphertext)                               # digraphs separated by single spaces
print(playfair_decrypt("secret", ciphertext))   # "BALXLOON"
```

- `playfair_encrypt(key, text)` ignores spaces and upper-cases the text. It turns `W`
  into `V` and splits a doubled letter within a pair with `X`. A pair of two `X` is not
  split. A trailing single letter is padded with `X`. The result is the encrypted
  digraphs joined by single spaces.
- `playfair_decrypt(key, text)` ignores spaces and returns the letters with no spaces.
  The filler `X` letters are left in place.
- Only ASCII letters and spaces are accepted in the key and the text. Any other
  character raises `ValueError`. `playfair_decrypt` also raises `ValueError` if the
  ciphertext contains `W` or has an odd number of letters.

## Vigenère, bit cipher and the layered cipher (`classicciphers.bmp`)

```python
from classicciphers.bmp import (
    reverse,
    vigenere_encrypt, vigenere_decrypt,
    bit_encrypt, bit_decrypt,
    bmp_encrypt, bmp_decrypt,
)

reverse("Hello")                              # "OLLEH"
vigenere_encrypt("secret", "Hello world!")    # letters shifted, the rest kept
vigenere_decrypt("secret", vigenere_encrypt("secret", "Hello world!"))  # "HELLO WORLD!"

data = bit_encrypt("Hello World!")            # bytes
bit_decrypt(data)                             # "Hello World!"

data = bmp_encrypt("secret", "ahoj")          # reverse, Vigenère, then bit cipher
bmp_decrypt("secret", data)                   # "AHOJ"
```

- `reverse(text)` reverses a string and upper-cases its ASCII letters.
- `vigenere_encrypt(key, text)` and `vigenere_decrypt(key, text)` shift ASCII letters
  by the repeating key. The key advances only on letters. Other characters pass
  through unchanged. The output is upper case. An empty key raises `ValueError`.
- `bit_encrypt(text)` accepts `str` or bytes. A `str` is encoded as UTF-8. For each
  byte it swaps adjacent bit pairs in the high nibble and XORs the result into the low
  nibble. It returns `bytes`. `bit_decrypt(data)` undoes this and decodes the result
  as UTF-8.
- `bmp_encrypt(key, text)` reverses the text, applies Vigenère and then the bit
  cipher, and returns `bytes`. `bmp_decrypt(key, data)` undoes these steps. The
  letters come back in upper case.

## Command line

```
classicciphers [KEY] [TEXT]
```

The command encrypts `TEXT` with the Playfair cipher under `KEY` and prints the
result. It then decrypts that result and prints it too. The defaults are `Ahoj` for
the key and `Balloon` for the text. For example:

```
classicciphers secret "attack at dawn"
```

An invalid key or text makes the command print an error to standard error and exit
with status 1.

## What it does not do

The command line covers only Playfair. The Vigenère, bit and layered ciphers are
available only from Python. The package does not read or write files, and it does not
remove the `X` fillers from decrypted Playfair text.