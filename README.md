# filecipher

Encrypt and decrypt files with a password. The package carries its own
AES implementation (128, 192 and 256-bit keys; ECB, CBC, CFB and OFB
modes; zero, PKCS#7 and ISO/IEC 7816-4 style padding) and needs nothing
beyond the Python standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `filecipher` command with two
subcommands:

```
filecipher encrypt FILE [-p PASSWORD]
filecipher decrypt FILE [-p PASSWORD]
```

When `-p`/`--password` is left out, the password is asked for at the
terminal without being echoed. `filecipher --help` lists the options.

- `encrypt` writes `FILE.enc` next to `FILE`.
- `decrypt` writes `FILE` without its `.enc` suffix when the name ends in
  `.enc`; any other name gets `.dec` appended.

On success the command prints a confirmation and the path it saved to,
and exits with status 0. On failure (unreadable input, an empty
password, a file that is not in the format below, an output that cannot
be written) it prints `Error: ...` to standard error and exits with
status 1.

## Encrypted file format

An encrypted file is:

| bytes      | content                             |
|------------|-------------------------------------|
| 0 – 15     | random salt                         |
| 16 – end   | AES-256-CBC ciphertext, ISO padded  |

Key and IV come from PBKDF2-HMAC-SHA256 over the UTF-8 password and the
salt, 10 000 iterations, 48 bytes of output: the first 32 bytes are the
key and the last 16 the IV. A file shorter than 16 bytes, or whose
ciphertext is not a whole number of 16-byte blocks, is rejected as not
being in this format.

The ISO padding appends `0x80` followed by zero bytes, and appends
nothing when the data already fills whole blocks.

## Using it from Python

Whole files, with the same naming rules as the command:

```python
from filecipher.filecrypto import encrypt_file, decrypt_file

password = "password"
encrypted = encrypt_file("notes.txt", password)   # writes notes.txt.enc
restored = decrypt_file(encrypted, password)      # writes notes.txt
```

`encrypted_name` and `decrypted_name` return the paths these functions
write to without touching any file.

With explicit output paths:

```python
from filecipher.filecrypto import AesFileCrypto, FileCryptoError

password = "password"
crypto = AesFileCrypto(password)
crypto.encrypt_file("notes.txt", "notes.bin")
try:
    crypto.decrypt_file("notes.bin", "notes.out")
except FileCryptoError as exc:
    print(f"decryption failed: {exc}")
```

The AES layer on its own:

```python
from filecipher.aes import AESEncryption, Mode, crypt, decrypt
from filecipher.cipher import KeySize
from filecipher.padding import Padding

key = bytes(32)
iv = bytes(16)

aes = AESEncryption(KeySize.AES_256, Mode.CBC, Padding.PKCS7)
ciphertext = aes.encode(b"attack at dawn", key, iv)
plaintext = aes.remove_padding(aes.decode(ciphertext, key, iv))
```

`crypt` and `decrypt` do the same in a single call. Decoding returns the
data with its padding still in place; `remove_padding` (or
`filecipher.padding.remove_padding`) strips it, and `filecipher.padding.pad`
adds it. A key of the wrong length, a missing or wrong-sized IV in a
mode other than ECB, or ciphertext that is not a whole number of blocks
raises `ValueError`.

Single blocks and the key schedule are available from
`filecipher.cipher`:

```python
from filecipher.cipher import BlockCipher, KeySize, expand_key

block_cipher = BlockCipher(KeySize.AES_128, bytes(16))
block = block_cipher.encrypt_block(bytes(16))
assert block_cipher.decrypt_block(block) == bytes(16)
schedule = expand_key(KeySize.AES_128, bytes(16))   # 176 bytes
```

Key derivation:

```python
from filecipher.kdf import generate_salt, pbkdf2

salt = generate_salt(16)
derived = pbkdf2(b"password", salt, 10000, 48)
```

## What it does not do

- There is no graphical interface; the command line and the Python API
  are the only front ends.
- Encrypted files carry no authentication tag or password check. Decrypting
  with the wrong password does not fail: it writes unreadable output.

## A note on speed

The block cipher is written in plain Python. It is meant for ordinary
documents, not for multi-gigabyte files.