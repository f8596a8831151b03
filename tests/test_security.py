from task_api.security import BCRYPT_ROUNDS, PasswordHasher


def test_hash_is_not_plaintext():
    hasher = PasswordHasher()
    digest = hasher.hash("s3cret")
    assert digest != "s3cret"
    assert digest.startswith("$2")


def test_same_password_hashes_differently_and_both_verify():
    hasher = PasswordHasher()
    first = hasher.hash("s3cret")
    second = hasher.hash("s3cret")
    assert first != second
    assert hasher.verify("s3cret", first)
    assert hasher.verify("s3cret", second)


def test_wrong_password_does_not_verify():
    hasher = PasswordHasher()
    assert not hasher.verify("guess", hasher.hash("s3cret"))


def test_malformed_digest_does_not_verify():
    assert PasswordHasher().verify("s3cret", "not-a-bcrypt-digest") is False


def test_work_factor_is_embedded_in_digest():
    digest = PasswordHasher().hash("s3cret")
    assert digest.split("$")[2] == f"{BCRYPT_ROUNDS:02d}"


def test_passwords_longer_than_bcrypt_limit_are_accepted():
    hasher = PasswordHasher()
    long_password = "x" * 100
    assert hasher.verify(long_password, hasher.hash(long_password))
