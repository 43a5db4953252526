import secrets

# Same alphabet and length range as the shortid ids already stored in the database.
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
ID_LENGTH = 10
MIN_LENGTH = 7
MAX_LENGTH = 14


def generate() -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(ID_LENGTH))


def is_valid(value: str) -> bool:
    if not isinstance(value, str) or not MIN_LENGTH <= len(value) <= MAX_LENGTH:
        return False
    return all(ch in ALPHABET for ch in value)
