import secrets

from passlib.context import CryptContext

# pbkdf2_sha256 : pas de backend bcrypt externe requis
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def new_security_stamp() -> str:
    """Valeur aléatoire régénérée à chaque changement d'identifiants."""
    return secrets.token_hex(16)
