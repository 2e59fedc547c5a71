from passlib.context import CryptContext

from settings import BCRYPT_ROUNDS


def make_password_context(rounds: int = BCRYPT_ROUNDS) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


# Password encryption setup
pwd_context = make_password_context()


def get_password_context() -> CryptContext:
    """Dependency that provides the password hashing context."""
    return pwd_context
