"""비밀번호 해싱 유틸리티.

bcrypt hashing for email/password login. bcrypt only reads the first
72 bytes of a password, so longer passwords are rejected on hashing and
never match on verification.
"""

import bcrypt

BCRYPT_MAX_BYTES: int = 72


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시 문자열로 변환합니다.

    Raises:
        ValueError: UTF-8 인코딩 후 72바이트 초과 (Longer than 72 bytes once encoded)
    """
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    Over-long passwords and malformed stored hashes never match.
    """
    raw = plain_password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, hashed_password.encode("ascii"))
    except ValueError:
        # 잘못된 salt 형식 (Stored value is not a bcrypt hash)
        return False
