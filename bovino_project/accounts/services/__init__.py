from .verification import (
    VerificationCodeStore,
    VerificationError,
    CodeNotFound,
    CodeExpired,
    CodeMismatch,
    generate_code,
    get_verification_store,
)

__all__ = [
    "VerificationCodeStore",
    "VerificationError",
    "CodeNotFound",
    "CodeExpired",
    "CodeMismatch",
    "generate_code",
    "get_verification_store",
]
