from .password_views import forgot_password, verify_code, reset_password

__all__ = ["forgot_password", "verify_code", "reset_password"]
