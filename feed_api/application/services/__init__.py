from .auth_gate import AuthGate, USER_ID_CLAIM

__all__ = ["AuthGate", "USER_ID_CLAIM"]
