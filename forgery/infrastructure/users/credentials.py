"""
Adapter: Credential policy.

Implements the CredentialPolicy port.
Passwords are kept as plaintext and compared verbatim. This is not fit
for a real deployment; replace it with a salted-hash policy, no call
site needs to change.
"""

import hmac

from forgery.domain.users.ports import CredentialPolicy


class PlaintextCredentialPolicy(CredentialPolicy):
    """Stores passwords as given and compares them exactly."""

    def protect(self, password: str) -> str:
        return password

    def verify(self, stored: str, candidate: str) -> bool:
        return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))
