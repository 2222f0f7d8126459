"""
SafePass Generators
====================

Secure random password generation backed by the OS CSPRNG.
"""

from safepass.generators.password import PasswordGenerator, generate_secure_random_password

__all__ = ["PasswordGenerator", "generate_secure_random_password"]
