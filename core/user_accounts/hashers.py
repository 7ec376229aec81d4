from django.contrib.auth.hashers import BCryptPasswordHasher


class BCryptCost10PasswordHasher(BCryptPasswordHasher):
    """
    Plain bcrypt with a work factor of 10 (2^10 rounds).

    Stored as `bcrypt$$2b$10$...`, so the bcrypt part is the same string
    other bcrypt implementations produce and verify.
    """
    rounds = 10
