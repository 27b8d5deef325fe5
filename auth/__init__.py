"""
auth — User registration and authentication.

Provides:
  • bcrypt password hashing & verification
  • ``UserRepository`` over the injected DB session
  • ``register`` / ``authenticate`` flows returning sanitized users
  • Signed session tokens, set as an HttpOnly cookie
  • Sign-up / sign-in / sign-out / me API routes
"""
