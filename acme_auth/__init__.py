"""GitHub OAuth sign-in service with signed session tokens."""
