"""Configuration layer — logging settings and setup."""
