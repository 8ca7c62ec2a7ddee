"""Configuration layer — envscope's own settings and logging setup."""
