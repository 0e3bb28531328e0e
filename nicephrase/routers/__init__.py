# nicephrase API Routers
from nicephrase.routers import health, passphrase

__all__ = ["health", "passphrase"]
