"""Infrastructure Layer — logging setup and seed-file loading (the only file IO)."""
