"""Infrastructure adapters (signing, hashing) consumed by the service layer."""
