"""Infrastructure adapters: crypto, auth, persistence, monitoring."""
