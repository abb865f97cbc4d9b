"""Core layers: contracts, auth, config, GitHub transport, engine and ops."""
