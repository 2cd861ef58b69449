"""HTTP and WebSocket surface for the Nim search engine."""
