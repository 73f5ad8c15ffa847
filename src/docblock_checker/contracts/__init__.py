"""JSON schema contracts for report artifacts."""
