"""Core pipeline: tokenizer, configuration, discovery and runner."""
