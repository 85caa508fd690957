"""LLM wire-format translators."""
