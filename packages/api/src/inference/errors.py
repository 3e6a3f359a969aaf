# This project was developed with assistance from AI tools.
"""Errors raised at the LLM transport boundary."""


class LLMConfigurationError(RuntimeError):
    """No provider credential is configured; no network call was attempted."""


class LLMTransportError(RuntimeError):
    """The provider call failed or returned a response we could not read."""
