"""
Astra - natural-language desktop assistant backend.

Astra turns short utterances ("play kesariya", "open chrome") into either a
conversational reply or a concrete local action executed on this machine.
"""

__version__ = "0.1.0"
