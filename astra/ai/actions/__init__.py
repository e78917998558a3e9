"""
AI Actions Module - Action definitions and validation.

This module provides:
- ActionRegistry: Central registry of every action Astra understands
- ActionDefinition: Schema for action definitions
- ActionCategory: Categories for organizing actions
"""

from astra.ai.actions.registry import (
    action_registry,
    ActionRegistry,
    ActionDefinition,
    ActionCategory,
)

__all__ = [
    "action_registry",
    "ActionRegistry",
    "ActionDefinition",
    "ActionCategory",
]
