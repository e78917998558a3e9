"""
AI Module - the language-model side of Astra.

Module Structure:
================
- providers/: LLM provider client (Groq, OpenAI-compatible API)
- intent/: Intent classification and action parsing
- actions/: Registry of the actions Astra understands
- prompts/: Prompt templates
- monitoring/: Structured logging of AI operations

Flow:
=====
1. User: "play kesariya"
2. Intent Classifier: {"mode": "action"}
3. Action Parser: {"action_id": "play_song", "params": {"query": "kesariya"}}
4. Action Executor (services/): resolves and launches the media URL

Every step degrades to a deterministic answer when the model is missing
or misbehaves, so the pipeline works offline.
"""
