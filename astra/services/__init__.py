"""
Services module - everything that touches the host machine or ties the
pipeline together.

- shell: run shell commands and launch files/URLs
- media_locator: query → playable YouTube URL
- action_executor: Action → OS side effect → ActionResult
- chat_service: conversational replies
- assistant_service: the whole utterance → reply/action pipeline
"""
