"""
Monitoring Module - structured logging for AI operations.

    from astra.ai.monitoring import ai_logger
    
    ai_logger.log_request(request_id, prompt, provider, model)
    ai_logger.log_response(request_id, response)
"""

from astra.ai.monitoring.logger import AILogger, ai_logger, new_request_id

__all__ = [
    "AILogger",
    "ai_logger",
    "new_request_id",
]
