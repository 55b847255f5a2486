"""
Base service classes.
Services contain business logic and orchestrate between repositories.
"""
import logging

from core.clock import get_clock


class BaseService:
    """
    Base service class providing common functionality.
    Services should contain business logic and use repositories for data access.
    """
    
    def __init__(self, clock=None):
        self.logger = logging.getLogger(self.__class__.__module__)
        self.clock = get_clock(clock)
    
    def log_info(self, message: str, **context):
        """Log info message with context"""
        self.logger.info(f"{message} | Context: {context}")
