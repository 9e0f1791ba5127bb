"""PyBean Context — application context over the DI container."""

from pybean.context.application_context import ApplicationContext

__all__ = ["ApplicationContext"]
