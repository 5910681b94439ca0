from .items import router, register_exception_handlers

__all__ = ["router", "register_exception_handlers"]
