from .cssColors import router as cssColors_router

__all__ = ["cssColors_router"]
