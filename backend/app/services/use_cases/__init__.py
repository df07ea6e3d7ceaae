from app.services.use_cases.process import ProcessTextUseCase

__all__ = ["ProcessTextUseCase"]
