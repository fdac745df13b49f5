from .picker_session_use_case import PickerSessionUseCase

__all__ = ["PickerSessionUseCase"]
