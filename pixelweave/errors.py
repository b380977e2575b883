from __future__ import annotations


class CombineError(RuntimeError):
    """Base class for failures while combining two images."""


class ImageReadError(CombineError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read image from {path}: {reason}")
        self.path = path


class ImageFormatError(CombineError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to determine image format of {path}")
        self.path = path


class ImageDecodeError(CombineError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to decode image {path}: {reason}")
        self.path = path


class FormatMismatchError(CombineError):
    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"Images use different formats ({first} vs {second})")
        self.formats = (first, second)


class BufferTooSmallError(CombineError):
    def __init__(self, size: int, capacity: int) -> None:
        super().__init__(f"Pixel data of {size} bytes exceeds output capacity of {capacity} bytes")
        self.size = size
        self.capacity = capacity


class ImageSaveError(CombineError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to save image to {path}: {reason}")
        self.path = path


class BufferLengthError(ValueError):
    """Raised when pixel buffers are not 4-aligned or differ in length."""


class CalculatorError(ValueError):
    """Base class for calculator input errors."""


class UnsupportedOperatorError(CalculatorError):
    def __init__(self, operator: str) -> None:
        super().__init__(f"Invalid operator used: {operator!r}")
        self.operator = operator


class InvalidNumberError(CalculatorError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Not a number: {text!r}")
        self.text = text
