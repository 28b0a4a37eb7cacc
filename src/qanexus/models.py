"""Small immutable value types returned by the generators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ComplexNumber:
    """A complex number ``real + imaginary*i``."""

    real: float
    imaginary: float

    def __str__(self) -> str:
        return f"{self.real:.2f} + {self.imaginary:.2f}i"

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)
