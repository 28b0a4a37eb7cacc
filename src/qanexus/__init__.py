"""qanexus: randomized test-data generators and assertion helpers.

:mod:`qanexus.datagen` produces random strings, dates, phone numbers,
identifiers and numeric values; :mod:`qanexus.assertions` offers predicate
checks that raise :class:`~qanexus.utils.errors.AssertionFailedError`.  The
command line interface lives in :mod:`qanexus.cli`.
"""

from .datagen import DataGenerator, MonthAbbreviation, SupportedDateFormat
from .models import ComplexNumber
from .utils.errors import AssertionFailedError, UsageError

__version__ = "0.1.0"

__all__ = [
    "AssertionFailedError",
    "ComplexNumber",
    "DataGenerator",
    "MonthAbbreviation",
    "SupportedDateFormat",
    "UsageError",
    "__version__",
]
