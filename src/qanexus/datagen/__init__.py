"""Randomized test-data generators.

Every ``generate_*`` function is stateless and accepts an optional ``rng``;
:class:`DataGenerator` wraps them with configured defaults.
"""

from .date_rules import (
    generate_time,
    generate_timestamp,
    generate_unix_timestamp,
    is_leap_year,
    max_days,
    random_date,
    today_date,
)
from .generator import DataGenerator
from .identifier_rules import (
    generate_bank_account_number,
    generate_credit_card_number,
    generate_iban,
    generate_passport_number,
    generate_ssn,
    generate_uuid,
)
from .network_rules import generate_ip_address, generate_mac_address
from .number_rules import (
    generate_binary_data,
    generate_boolean,
    generate_byte,
    generate_byte_array,
    generate_char,
    generate_double,
    generate_float,
    generate_gaussian,
    generate_int,
    generate_long,
    generate_random_complex_number,
    generate_random_even,
    generate_random_exponential,
    generate_random_from_set,
    generate_random_odd,
    generate_random_percentage,
    generate_random_prime,
    generate_random_with_custom_distribution,
    generate_short,
    generate_unique_random_sequence,
    is_prime,
)
from .phone_rules import expand_phone_pattern, generate_phone_number, pattern_for_country
from .seed import secure_rng, seeded_rng
from .tables import PHONE_PATTERNS, MonthAbbreviation, SupportedDateFormat
from .text_rules import generate_email, generate_hex, generate_hex_color, generate_string

__all__ = [
    "DataGenerator",
    "MonthAbbreviation",
    "PHONE_PATTERNS",
    "SupportedDateFormat",
    "expand_phone_pattern",
    "generate_bank_account_number",
    "generate_binary_data",
    "generate_boolean",
    "generate_byte",
    "generate_byte_array",
    "generate_char",
    "generate_credit_card_number",
    "generate_double",
    "generate_email",
    "generate_float",
    "generate_gaussian",
    "generate_hex",
    "generate_hex_color",
    "generate_iban",
    "generate_int",
    "generate_ip_address",
    "generate_long",
    "generate_mac_address",
    "generate_passport_number",
    "generate_phone_number",
    "generate_random_complex_number",
    "generate_random_even",
    "generate_random_exponential",
    "generate_random_from_set",
    "generate_random_odd",
    "generate_random_percentage",
    "generate_random_prime",
    "generate_random_with_custom_distribution",
    "generate_short",
    "generate_ssn",
    "generate_string",
    "generate_time",
    "generate_timestamp",
    "generate_unique_random_sequence",
    "generate_unix_timestamp",
    "generate_uuid",
    "is_leap_year",
    "is_prime",
    "max_days",
    "pattern_for_country",
    "random_date",
    "secure_rng",
    "seeded_rng",
    "today_date",
]
