"""Constants used throughout the application."""

# Rendered report when no field failed
NO_VALIDATION_ERRORS = "no validation errors"

# Check failure messages, filled with str.format()
MSG_EMPTY = "value cannot be empty"
MSG_NOT_EMPTY = "value must be empty"
MSG_LENGTH = "value must be between {} and {} characters"
MSG_EXACT_LENGTH = "value should be exactly {} characters"
MSG_MIN = "value {} is smaller than minimum {}"
MSG_MAX = "value {} is larger than maximum {}"
MSG_BETWEEN = "value {} must be between {} and {}"
MSG_POSITIVE = "value {} should be greater than 0"
MSG_REGEX = "value {} failed to meet requirements"
MSG_EQUAL = "value {} does not evaluate to {}"
MSG_DATE_EQUAL = "the date/time provided {}, does not match the expected {}"
MSG_DATE_AFTER = "the date provided {}, must be after {}"
MSG_DATE_BEFORE = "the date provided {}, must be before {}"
MSG_UK_POST_CODE = "{} is not a valid UK PostCode"
MSG_US_ZIP_CODE = "{} is not a valid US ZipCode"
MSG_IS_NUMERIC = "string {} is not a number"
MSG_HAS_PREFIX = "value provided does not have a valid prefix"
MSG_NO_PREFIX = "value provided has an invalid prefix"
MSG_HEX = "value supplied is not valid hex"
MSG_EMAIL = "invalid email"
MSG_ANY_OF = "value not found in allowed values"

# Range accepted by is_numeric
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
