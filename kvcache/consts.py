# Aggregate size ceiling used when no explicit max_size_bytes is configured.
# Must stay finite: an unbounded store is rejected as misconfigured.
DEFAULT_MAX_SIZE_BYTES = 999_999_999

# Text encoding used by the default size estimator
SIZE_ENCODING = "utf-8"

# Compact JSON separators so the estimate matches canonical serialized text
JSON_SEPARATORS = (",", ":")

# Terminates every namespace prefix; namespace names may not contain it
NAMESPACE_SEPARATOR = ":"
