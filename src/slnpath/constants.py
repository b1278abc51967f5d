"""Constants shared across slnpath."""

# Both separators are recognized on every host, whatever its native one.
DIRECTORY_SEPARATORS = ("/", "\\")
