"""Generate Kotlin unit test scaffolds from class and function metadata."""
