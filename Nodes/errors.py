class InvalidArgumentError(ValueError):
    """Argumento ausente (None) o mal formado en una operación del índice."""
