class LeoError(RuntimeError):
    """A fatal precondition or command failure. The CLI reports it and exits with status 1."""
