class LogConfigError(ValueError):
    pass
