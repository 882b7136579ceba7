class ConsoleError(Exception):
    def __init__(self, reason, details=None):
        self.reason = reason
        self.details = details
        super().__init__(reason)

class ConsoleConfigError(ConsoleError, ValueError):
    pass
