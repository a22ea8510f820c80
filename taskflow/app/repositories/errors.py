from taskflow.libs.result import Error


class StoreError(Exception):
    """Typed persistence failure (integrity violation, lost race) raised by repositories"""

    def __init__(self, error: Error):
        self.error = error
        super().__init__(error.message)
