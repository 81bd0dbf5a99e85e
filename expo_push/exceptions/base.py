class ExpoError(Exception):
    detail: str = "An unexpected error occurred"
    code: int = 0

    def __init__(self, detail: str | None = None, code: int | None = None):
        if detail:
            self.detail = detail
        if code is not None:
            self.code = code
        super().__init__(self.detail)
