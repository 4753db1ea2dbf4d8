from fastapi import HTTPException


class MessageRequiredException(HTTPException):
    def __init__(self, detail: str = "Message is required"):
        super().__init__(status_code=400, detail=detail)
