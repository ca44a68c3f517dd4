"""
Errors raised by the task board and rendered as JSON by the API.
"""


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, model_state=None):
        super().__init__(message)
        self.message = message
        self.model_state = model_state

    def to_dict(self):
        body = {"message": self.message}
        if self.model_state:
            body["modelState"] = self.model_state
        return body


class ValidationError(ApiError):
    status_code = 400


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404
