from .requests import ResponsesApiClient, ResponsesApiError, SubmittedResponse

__all__ = [
    "ResponsesApiClient",
    "ResponsesApiError",
    "SubmittedResponse",
]
