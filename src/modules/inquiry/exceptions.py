from typing import Any, Dict, Optional

from src.common.utils.global_messages import GlobalMessages


class InquiryError(Exception):
    """Base error that maps straight onto an HTTP status and JSON body."""

    status_code: int = 500

    def __init__(self, message: str, debug: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.debug = debug

    def to_payload(self) -> Dict[str, Any]:
        payload = {"error": self.message}
        if self.debug is not None:
            payload["debug"] = self.debug
        return payload


class InquiryValidationError(InquiryError):
    status_code = 400


class MailConfigurationError(InquiryError):
    status_code = 500

    def __init__(self, message: str, env_var: str):
        super().__init__(message, debug=GlobalMessages.ENV_VAR_NOT_SET.format(name=env_var))
        self.env_var = env_var
