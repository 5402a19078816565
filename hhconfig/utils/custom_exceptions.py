from .logger import logger


class BaseCustomException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RenderError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to render config: {reason}")


class EnvFileError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to load env file: {reason}")


class MissingEnvError(BaseCustomException):
    def __init__(self, variable_name: str):
        super().__init__(f"Env not found: {variable_name}")
        self.variable_name = variable_name


class NodeError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to receive chain ID from node: {reason}")


class HardhatError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to run Hardhat: {reason}")


class ExceptionHandler:
    raise_exception = True

    @staticmethod
    def initialize(raise_exception: bool) -> None:
        ExceptionHandler.raise_exception = raise_exception

    @staticmethod
    def raise_exception_or_log(custom_exception: BaseCustomException) -> None:
        if ExceptionHandler.raise_exception:
            raise custom_exception
        logger.error(str(custom_exception))
