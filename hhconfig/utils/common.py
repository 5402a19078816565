import os

import requests
from dotenv import load_dotenv

from .logger import logger
from .custom_exceptions import EnvFileError, NodeError


def load_env(variable_name, masked=False, env=None):
    """
    Read `variable_name` from `env` (defaults to os.environ) and log it.

    An empty value is logged as unset. Nothing is validated; the value is
    returned as the mapping holds it.
    """
    env = os.environ if env is None else env
    value = env.get(variable_name)

    if value:
        printable_value = mask_text(value) if masked else value
        logger.okay(f"{variable_name}", printable_value)
    else:
        logger.info(f"{variable_name} var is not set")

    return value


def load_env_file(path: str) -> bool:
    """
    Seed the environment from a dotenv file without overriding variables
    that are already set. A missing file only produces a warning.
    """
    if not os.path.isfile(path):
        logger.warn("Env file not found", path)
        return False

    try:
        loaded = load_dotenv(dotenv_path=path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"{path}: {e}")

    logger.okay("Env file loaded", path)
    return loaded


def _handle_request_errors(error_class):
    """Decorator to handle common HTTP request errors and convert them to custom exceptions."""

    def decorator(func):
        def wrapper(*args, **kwargs):
            try:
                response = func(*args, **kwargs)
                response.raise_for_status()
                return response
            except requests.exceptions.HTTPError as http_err:
                raise error_class(f"HTTP error occurred: {http_err}")
            except requests.exceptions.ConnectionError as conn_err:
                raise error_class(f"Connection error occurred: {conn_err}")
            except requests.exceptions.Timeout as timeout_err:
                raise error_class(f"Timeout error occurred: {timeout_err}")
            except requests.exceptions.RequestException as req_err:
                raise error_class(f"Request exception occurred: {req_err}")

        return wrapper

    return decorator


@_handle_request_errors(NodeError)
def pull(url, payload=None, headers=None, timeout=10):
    logger.log(f"Pull: {mask_text(url)}")
    return requests.post(url, data=payload, headers=headers, timeout=timeout)


def mask_text(text, mask_start=3, mask_end=3):
    if text is None:
        return "None"
    text_length = len(text)
    if text_length <= mask_start + mask_end:
        return "*" * text_length
    mask = "*" * (text_length - mask_start - mask_end)
    return text[:mask_start] + mask + text[text_length - mask_end :]
