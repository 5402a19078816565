import os
from typing import Mapping

from .common import mask_text
from .config_builder import build_template, env_consumers
from .constants import ENV_VAR_NAMES
from .custom_exceptions import ExceptionHandler, MissingEnvError
from .custom_types import EnvStatus
from .logger import logger

REPORT_HEADER = ["#", "Variable", "Set", "Value", "Used by"]


def collect_env_status(env: Mapping[str, str] | None = None) -> list[EnvStatus]:
    env = os.environ if env is None else env
    consumers = env_consumers(build_template())

    statuses = []
    for name in ENV_VAR_NAMES:
        value = env.get(name)
        statuses.append(
            EnvStatus(
                name=name,
                is_set=bool(value),
                printable_value=mask_text(value) if value else "-",
                used_by=consumers.get(name, []),
            )
        )
    return statuses


def check_env(env: Mapping[str, str] | None = None, strict: bool = False) -> list[str]:
    """
    Report which variables the config reads are set.

    Every unset variable is passed to ExceptionHandler as a MissingEnvError, so
    with `strict` the first one is raised and otherwise each is logged. Returns
    the names of the unset variables.
    """
    statuses = collect_env_status(env)

    table = [
        [index + 1, status.name, status.is_set, status.printable_value, ", ".join(status.used_by)]
        for index, status in enumerate(statuses)
    ]
    logger.report_table(table, REPORT_HEADER, ok_column=2)

    missing = [status.name for status in statuses if not status.is_set]
    if not missing:
        logger.okay("All env vars are set")
        return missing

    ExceptionHandler.initialize(strict)
    for name in missing:
        ExceptionHandler.raise_exception_or_log(MissingEnvError(name))

    logger.warn(f"Env vars not set: {len(missing)} / {len(statuses)}")
    return missing
