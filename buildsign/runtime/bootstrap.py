# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for buildsign.

Called once per CLI invocation, after the project config is loaded:
  1. Validate the interpreter
  2. Configure the runtime logger from the global config and route the
     given loggers into the same log file
  3. Log a startup record

There is no persistent state; the next invocation starts from scratch.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from buildsign.config.schema import GlobalConfig
from buildsign.logging.logger import add_file_handler, get_logger
from buildsign.runtime.environment import check_minimum_python, get_system_info
from buildsign.utils.paths import resolve_against


def bootstrap(
    config: GlobalConfig,
    project_root: Optional[Path] = None,
    loggers: Sequence[str] = (),
) -> logging.Logger:
    """
    Put the process into a known state before any build step runs.

    Args:
        config: The validated global configuration.
        project_root: Base for a relative `log_file`; defaults to the cwd.
        loggers: Names of already configured loggers that should also write
                 to `log_file`. Their levels are left alone.

    Returns:
        The runtime logger, configured per `config`.

    Raises:
        OSError: If the log file can't be created.
    """
    check_minimum_python()

    log_file = None
    if config.log_file is not None:
        log_file = resolve_against(Path(config.log_file), project_root or Path.cwd())

    logger = get_logger("buildsign.runtime", log_level=config.log_level, log_file=log_file)
    if log_file is not None:
        for name in loggers:
            add_file_handler(logging.getLogger(name), log_file)

    system_info = get_system_info()
    logger.info(
        "buildsign bootstrap complete",
        extra={
            "project": config.project_name,
            "config_version": config.config_version,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
        },
    )
    return logger
