import datetime
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name: str, log_dir: Union[str, Path, None] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for a service.

    Directory layout:
    {log_dir}/                      - logs of the current session
        {service_name}.log
        all.log
    {log_dir}/history/              - previous sessions
        {service_name}_history.log

    The service logger gets its own rotating file and a console handler. The
    shared all.log handler sits on the root logger and is added once per path.
    Passing a package name as service_name makes its module loggers write to the
    same files.

    :param service_name: Service name, also the logger name
    :param log_dir: Log directory, "logs" by default
    :param level: Level name, INFO by default
    :return: The service logger
    """
    logs_dir = Path(log_dir or 'logs')
    history_dir = logs_dir / 'history'
    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)
    history_dir.mkdir(exist_ok=True, mode=0o755)

    current_log_path = logs_dir / f'{service_name}.log'
    current_all_log_path = logs_dir / 'all.log'
    history_log_path = history_dir / f'{service_name}_history.log'

    log_level = logging.getLevelName((level or 'INFO').upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(service_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _archive_to_history(current_log_path, history_log_path, service_name)

    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(current_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    logger.setLevel(log_level)
    logger.addHandler(service_handler)
    logger.addHandler(console_handler)

    root_logger = logging.getLogger()
    all_log_target = str(current_all_log_path.resolve())
    all_handler_exists = any(
        isinstance(handler, RotatingFileHandler) and handler.baseFilename == all_log_target
        for handler in root_logger.handlers
    )
    if not all_handler_exists:
        all_handler = RotatingFileHandler(
            all_log_target,
            maxBytes=20*1024*1024,  # 20 MB, shared by every service
            backupCount=5,
            encoding='utf-8'
        )
        all_handler.setFormatter(formatter)
        all_handler.setLevel(log_level)
        root_logger.addHandler(all_handler)

    return logger


def _archive_to_history(current_path: Path, history_path: Path, service_label: str) -> None:
    """Append the previous session's log to the history file and empty it."""
    if not current_path.exists():
        return

    current_content = current_path.read_text(encoding='utf-8').strip()
    if not current_content:
        return

    timestamp = datetime.datetime.now().strftime(DATE_FORMAT)
    separator = "=" * 80
    session_header = (
        f"\n\n{separator}\n"
        f"SESSION: {service_label}\n"
        f"ARCHIVED AT: {timestamp}\n"
        f"{separator}\n\n"
    )

    with open(history_path, 'a', encoding='utf-8') as f:
        f.write(session_header)
        f.write(current_content)
        f.write("\n")

    current_path.write_text('', encoding='utf-8')


def get_recent_history(service_name: Optional[str] = None, lines: int = 50, from_history: bool = True,
                       log_dir: Union[str, Path, None] = None) -> List[str]:
    """
    Return the last lines of a service's history or current log.

    :param service_name: Service name, None for the shared all.log
    :param lines: Number of lines to return
    :param from_history: True - read history, False - read the current log
    :param log_dir: Log directory, "logs" by default
    :return: List of lines, empty when the file does not exist
    """
    logs_dir = Path(log_dir or 'logs')
    if service_name is None:
        file_path = logs_dir / 'all.log'
    elif from_history:
        file_path = logs_dir / 'history' / f'{service_name}_history.log'
    else:
        file_path = logs_dir / f'{service_name}.log'

    if not file_path.exists():
        return []

    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.readlines()

    return content[-lines:] if len(content) > lines else content
