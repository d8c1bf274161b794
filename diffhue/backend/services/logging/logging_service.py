import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler
from .formatters.color_formatter import ColorFormatter
from ....utils.color_support import color_support

def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    force_color: Optional[bool] = None,
    preserve_existing_handlers: bool = False,
) -> None:
    """
    Set up diagnostic logging.

    Console output always goes to stderr; stdout is reserved for the
    filtered diff.

    Args:
        verbose: Enable debug logging if True
        log_file: Optional path to log file
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
        force_color: Force (True) or disable (False) colored output. ``None`` keeps
            automatic detection.
        preserve_existing_handlers: Avoid clearing pre-configured logging handlers
            when set to True.
    """
    # Override color detection when requested, otherwise reset to automatic
    color_support.set_force_color(force_color)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not preserve_existing_handlers:
        root_logger.handlers.clear()

    console_handler: Optional[logging.Handler] = None

    if preserve_existing_handlers:
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and getattr(handler, 'stream', None) is sys.stderr:
                console_handler = handler
                break

    if console_handler is None:
        console_handler = logging.StreamHandler(color_support.wrap_stream(sys.stderr))
        console_handler.setFormatter(ColorFormatter())
        root_logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )

            # Use a non-colored formatter for file output
            file_formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            root_logger.addHandler(file_handler)

            logging.debug(color_support.success(
                f"Log file initialized: {log_file}"
            ))

        except OSError as e:
            logging.error(color_support.error(
                f"Failed to initialize log file: {e}"
            ))

    if verbose:
        logging.debug(color_support.info("Verbose logging enabled"))
    color_mode = "forced" if force_color is not None else "auto"
    logging.debug(color_support.info(
        f"Color support: {color_support.supports_color()} ({color_mode})"
    ))
