import logging.config
from pathlib import Path
from main.config import settings

# Chatty client libraries used for uploads and map link resolution
QUIET_LOGGERS = ("botocore", "boto3", "s3transfer", "urllib3", "PIL")


def setup_logging(log_dir=None, level=None):
    """Console plus ``lokapedia.log`` under ``log_dir``"""
    log_dir = Path(log_dir or settings.LOG_DIR)
    level = level or settings.LOG_LEVEL
    log_dir.mkdir(parents=True, exist_ok=True)

    loggers = {
        "": {"handlers": ["console", "file"], "level": level},
        "werkzeug": {"handlers": ["console", "file"], "level": "INFO", "propagate": False},
    }
    loggers.update({name: {"level": "WARNING"} for name in QUIET_LOGGERS})

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                },
                "file": {
                    "level": level,
                    "class": "logging.FileHandler",
                    "filename": str(log_dir / "lokapedia.log"),
                    "encoding": "utf-8",
                    "formatter": "standard",
                },
            },
            "loggers": loggers,
        }
    )
