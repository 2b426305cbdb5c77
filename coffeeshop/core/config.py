# coffeeshop/core/config.py
import os
import logging
from dotenv import dotenv_values, load_dotenv, find_dotenv

# Project root and .env path
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")

DEFAULT_DSN = "sqlite+pysqlite:///:memory:"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_logging_ready = False


def _norm_key(k: str) -> str:
    return k.replace("\ufeff", "").strip() if isinstance(k, str) else k


def load_env() -> str | None:
    """Load .env into os.environ without overriding values already set (CI, shell)."""
    dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
    if dotenv_path:
        cfg = dotenv_values(dotenv_path, encoding="utf-8-sig")
        for k, v in cfg.items():
            nk = _norm_key(k)
            if v is not None and (nk not in os.environ or not os.environ[nk].strip()):
                os.environ[nk] = v
        load_dotenv(dotenv_path, override=False)
    return dotenv_path or None


def _flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


load_env()

DATABASE_URL: str = (os.environ.get("DATABASE_URL") or "").strip() or DEFAULT_DSN
SQL_ECHO: bool = _flag("SQL_ECHO")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once."""
    global _logging_ready
    if _logging_ready:
        return
    logging.basicConfig(level=level or LOG_LEVEL, format=_LOG_FORMAT)
    _logging_ready = True
