# blog_mastermind/core/env.py

import logging
import os
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_FILES = {
	"staging": ".env.staging",
	"prod": ".env.production",
	"production": ".env.production",
}


def _env_filename() -> str:
	"""Map the ENV flag to its dotenv file name; anything else is local."""
	return ENV_FILES.get(os.getenv("ENV", "local").lower(), ".env")


def _select_env_path() -> str:
	"""Resolve the dotenv file to load.

	ENV_FILE, when set, is used as is. Otherwise the file for the active ENV
	is searched for from the working directory upward, which also works when
	the package is installed outside the project tree. Returns "" if none
	is found.
	"""
	override = os.getenv("ENV_FILE")
	if override:
		return override
	return find_dotenv(_env_filename(), usecwd=True)


env_path = _select_env_path()
if env_path:
	load_dotenv(env_path)
else:
	logger.warning(f"No {_env_filename()} file found; using process environment only")
