"""Resolve the Labrinth token and connection settings from several sources.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv loads it into the environment)
4. Default value

Example:
    ```python
    from labrinth_client.auth import CredentialResolver

    resolver = CredentialResolver()

    # Personal access token, e.g. "mrp_..."
    token = resolver.resolve(env_var_name="LABRINTH_API_KEY")

    # Token kept in a file, path given directly or through an env var
    token = resolver.resolve_from_file(env_var_name="LABRINTH_API_KEY_FILE")
    ```

Tokens are never logged; only the source they came from is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from labrinth_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve settings from explicit values, the environment, .env and defaults.

    The .env file is loaded at most once per resolver, under a lock, so a
    resolver can be shared between threads.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to the .env file. If None, python-dotenv searches
                the current and parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                # Existing environment variables keep precedence over .env values
                load_dotenv(dotenv_path=self._dotenv_path, override=False)
                logger.debug("Loaded .env file for Labrinth settings")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a setting, first match wins.

        Args:
            value: Explicit value, ignores every other source when set.
            env_var_name: Environment variable to read (also covers .env).
            default: Fallback when no other source has a value.
            required: Raise CredentialNotFoundError instead of returning None.
            secret: Mask the value in log messages.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and not found anywhere.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a token from a file.

        The path may come directly or from ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. Surrounding whitespace is stripped.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
            logger.debug(f"Resolved credential from file: {path_obj} (***)")
            return content

        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None

        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None

        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None
