"""Credential resolution for the Labrinth client.

Labrinth authenticates with a personal access token sent verbatim in the
``Authorization`` header. This package only finds that token; attaching it
is the request builder's job.

Example:
    ```python
    from labrinth_client.auth import CredentialResolver

    token = CredentialResolver().resolve(env_var_name="LABRINTH_API_KEY")
    ```
"""

from labrinth_client.auth.credentials import CredentialResolver
from labrinth_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
